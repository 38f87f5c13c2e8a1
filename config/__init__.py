"""
Configuration for the example program.

This module exports the transfer config loader.
"""

from .transfer import load_transfer_config, get_config_file, TransferConfigError

__all__ = ['load_transfer_config', 'get_config_file', 'TransferConfigError']
