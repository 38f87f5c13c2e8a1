"""
Transfer configuration for the example program.

Loads the payment attributes of one credit transfer from a YAML file,
so the QR code can be regenerated without code changes.
"""

import logging
from pathlib import Path
from typing import Optional, Union

import yaml

logger = logging.getLogger(__name__)

CONFIG_DIR = Path(__file__).parent


class TransferConfigError(Exception):
    """Error raised when the transfer configuration cannot be used."""
    pass


def get_config_file(path: Optional[Union[str, Path]] = None) -> Path:
    """
    Determine which transfer config file to use.

    Priority:
    1. Explicit path (e.g. from the EPC_CONFIG environment variable)
    2. transfer.yaml (user's custom config, gitignored)
    3. transfer.yaml.example (template/fallback)

    Returns:
        Path to the config file to use

    Raises:
        FileNotFoundError: If no config file exists
    """
    if path:
        explicit = Path(path)
        if not explicit.exists():
            raise FileNotFoundError(f"Transfer config not found: {explicit}")
        return explicit

    custom_config = CONFIG_DIR / "transfer.yaml"
    if custom_config.exists():
        return custom_config

    example_config = CONFIG_DIR / "transfer.yaml.example"
    if example_config.exists():
        logger.warning(
            "Using transfer.yaml.example - copy it to transfer.yaml and enter your transfer"
        )
        return example_config

    raise FileNotFoundError(
        "No transfer configuration found.\n"
        "Please copy config/transfer.yaml.example to config/transfer.yaml"
    )


def load_transfer_config(path: Optional[Union[str, Path]] = None) -> dict:
    """
    Load the transfer description from YAML.

    Args:
        path: Optional explicit config file

    Returns:
        Dictionary with payload field names as keys

    Raises:
        FileNotFoundError: If no config file exists
        TransferConfigError: If the YAML is malformed or not a mapping
    """
    config_file = get_config_file(path)

    try:
        with open(config_file, 'r', encoding='utf-8') as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise TransferConfigError(f"Invalid YAML in {config_file.name}: {e}")

    if not isinstance(config, dict):
        raise TransferConfigError(
            f"{config_file.name} must contain a mapping of payload fields"
        )

    logger.info(f"Loaded {len(config)} transfer field(s) from {config_file.name}")
    return config
