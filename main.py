"""
EPC QR Code Generator - Example Program

This script shows the library from the caller's side:
1. Load the transfer description from config/transfer.yaml
2. Build and validate the EPC payload
3. Print the payload text
4. Optionally render it as a QR code PNG

Environment variables (read from .env if present):
- EPC_CONFIG: Path of the transfer YAML (optional)
- EPC_QR_OUTPUT: Path of the PNG to write (optional)
"""

import os
import sys
import logging
from typing import Optional

import qrcode
from qrcode.constants import ERROR_CORRECT_M
from qrcode.util import QRData, MODE_8BIT_BYTE
from dotenv import load_dotenv

# Load .env file if it exists (for local development)
load_dotenv()

from epcqr import Payload, PayloadBuilder, PayloadBuildError
from config.transfer import load_transfer_config, TransferConfigError

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout)
    ]
)
logger = logging.getLogger(__name__)


def build_payload(config_path: Optional[str] = None) -> Payload:
    """
    Build the payload described by the transfer config.

    Args:
        config_path: Optional explicit config file

    Returns:
        Validated Payload

    Raises:
        FileNotFoundError: If no config file exists
        TransferConfigError: If the config file is unusable
        ValueError: If the config contains unknown fields or enum values
        PayloadBuildError: If the payload breaks a validation rule
    """
    config = load_transfer_config(config_path)
    return PayloadBuilder.from_dict(config).build().unwrap()


def render_qr_code(payload: Payload, output_path: str) -> None:
    """
    Write the payload as a QR code PNG.

    The payload bytes are added in byte mode with error correction
    level M, as recommended for EPC QR codes.

    Args:
        payload: Validated payload
        output_path: Destination PNG file
    """
    qr = qrcode.QRCode(
        version=None,
        error_correction=ERROR_CORRECT_M,
        box_size=10,
        border=4,
    )
    qr.add_data(QRData(payload.to_bytes(), mode=MODE_8BIT_BYTE))
    qr.make(fit=True)
    image = qr.make_image(fill_color="black", back_color="white")
    image.save(output_path)
    logger.info(f"QR code written to {output_path}")


def main():
    """
    Main entry point.

    Exits with status 1 if the configuration or the payload is invalid.
    """
    config_path = os.environ.get('EPC_CONFIG')
    output_path = os.environ.get('EPC_QR_OUTPUT')

    try:
        payload = build_payload(config_path)
    except (FileNotFoundError, TransferConfigError) as e:
        logger.error(f"Configuration error: {e}")
        sys.exit(1)
    except ValueError as e:
        logger.error(f"Invalid transfer config: {e}")
        sys.exit(1)
    except PayloadBuildError as e:
        logger.error(f"Payload rejected: {e}")
        sys.exit(1)

    logger.info(f"Payload built for {payload.beneficiary} ({payload.iban})")
    print(payload.to_string())

    if output_path:
        render_qr_code(payload, output_path)


if __name__ == "__main__":
    main()
