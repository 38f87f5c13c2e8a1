"""
Unit tests for the transfer configuration loader.

Run with: pytest tests/test_transfer_config.py -v
"""

import logging
import sys
from pathlib import Path

import pytest
from dotenv import dotenv_values

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from config import transfer
from config.transfer import (
    TransferConfigError,
    get_config_file,
    load_transfer_config,
)
from epcqr.builder import PayloadBuilder


class TestGetConfigFile:
    """Tests for config file resolution."""

    def test_explicit_path(self, tmp_path):
        """Test that an explicit path is used as is."""
        config_file = tmp_path / "my_transfer.yaml"
        config_file.write_text("version: V2\n", encoding="utf-8")

        assert get_config_file(config_file) == config_file

    def test_explicit_path_missing(self, tmp_path):
        """Test that a missing explicit path raises."""
        with pytest.raises(FileNotFoundError, match="not found"):
            get_config_file(tmp_path / "missing.yaml")

    def test_custom_config_preferred(self, tmp_path, monkeypatch):
        """Test that transfer.yaml wins over the example file."""
        monkeypatch.setattr(transfer, "CONFIG_DIR", tmp_path)
        (tmp_path / "transfer.yaml").write_text("version: V2\n", encoding="utf-8")
        (tmp_path / "transfer.yaml.example").write_text("version: V1\n", encoding="utf-8")

        assert get_config_file() == tmp_path / "transfer.yaml"

    def test_example_fallback_warns(self, tmp_path, monkeypatch, caplog):
        """Test that the example file is used with a warning."""
        monkeypatch.setattr(transfer, "CONFIG_DIR", tmp_path)
        (tmp_path / "transfer.yaml.example").write_text("version: V1\n", encoding="utf-8")

        with caplog.at_level(logging.WARNING):
            path = get_config_file()

        assert path == tmp_path / "transfer.yaml.example"
        assert "transfer.yaml.example" in caplog.text

    def test_no_config_raises(self, tmp_path, monkeypatch):
        """Test that a missing config raises FileNotFoundError."""
        monkeypatch.setattr(transfer, "CONFIG_DIR", tmp_path)

        with pytest.raises(FileNotFoundError, match="No transfer configuration"):
            get_config_file()

    def test_env_example_leaves_config_path_unset(self):
        """Test that copying .env.example keeps the default config lookup."""
        env_example = Path(__file__).parent.parent / ".env.example"

        values = dotenv_values(env_example)

        assert not values.get("EPC_CONFIG")


class TestLoadTransferConfig:
    """Tests for YAML loading."""

    def test_loads_mapping(self, tmp_path):
        """Test that a YAML mapping is returned as a dict."""
        config_file = tmp_path / "transfer.yaml"
        config_file.write_text(
            "version: V2\n"
            "character_set: UTF8\n"
            "identification: SCT\n"
            "beneficiary: Codeberg e.V.\n"
            "iban: DE90 8306 5408 0004 1042 42\n"
            "amount: \"10.00\"\n",
            encoding="utf-8",
        )

        config = load_transfer_config(config_file)

        assert config["beneficiary"] == "Codeberg e.V."
        assert config["amount"] == "10.00"

    def test_malformed_yaml_raises(self, tmp_path):
        """Test that invalid YAML raises TransferConfigError."""
        config_file = tmp_path / "transfer.yaml"
        config_file.write_text("version: [V1\n", encoding="utf-8")

        with pytest.raises(TransferConfigError, match="Invalid YAML"):
            load_transfer_config(config_file)

    def test_non_mapping_raises(self, tmp_path):
        """Test that a YAML list is rejected."""
        config_file = tmp_path / "transfer.yaml"
        config_file.write_text("- V1\n- UTF8\n", encoding="utf-8")

        with pytest.raises(TransferConfigError, match="mapping"):
            load_transfer_config(config_file)

    def test_empty_file_raises(self, tmp_path):
        """Test that an empty file is rejected."""
        config_file = tmp_path / "transfer.yaml"
        config_file.write_text("", encoding="utf-8")

        with pytest.raises(TransferConfigError):
            load_transfer_config(config_file)

    def test_shipped_example_builds(self):
        """Test that the example config describes a valid payload."""
        config = load_transfer_config(transfer.CONFIG_DIR / "transfer.yaml.example")

        result = PayloadBuilder.from_dict(config).build()

        assert result.success is True
        assert result.payload.iban == "DE90830654080004104242"

    def test_unquoted_amount_is_rejected(self, tmp_path):
        """Test that a YAML float loses its second decimal and fails validation."""
        config_file = tmp_path / "transfer.yaml"
        config_file.write_text(
            "version: V2\n"
            "character_set: UTF8\n"
            "identification: SCT\n"
            "beneficiary: Codeberg e.V.\n"
            "iban: DE90830654080004104242\n"
            "amount: 10.00\n",
            encoding="utf-8",
        )

        result = PayloadBuilder.from_dict(load_transfer_config(config_file)).build()

        assert result.success is False
        assert result.error.name == "INVALID_AMOUNT"
