"""
Unit tests for the example program.

Run with: pytest tests/test_main.py -v

The QR library is mocked, so these tests check how the payload is
handed over rather than the image itself.
"""

import sys
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import main
from epcqr.errors import PayloadBuildError

VALID_CONFIG = (
    "version: V1\n"
    "character_set: UTF8\n"
    "identification: SCT\n"
    "bic: GENODEF1SLR\n"
    "beneficiary: Codeberg e.V.\n"
    "iban: DE90 8306 5408 0004 1042 42\n"
    "amount: \"10.00\"\n"
    "remittance_text: for the good cause\n"
)


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "transfer.yaml"
    path.write_text(VALID_CONFIG, encoding="utf-8")
    return path


class TestBuildPayload:
    """Tests for build_payload."""

    def test_builds_from_config(self, config_file):
        """Test that the config is turned into a payload."""
        payload = main.build_payload(str(config_file))

        lines = payload.to_string().split("\n")
        assert lines[6] == "DE90830654080004104242"
        assert lines[7] == "10.00"
        assert lines[10] == "for the good cause"

    def test_invalid_payload_raises(self, tmp_path):
        """Test that validation failures surface as PayloadBuildError."""
        path = tmp_path / "transfer.yaml"
        path.write_text(VALID_CONFIG.replace("GENODEF1SLR", "''"), encoding="utf-8")

        with pytest.raises(PayloadBuildError, match="BIC is missing"):
            main.build_payload(str(path))


class TestRenderQrCode:
    """Tests for render_qr_code."""

    def test_payload_bytes_added_in_byte_mode(self, config_file, tmp_path):
        """Test that the encoded payload is passed to the QR library."""
        payload = main.build_payload(str(config_file))
        mock_qr = MagicMock()

        with patch.object(main.qrcode, "QRCode", return_value=mock_qr) as mock_cls:
            main.render_qr_code(payload, str(tmp_path / "qr.png"))

        assert mock_cls.call_args.kwargs["error_correction"] == main.ERROR_CORRECT_M
        qr_data = mock_qr.add_data.call_args.args[0]
        assert qr_data.data == payload.to_bytes()
        assert qr_data.mode == main.MODE_8BIT_BYTE
        mock_qr.make_image.return_value.save.assert_called_once_with(str(tmp_path / "qr.png"))


class TestMain:
    """Tests for the main entry point."""

    def test_prints_payload(self, config_file, monkeypatch, capsys):
        """Test that the payload text is printed."""
        monkeypatch.setenv("EPC_CONFIG", str(config_file))
        monkeypatch.delenv("EPC_QR_OUTPUT", raising=False)

        main.main()

        assert "DE90830654080004104242\n10.00" in capsys.readouterr().out

    def test_renders_when_output_set(self, config_file, tmp_path, monkeypatch):
        """Test that EPC_QR_OUTPUT triggers rendering."""
        output = tmp_path / "qr.png"
        monkeypatch.setenv("EPC_CONFIG", str(config_file))
        monkeypatch.setenv("EPC_QR_OUTPUT", str(output))

        with patch.object(main, "render_qr_code") as mock_render:
            main.main()

        mock_render.assert_called_once()
        assert mock_render.call_args.args[1] == str(output)

    def test_missing_config_exits(self, tmp_path, monkeypatch):
        """Test that a missing config file exits with status 1."""
        monkeypatch.setenv("EPC_CONFIG", str(tmp_path / "missing.yaml"))

        with pytest.raises(SystemExit) as exc_info:
            main.main()

        assert exc_info.value.code == 1

    def test_unknown_field_exits(self, tmp_path, monkeypatch):
        """Test that config typos exit with status 1."""
        path = tmp_path / "transfer.yaml"
        path.write_text(VALID_CONFIG + "colour: blue\n", encoding="utf-8")
        monkeypatch.setenv("EPC_CONFIG", str(path))

        with pytest.raises(SystemExit) as exc_info:
            main.main()

        assert exc_info.value.code == 1

    def test_invalid_payload_exits(self, tmp_path, monkeypatch):
        """Test that payload validation failures exit with status 1."""
        path = tmp_path / "transfer.yaml"
        path.write_text(VALID_CONFIG.replace("1042 42", "1042 43"), encoding="utf-8")
        monkeypatch.setenv("EPC_CONFIG", str(path))

        with pytest.raises(SystemExit) as exc_info:
            main.main()

        assert exc_info.value.code == 1
