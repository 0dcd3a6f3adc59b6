import pytest
import structlog

from crypto_utils import config
from crypto_utils.log import configure_logging


class TestConfig:
    """Test suite for environment overrides"""

    def test_defaults(self, monkeypatch):
        """Test values when nothing is set"""
        for name in ("LOG_LEVEL", "LOG_FORMAT", "API_HOST", "API_PORT"):
            monkeypatch.delenv(f"CRYPTO_UTILS_{name}", raising=False)
        assert config.log_level() == "INFO"
        assert config.log_format() == "console"
        assert config.api_host() == "127.0.0.1"
        assert config.api_port() == 8000

    def test_overrides(self, monkeypatch):
        """Test that environment variables are read"""
        monkeypatch.setenv("CRYPTO_UTILS_LOG_LEVEL", "debug")
        monkeypatch.setenv("CRYPTO_UTILS_LOG_FORMAT", "JSON")
        monkeypatch.setenv("CRYPTO_UTILS_API_PORT", "9001")
        assert config.log_level() == "DEBUG"
        assert config.log_format() == "json"
        assert config.api_port() == 9001

    def test_invalid_values(self, monkeypatch):
        """Test that bad overrides fail loudly"""
        monkeypatch.setenv("CRYPTO_UTILS_LOG_FORMAT", "xml")
        with pytest.raises(ValueError):
            config.log_format()
        monkeypatch.setenv("CRYPTO_UTILS_API_PORT", "eighty")
        with pytest.raises(ValueError, match="API_PORT"):
            config.api_port()


class TestLogging:
    """Test suite for structlog configuration"""

    def test_json_output(self, capsys):
        """Test that json mode writes JSON events to stderr"""
        configure_logging("INFO", "json")
        structlog.get_logger().info("hello", algorithm="AES")
        err = capsys.readouterr().err
        assert '"event": "hello"' in err
        assert '"algorithm": "AES"' in err

    def test_level_filtering(self, capsys):
        """Test that events below the level are dropped"""
        configure_logging("WARNING", "console")
        structlog.get_logger().info("quiet")
        assert "quiet" not in capsys.readouterr().err

    def test_invalid_level(self):
        """Test that an unknown level is rejected"""
        with pytest.raises(ValueError, match="Invalid log level"):
            configure_logging("LOUD", "console")
