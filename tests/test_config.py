import logging
import os
from unittest.mock import patch

from servicewait.config import LOG_FORMAT, Config, configure_logging


class TestConfig:
    """Test environment-driven settings"""

    def test_defaults(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("SERVICEWAIT_LOG_LEVEL", raising=False)
        monkeypatch.delenv("SERVICEWAIT_LOG_FILE", raising=False)

        cfg = Config()

        assert cfg.log_level == "WARNING"
        assert cfg.log_file is None

    def test_environment_overrides(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("SERVICEWAIT_LOG_LEVEL", "debug")
        monkeypatch.setenv("SERVICEWAIT_LOG_FILE", str(tmp_path / "wait.log"))

        cfg = Config()

        assert cfg.log_level == "DEBUG"
        assert cfg.log_file == str(tmp_path / "wait.log")

    def test_dotenv_file_is_read(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("SERVICEWAIT_LOG_LEVEL", raising=False)
        (tmp_path / ".env").write_text("SERVICEWAIT_LOG_LEVEL=info\n")

        assert Config().log_level == "INFO"
        assert "SERVICEWAIT_LOG_LEVEL" not in os.environ

    def test_environment_wins_over_dotenv(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("SERVICEWAIT_LOG_LEVEL", "error")
        (tmp_path / ".env").write_text("SERVICEWAIT_LOG_LEVEL=info\n")

        assert Config().log_level == "ERROR"

    def test_dotenv_does_not_leak_into_environment(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("HTTP_PROXY", raising=False)
        monkeypatch.delenv("REQUESTS_CA_BUNDLE", raising=False)
        (tmp_path / ".env").write_text(
            "HTTP_PROXY=http://127.0.0.1:1\nREQUESTS_CA_BUNDLE=/nowhere.pem\nSERVICEWAIT_LOG_LEVEL=debug\n"
        )
        before = dict(os.environ)

        with patch("servicewait.config.logging.basicConfig"):
            configure_logging()

        assert dict(os.environ) == before

    def test_waiting_constants_are_fixed(self, monkeypatch):
        monkeypatch.setenv("SERVICEWAIT_MAX_RETRIES", "3")

        cfg = Config()

        assert cfg.MAX_RETRIES == 30
        assert cfg.PROBE_TIMEOUT == 2.0
        assert cfg.RETRY_DELAY == 2.0


class TestConfigureLogging:
    """Test logging setup"""

    def test_stderr_only_by_default(self):
        cfg = Config.__new__(Config)
        cfg.log_level = "INFO"
        cfg.log_file = None

        with patch("servicewait.config.logging.basicConfig") as basic_config:
            configure_logging(cfg)

        kwargs = basic_config.call_args.kwargs
        assert kwargs["level"] == logging.INFO
        assert kwargs["format"] == LOG_FORMAT
        assert [type(h) for h in kwargs["handlers"]] == [logging.StreamHandler]

    def test_file_handler_when_configured(self, tmp_path):
        cfg = Config.__new__(Config)
        cfg.log_level = "bogus"
        cfg.log_file = str(tmp_path / "wait.log")

        with patch("servicewait.config.logging.basicConfig") as basic_config:
            configure_logging(cfg)

        kwargs = basic_config.call_args.kwargs
        assert kwargs["level"] == logging.WARNING
        assert [type(h) for h in kwargs["handlers"]] == [logging.StreamHandler, logging.FileHandler]
        kwargs["handlers"][1].close()
