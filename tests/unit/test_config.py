"""
Unit tests for configuration loading (lembrancas/config).
"""

import logging

import pytest

from lembrancas.config.defaults import get_default, get_type
from lembrancas.config.loader import ConfigLoader
from lembrancas.utils.logger import setup_logger


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.ini"
    path.write_text(
        "[Common]\n"
        "cors_origin = https://file.example\n"
        "log_level = debug\n"
        "api_port = 9000\n"
    )
    return str(path)


class TestConfigLoader:

    @pytest.mark.unit
    def test_defaults_when_file_missing(self, tmp_path):
        config = ConfigLoader(config_file=str(tmp_path / "absent.ini"), environ={})

        assert config.cors_origin == "http://localhost:8081"
        assert config.api_port == 8080
        assert config.get_log_level() == "INFO"

    @pytest.mark.unit
    def test_file_values(self, config_file):
        config = ConfigLoader(config_file=config_file, environ={})

        assert config.cors_origin == "https://file.example"
        assert config.api_port == 9000
        assert config.get_log_level() == "DEBUG"

    @pytest.mark.unit
    def test_environment_overrides_file(self, config_file):
        config = ConfigLoader(
            config_file=config_file,
            environ={"CORS_ORIGIN": "https://env.example", "API_PORT": "7000"},
        )

        assert config.cors_origin == "https://env.example"
        assert config.api_port == 7000

    @pytest.mark.unit
    def test_empty_environment_value_ignored(self, config_file):
        config = ConfigLoader(config_file=config_file, environ={"CORS_ORIGIN": ""})

        assert config.cors_origin == "https://file.example"

    @pytest.mark.unit
    def test_bad_integer_falls_back(self, tmp_path):
        config = ConfigLoader(config_file=str(tmp_path / "absent.ini"), environ={"API_PORT": "http"})

        assert config.api_port == get_default("api_port")

    @pytest.mark.unit
    def test_as_environ_feeds_middleware(self, config_file):
        config = ConfigLoader(config_file=config_file, environ={})

        environ = config.as_environ()

        assert environ["CORS_ORIGIN"] == "https://file.example"
        assert environ["API_PORT"] == "9000"

    @pytest.mark.unit
    def test_unknown_attribute(self, tmp_path):
        config = ConfigLoader(config_file=str(tmp_path / "absent.ini"), environ={})

        with pytest.raises(AttributeError):
            config.not_a_key
        assert config.get("not_a_key", "fallback") == "fallback"

    @pytest.mark.unit
    def test_unknown_key_type_is_str(self):
        assert get_type("not_a_key") is str
        assert get_default("not_a_key") is None


class TestLogger:

    @pytest.mark.unit
    def test_setup_logger_uses_configured_level(self, config_file):
        config = ConfigLoader(config_file=config_file, environ={})

        logger = setup_logger(config, log_to_file=False)

        assert logger.name == "lembrancas"
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

    @pytest.mark.unit
    def test_setup_logger_to_file(self, tmp_path):
        config = ConfigLoader(config_file=str(tmp_path / "absent.ini"), environ={})
        log_file = tmp_path / "api.log"

        logger = setup_logger(config, log_to_file=True, file_name=str(log_file))
        logger.info("hello")
        for handler in logger.handlers:
            handler.flush()

        assert "INFO - hello" in log_file.read_text()
        logger.handlers.clear()
