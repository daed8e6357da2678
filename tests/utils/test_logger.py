import logging

import pytest

from irmc_connector.utils.logger import configure_logging, setup_logger


@pytest.fixture
def bare_root(monkeypatch):
    """Root logger with no handlers, restored after the test."""
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)
    return root


class TestSetupLogger:
    def test_returns_named_logger(self):
        logger = setup_logger("irmc_connector.infra.http_client")

        assert logger.name == "irmc_connector.infra.http_client"
        assert logger.propagate is True

    def test_does_not_touch_root_logger(self, bare_root):
        setup_logger("irmc_connector.test")

        assert bare_root.handlers == []

    def test_package_logger_has_null_handler(self):
        handlers = logging.getLogger("irmc_connector").handlers

        assert any(isinstance(h, logging.NullHandler) for h in handlers)


class TestConfigureLogging:
    def test_adds_single_stream_handler(self, bare_root):
        configure_logging()
        configure_logging()

        assert len(bare_root.handlers) == 1
        assert isinstance(bare_root.handlers[0], logging.StreamHandler)
        assert bare_root.level == logging.INFO

    def test_keeps_existing_handlers(self, bare_root):
        existing = logging.NullHandler()
        bare_root.addHandler(existing)

        configure_logging(logging.DEBUG)

        assert bare_root.handlers == [existing]
