import logging
import sys

from imagick_convert import logger as ic_logger


def test_setup_logger_idempotent_handlers():
    base = ic_logger.setup_logger(level=logging.DEBUG)
    ic_logger.setup_logger(level=logging.DEBUG)

    handlers = [
        h
        for h in base.handlers
        if isinstance(h, logging.StreamHandler) and getattr(h, "stream", None) is sys.stderr
    ]
    assert len(handlers) == 1


def test_env_level_override(monkeypatch):
    monkeypatch.setenv("IMAGICK_CONVERT_LOG_LEVEL", "debug")
    assert ic_logger.setup_logger().level == logging.DEBUG
    monkeypatch.setenv("IMAGICK_CONVERT_LOG_LEVEL", "error")
    assert ic_logger.setup_logger().level == logging.ERROR


def test_project_logger_does_not_propagate():
    assert ic_logger.setup_logger().propagate is False


def test_get_logger_child():
    assert ic_logger.get_logger("executor").name == "imagick_convert.executor"
    assert ic_logger.get_logger().name == "imagick_convert"
