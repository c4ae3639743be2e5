import logging
import sys

from unimod.logging_config import setup_logging


def test_setup_logging_configures_stderr_handler():
    logger = setup_logging(logging.DEBUG)
    try:
        assert logger.name == "unimod"
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        handler = logger.handlers[0]
        assert isinstance(handler, logging.StreamHandler)
        assert handler.stream is sys.stderr
    finally:
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)


def test_setup_logging_is_idempotent():
    setup_logging()
    logger = setup_logging()
    try:
        assert len(logger.handlers) == 1
    finally:
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)


def test_setup_logging_writes_file(tmp_path):
    log_file = tmp_path / "unimod.log"
    logger = setup_logging(logging.INFO, log_file=str(log_file))
    try:
        logging.getLogger("unimod.generators").info("hello")
        for handler in logger.handlers:
            handler.flush()
        assert "hello" in log_file.read_text(encoding="utf-8")
    finally:
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)
