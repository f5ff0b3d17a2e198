from loguru import logger

from pgquery.config.logging_config import setup_logging


def test_setup_logging_defaults_to_configured_level(capsys):
    setup_logging()
    try:
        logger.debug("hidden at INFO")
        logger.info("shown at INFO")
        logger.complete()
    finally:
        logger.remove()

    out = capsys.readouterr().out
    assert "shown at INFO" in out
    assert "hidden at INFO" not in out


def test_setup_logging_accepts_explicit_level(capsys):
    setup_logging("DEBUG")
    try:
        logger.debug("debug line")
        logger.complete()
    finally:
        logger.remove()

    assert "debug line" in capsys.readouterr().out
