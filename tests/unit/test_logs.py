from __future__ import annotations

import logging

from rich.logging import RichHandler

from voicelift.utils.logs import setup_logging


def test_setup_logging_configures_voicelift_logger() -> None:
    logger = setup_logging("DEBUG")

    assert logger.name == "voicelift"
    assert logger.level == logging.DEBUG
    assert logger.propagate is False
    assert len([handler for handler in logger.handlers if isinstance(handler, RichHandler)]) == 1


def test_setup_logging_replaces_previous_handler() -> None:
    setup_logging("INFO")
    logger = setup_logging("ERROR", plain=True)

    assert len(logger.handlers) == 1
    assert logger.level == logging.ERROR
    assert logging.getLogger("voicelift.core.engine").getEffectiveLevel() == logging.ERROR
