import logging

from hotel_reservation.infrastructure import StdLogger, configure_logging
from hotel_reservation.infrastructure.logging import LOGGER_NAME


def test_messages_reach_standard_logging(caplog):
    caplog.set_level(logging.DEBUG, logger=LOGGER_NAME)
    logger = StdLogger()

    logger.info("Room booked", username="alice", room_number=1)
    logger.debug("plain")

    assert caplog.records[0].levelno == logging.INFO
    assert caplog.records[0].getMessage() == (
        'Room booked {"username": "alice", "room_number": 1}'
    )
    assert caplog.records[1].getMessage() == "plain"


def test_levels(caplog):
    caplog.set_level(logging.DEBUG, logger=LOGGER_NAME)
    logger = StdLogger()

    logger.warning("w")
    logger.error("e")

    assert [r.levelname for r in caplog.records] == ["WARNING", "ERROR"]


def test_configure_logging_adds_single_handler():
    configure_logging("debug")
    configure_logging("warning")

    logger = logging.getLogger(LOGGER_NAME)
    assert len(logger.handlers) == 1
    assert logger.level == logging.WARNING
