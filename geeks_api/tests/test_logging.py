from __future__ import annotations

import logging

from loguru import logger as loguru_logger

from geeks_api.shared.logging import (
    clear_correlation_id,
    logger,
    new_correlation_id,
    set_correlation_id,
    setup_logging,
)


def test_records_carry_the_current_correlation_id() -> None:
    seen: list[str] = []
    sink_id = loguru_logger.add(
        lambda message: seen.append(message.record["extra"]["correlation_id"]),
        format="{message}",
    )
    try:
        set_correlation_id("req-7")
        logger.info("inside request")
        clear_correlation_id()
        logger.info("outside request")
    finally:
        loguru_logger.remove(sink_id)

    assert seen == ["req-7", "-"]


def test_stdlib_records_are_forwarded_to_loguru() -> None:
    setup_logging("DEBUG")
    messages: list[str] = []
    sink_id = loguru_logger.add(messages.append, format="{level} {message}")
    try:
        logging.getLogger("some.library").warning("disk almost full")
    finally:
        loguru_logger.remove(sink_id)

    assert [m.strip() for m in messages] == ["WARNING disk almost full"]


def test_new_correlation_ids_are_short_and_unique() -> None:
    first, second = new_correlation_id(), new_correlation_id()

    assert len(first) == 16
    assert first != second
