from __future__ import annotations

import logging
from datetime import date, datetime

from logging_config import ContextualFormatter
from models.records import Reading
from services.history import ChannelHistory


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord("power", logging.INFO, __file__, 1, "Day statistics rolled over.", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formatter_appends_known_context_keys() -> None:
    formatter = ContextualFormatter(fmt="%(message)s")

    text = formatter.format(_record(channel="a1", mean=512.5, unrelated="x", day=None))

    assert text == "Day statistics rolled over. | channel=a1 mean=512.50"


def test_formatter_leaves_plain_messages_alone() -> None:
    formatter = ContextualFormatter(fmt="%(message)s")

    assert formatter.format(_record()) == "Day statistics rolled over."


def test_rollover_is_logged_with_channel_context(caplog) -> None:
    history = ChannelHistory(datetime(2024, 3, 10, 23, 59), name="a2")

    with caplog.at_level(logging.INFO, logger="services.history"):
        history.push(Reading(0, 500, datetime(2024, 3, 11, 0, 0)), date(2024, 3, 11))

    records = [record for record in caplog.records if record.getMessage() == "Day statistics rolled over."]
    assert len(records) == 1
    assert records[0].channel == "a2"
    assert records[0].previous_day == "2024-03-10"
    assert records[0].day == "2024-03-11"
