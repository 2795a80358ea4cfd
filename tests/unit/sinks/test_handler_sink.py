"""Unit tests for HandlerSink."""

from __future__ import annotations

import logging

from laakhay.logchunk.core import Level
from laakhay.logchunk.sinks import HandlerSink


class CollectingHandler(logging.Handler):
    def __init__(self, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self.records: list[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


def test_handler_sink_forwards_record(make_event):
    handler = CollectingHandler()
    sink = HandlerSink(handler)

    sink.deliver(make_event("order failed"))

    assert len(handler.records) == 1
    record = handler.records[0]
    assert record.getMessage() == "order failed"
    assert record.name == "app.orders"
    assert record.levelno == logging.ERROR
    assert record.request_id == "abc-123"


def test_handler_sink_respects_handler_level(make_event):
    handler = CollectingHandler(level=logging.WARNING)
    sink = HandlerSink(handler)

    sink.deliver(make_event(level=Level.INFO))
    sink.deliver(make_event(level=Level.ERROR))

    assert [r.levelno for r in handler.records] == [logging.ERROR]


def test_handler_sink_name():
    handler = CollectingHandler()
    handler.set_name("console")

    assert HandlerSink(handler).name == "console"
    assert HandlerSink(CollectingHandler()).name == "CollectingHandler"
    assert HandlerSink(handler, name="override").name == "override"


def test_handler_sink_close_closes_handler():
    handler = CollectingHandler()
    closed = []
    handler.close = lambda: closed.append(True)

    HandlerSink(handler).close()

    assert closed == [True]
