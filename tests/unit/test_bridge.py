"""Unit tests for the logging bridge."""

from __future__ import annotations

import logging

import pytest

from laakhay.logchunk import ChunkHandler, ChunkRelay, ChunkSettings, InMemorySink


class CollectingHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__()
        self.records: list[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


@pytest.fixture
def logger():
    log = logging.getLogger("tests.bridge")
    log.setLevel(logging.DEBUG)
    log.propagate = False
    yield log
    for handler in list(log.handlers):
        log.removeHandler(handler)
        handler.close()


def test_long_message_forwarded_as_numbered_records(logger, hundred_char_message):
    downstream = CollectingHandler()
    chunker = ChunkHandler(settings=ChunkSettings(max_length=50))
    chunker.add_handler(downstream)
    logger.addHandler(chunker)

    logger.info(hundred_char_message)

    assert [r.getMessage() for r in downstream.records] == [
        hundred_char_message[:50],
        hundred_char_message[50:],
    ]
    assert [r.seq for r in downstream.records] == ["1", "2"]
    assert all(r.name == "tests.bridge" for r in downstream.records)


def test_exception_split_by_frames(logger):
    def recurse(depth):
        if depth == 0:
            raise RuntimeError("Long stack trace")
        recurse(depth - 1)

    sink = InMemorySink()
    chunker = ChunkHandler(settings=ChunkSettings(max_length=100))
    chunker.add_sink(sink)
    logger.addHandler(chunker)

    try:
        recurse(10)
    except RuntimeError:
        logger.exception("request failed")

    assert len(sink) >= 2
    assert all(e.message == "request failed" for e in sink.events)
    assert [e.mdc["seq"] for e in sink.events] == [str(i) for i in range(1, len(sink) + 1)]


def test_short_record_passes_through(logger):
    sink = InMemorySink()
    chunker = ChunkHandler()
    chunker.add_sink(sink)
    logger.addHandler(chunker)

    logger.warning("disk %d%% full", 91, extra={"mdc": {"host": "db-1"}})

    assert len(sink) == 1
    assert sink.events[0].message == "disk 91% full"
    assert sink.events[0].mdc == {"host": "db-1"}


def test_sink_failure_reported_through_handle_error(logger, monkeypatch):
    class BrokenSink:
        name = "broken"

        def deliver(self, event):
            raise OSError("pipe closed")

        def close(self):
            pass

    chunker = ChunkHandler()
    chunker.add_sink(BrokenSink())
    errors = []
    monkeypatch.setattr(chunker, "handleError", errors.append)
    logger.addHandler(chunker)

    logger.error("boom")

    assert len(errors) == 1
    assert errors[0].getMessage() == "boom"


def test_close_closes_sinks():
    sink = InMemorySink()
    relay = ChunkRelay()
    relay.add_sink(sink)
    chunker = ChunkHandler(relay=relay)

    chunker.close()

    assert sink.closed
    assert chunker.relay is relay
