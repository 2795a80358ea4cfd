"""Unit tests for Level."""

import logging

import pytest

from laakhay.logchunk.core import TRACE_LEVEL, Level


class TestLevel:
    def test_values_are_names(self):
        assert Level.INFO.value == "INFO"
        assert Level("ERROR") is Level.ERROR

    def test_levelno_matches_logging(self):
        assert Level.TRACE.levelno == TRACE_LEVEL
        assert Level.DEBUG.levelno == logging.DEBUG
        assert Level.INFO.levelno == logging.INFO
        assert Level.WARNING.levelno == logging.WARNING
        assert Level.ERROR.levelno == logging.ERROR
        assert Level.CRITICAL.levelno == logging.CRITICAL

    @pytest.mark.parametrize(
        ("levelno", "expected"),
        [
            (0, Level.TRACE),
            (5, Level.TRACE),
            (10, Level.DEBUG),
            (25, Level.INFO),
            (30, Level.WARNING),
            (45, Level.ERROR),
            (60, Level.CRITICAL),
        ],
    )
    def test_from_levelno(self, levelno, expected):
        assert Level.from_levelno(levelno) is expected
