"""Shared pytest fixtures for IntervalTimer tests."""

import os
import sys

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication

from intervaltimer.database.db import configure_engine, init_db
from intervaltimer.timer.engine import IntervalTimer

from helpers import FakeFrameScheduler, RecordingListener, make_preset


@pytest.fixture(scope="session")
def qapp():
    """A single QApplication instance shared across the entire test run."""
    app = QApplication.instance() or QApplication(sys.argv)
    yield app


@pytest.fixture(autouse=True)
def test_db():
    """Point every test at a fresh in-memory SQLite database."""
    configure_engine("sqlite:///:memory:")
    init_db()
    yield


@pytest.fixture
def clock():
    """Virtual frame clock, 16 ms per frame, starting at t=0."""
    return FakeFrameScheduler(frame_ms=16)


@pytest.fixture
def listener():
    return RecordingListener()


@pytest.fixture
def timer(listener, clock):
    """Fresh IntervalTimer driven by the virtual clock."""
    return IntervalTimer(listener, clock)


@pytest.fixture
def work_rest_preset():
    """work 10 s / rest 5 s, two repetitions, no long break."""
    return make_preset(sets=[("work", 10), ("rest", 5)], repetitions=2)
