"""Shared fixtures for rpcretry tests."""

from __future__ import annotations

import logging

import pytest

from rpcretry.foundation.config import clear_settings_cache
from rpcretry.foundation.logging import ROOT_LOGGER
from rpcretry.foundation.testing import ManualClock, stub_classifier
from rpcretry.runtime.retry import CodeSetClassifier


@pytest.fixture(autouse=True)
def clean_settings() -> object:
    """Reset cached settings before and after each test."""
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock(now=1000.0)


@pytest.fixture
def classifier() -> CodeSetClassifier:
    return stub_classifier


@pytest.fixture
def restore_logger() -> object:
    """Undo handler/level changes made to the package logger."""
    logger = logging.getLogger(ROOT_LOGGER)
    handlers, level = list(logger.handlers), logger.level
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)
