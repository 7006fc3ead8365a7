"""Shared test fixtures."""

from datetime import datetime, timezone

import pytest


@pytest.fixture
def base_instant():
    return datetime(2000, 1, 1, 10, 0, 0)


def utc(*args):
    return datetime(*args, tzinfo=timezone.utc)
