"""
Shared fixtures for the LeetCode Tracker tests.

Fast tests run against an in-memory persistence adapter; the DynamoDB
round trip lives in test_persistence.py and uses LocalStack.
"""

import os
from datetime import datetime, timedelta
from unittest.mock import MagicMock

# The DynamoDB adapter module creates a default boto3 resource on import
os.environ.setdefault("AWS_DEFAULT_REGION", "us-east-1")

import pytest
from ask_sdk_core.attributes_manager import AbstractPersistenceAdapter
from ask_sdk_core.exceptions import PersistenceException

from tracker.models import Difficulty, Pattern, Problem
from tracker.persistence import ProblemStore
from tracker.repository import ProblemRepository

# Fixed reference time so recency and streak tests don't depend on the clock
NOW = datetime(2025, 12, 1, 18, 30)


class InMemoryPersistenceAdapter(AbstractPersistenceAdapter):
    """Key-value adapter that keeps the stored value in a dict."""

    def __init__(self, key: str = "problems"):
        self.key = key
        self.items: dict = {}
        self.save_count = 0

    def get_attributes(self, request_envelope):
        return self.items.get(self.key, {})

    def save_attributes(self, request_envelope, attributes):
        self.items[self.key] = attributes
        self.save_count += 1

    def delete_attributes(self, request_envelope):
        self.items.pop(self.key, None)


class FailingPersistenceAdapter(AbstractPersistenceAdapter):
    """Adapter whose every call fails the way DynamoDbAdapter does."""

    def get_attributes(self, request_envelope):
        raise PersistenceException("table unavailable")

    def save_attributes(self, request_envelope, attributes):
        raise PersistenceException("table unavailable")

    def delete_attributes(self, request_envelope):
        raise PersistenceException("table unavailable")


@pytest.fixture
def adapter():
    return InMemoryPersistenceAdapter()


@pytest.fixture
def store(adapter):
    return ProblemStore(adapter)


@pytest.fixture
def failing_store():
    return ProblemStore(FailingPersistenceAdapter())


@pytest.fixture
def repository(store):
    return ProblemRepository(store)


@pytest.fixture
def sample_problems():
    """A small mixed collection."""
    return [
        Problem(
            id="p-two-sum",
            title="Two Sum",
            difficulty=Difficulty.EASY,
            is_solved=True,
            date_solved=NOW - timedelta(days=10),
            patterns=[Pattern.ARRAY, Pattern.TWO_POINTERS],
        ),
        Problem(
            id="p-longest-substring",
            title="Longest Substring Without Repeating Characters",
            difficulty=Difficulty.MEDIUM,
            is_solved=True,
            date_solved=NOW - timedelta(days=1),
            patterns=[Pattern.SLIDING_WINDOW, Pattern.STRING],
        ),
        Problem(
            id="p-coin-change",
            title="Coin Change",
            difficulty=Difficulty.HARD,
            patterns=[Pattern.DP_1D],
        ),
    ]


@pytest.fixture
def mock_handler_input():
    """Create a mock handler input with all required attributes."""
    handler_input = MagicMock()

    # Session attributes (mutable dict)
    session_attrs = {}
    handler_input.attributes_manager.session_attributes = session_attrs

    # Response builder
    response_builder = MagicMock()
    response_builder.speak.return_value = response_builder
    response_builder.ask.return_value = response_builder
    response_builder.set_should_end_session.return_value = response_builder
    response_builder.response = MagicMock()
    handler_input.response_builder = response_builder

    # Request envelope
    handler_input.request_envelope = MagicMock()
    handler_input.request_envelope.request = MagicMock()
    handler_input.request_envelope.request.intent.slots = {}

    return handler_input
