"""
Persistence layer for the LeetCode Tracker.

The whole problem collection is stored as one JSON array under a single
fixed key of an ASK SDK persistence adapter (DynamoDB in production).
Every save replaces the previous value; there is no versioning.

Reads fail soft: a missing key, unreadable JSON or a record that does not
match the expected shape all load as an empty collection. Write failures
are logged and reported to the caller, never raised.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING

from ask_sdk_core.exceptions import PersistenceException

from tracker.models import Problem

if TYPE_CHECKING:
    from ask_sdk_core.attributes_manager import AbstractPersistenceAdapter
    from ask_sdk_model import RequestEnvelope

logger = logging.getLogger(__name__)

# Partition key value holding the serialized collection
DEFAULT_STORAGE_KEY = "problems"


def fixed_partition_keygen(key: str = DEFAULT_STORAGE_KEY) -> Callable[[RequestEnvelope | None], str]:
    """
    Build a partition key generator that ignores the request.

    The tracker keeps a single collection, so every request maps to the
    same stored item.

    Args:
        key: The partition key value to use.

    Returns:
        A callable suitable for DynamoDbAdapter(partition_keygen=...).
    """

    def keygen(request_envelope: RequestEnvelope | None) -> str:
        return key

    return keygen


def encode_problems(problems: Iterable[Problem]) -> str:
    """Serialize problems to the stored JSON text."""
    return json.dumps([problem.to_dict() for problem in problems], ensure_ascii=False)


def decode_problems(raw: str) -> list[Problem]:
    """
    Deserialize stored JSON text into problems.

    Raises:
        ValueError, KeyError, TypeError, AttributeError, RecursionError: If
            the text is not a JSON array of well-formed problem records.
    """
    data = json.loads(raw)
    if not isinstance(data, list):
        raise TypeError(f"expected a JSON array, got {type(data).__name__}")
    return [Problem.from_dict(item) for item in data]


class ProblemStore:
    """
    Reads and writes the full problem collection as one blob.

    The adapter must be configured so that its partition key generator
    yields the storage key (see fixed_partition_keygen).
    """

    def __init__(self, adapter: AbstractPersistenceAdapter):
        """
        Initialize the store.

        Args:
            adapter: ASK SDK persistence adapter used as the key-value medium.
        """
        self._adapter = adapter

    def load(self) -> list[Problem]:
        """
        Load the stored collection.

        Returns:
            The stored problems, or an empty list if nothing usable is stored.
        """
        try:
            raw = self._adapter.get_attributes(request_envelope=None)
        except PersistenceException as e:
            logger.warning(f"Could not read stored problems, starting empty: {e}")
            return []

        # The adapter returns an empty dict when the key is absent
        if not raw:
            return []
        if not isinstance(raw, str):
            logger.warning(f"Stored problems have unexpected type {type(raw).__name__}, starting empty")
            return []

        try:
            problems = decode_problems(raw)
        except (ValueError, KeyError, TypeError, AttributeError, RecursionError) as e:
            logger.warning(f"Stored problems could not be decoded, starting empty: {e!r}")
            return []

        logger.info(f"Loaded {len(problems)} problems")
        return problems

    def save(self, problems: Iterable[Problem]) -> bool:
        """
        Replace the stored collection.

        Args:
            problems: The full collection to persist.

        Returns:
            True if the write succeeded, False otherwise.
        """
        try:
            raw = encode_problems(problems)
            self._adapter.save_attributes(request_envelope=None, attributes=raw)
        except (PersistenceException, TypeError, ValueError) as e:
            logger.error(f"Failed to save problems: {e}", exc_info=True)
            return False
        return True

    def clear(self) -> bool:
        """
        Remove the stored collection.

        Returns:
            True if the delete succeeded, False otherwise.
        """
        try:
            self._adapter.delete_attributes(request_envelope=None)
        except PersistenceException as e:
            logger.error(f"Failed to clear stored problems: {e}", exc_info=True)
            return False
        return True
