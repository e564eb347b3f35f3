"""Tests for the id allocator."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from tasklist.services.sequences import SequenceAllocator
from tasklist.store import DocumentStore


@pytest.fixture
def allocate(session_factory):
    """Allocate one id on a session of its own, like a separate request would."""

    def _allocate(kind: str) -> int:
        session = session_factory()
        try:
            return SequenceAllocator(DocumentStore(session)).next_id(kind)
        finally:
            session.close()

    return _allocate


def test_first_id_is_one(sequences):
    assert sequences.next_id("tasks") == 1


def test_ids_increase(sequences):
    assert [sequences.next_id("tasks") for _ in range(3)] == [1, 2, 3]


def test_kinds_are_independent(sequences):
    sequences.next_id("tasks")
    sequences.next_id("tasks")

    assert sequences.next_id("users") == 1
    assert sequences.next_id("tasks") == 3


def test_concurrent_allocation_has_no_duplicates_or_gaps(sequences, allocate):
    """Concurrent callers get exactly the next N values."""
    previous = sequences.next_id("tasks")

    with ThreadPoolExecutor(max_workers=8) as pool:
        values = list(pool.map(allocate, ["tasks"] * 40))

    assert sorted(values) == list(range(previous + 1, previous + 41))


def test_concurrent_first_allocation(allocate):
    """Callers racing to create a new counter still get distinct values."""
    with ThreadPoolExecutor(max_workers=4) as pool:
        values = list(pool.map(allocate, ["users"] * 4))

    assert sorted(values) == [1, 2, 3, 4]
