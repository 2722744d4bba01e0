import pytest

from frozendict import frozendict

from dstructs.linkedlist import LinkedList
from dstructs.linkedlist.alloc import (
    BoundedAllocator,
    HeapAllocator,
    UnbalancedReleaseError,
)


def test_heap_allocator_always_grants():
    allocator = HeapAllocator()
    assert allocator.acquire("node")
    allocator.release("node")


def test_add_fails_when_exhausted():
    allocator = BoundedAllocator(2)
    lst = LinkedList[int](4, allocator=allocator)
    assert lst.add_last(1)
    assert lst.add_last(2)
    generation = lst.generation

    assert not lst.add(1, 3)
    assert not lst.add_first(3)
    assert [1, 2] == list(lst)
    assert generation == lst.generation
    assert lst.is_consistent()

    assert 1 == lst.remove(0)
    assert lst.add_last(3)
    assert [2, 3] == list(lst)


def test_usage_tracks_nodes_and_cursors():
    allocator = BoundedAllocator(4)
    lst = LinkedList[int](4, allocator=allocator)
    lst.add_last(1)
    lst.add_last(2)
    it = lst.iterator(0)
    assert it is not None

    assert frozendict({"node": 2, "cursor": 1}) == allocator.usage
    assert 1 == allocator.available

    it.destroy()
    lst.clear()
    assert frozendict() == allocator.usage
    assert 4 == allocator.available


def test_iterator_fails_when_exhausted():
    allocator = BoundedAllocator(1)
    lst = LinkedList[int](4, allocator=allocator)
    lst.add_last(1)
    assert lst.iterator(0) is None


def test_destroy_returns_every_node():
    allocator = BoundedAllocator(3)
    lst = LinkedList[int](4, allocator=allocator)
    for element in (1, 2, 3):
        lst.add_last(element)
    lst.destroy()
    assert 3 == allocator.available


def test_unbalanced_release():
    with pytest.raises(UnbalancedReleaseError):
        BoundedAllocator(1).release("node")


def test_negative_capacity():
    with pytest.raises(ValueError):
        BoundedAllocator(-1)
