from __future__ import annotations
from typing import Any, Callable, Generic, Iterator, TypeVar

from .alloc import Allocator, HeapAllocator
from .equality import Equality, bytewise
from .node import NodeChain, iter_nodes

T = TypeVar("T")


class LinkedList(Generic[T]):
    """
    Singly linked list addressed by zero based index

    Every node caches its index, lookups scan for a matching cached
    index and inserts/removals re-index the nodes after them.

    Elements are references to caller owned objects, the list never
    copies them. `contains` and `index_of` compare the first
    `element_size` bytes of elements unless an `equality` is given.

    Mutating the list (add, remove, clear) invalidates every
    iterator created before the mutation.
    """

    def __init__(
        self,
        element_size: int,
        equality: Equality[T] | None = None,
        allocator: Allocator | None = None,
    ):
        if element_size <= 0:
            raise ValueError(
                f"element_size must be positive, got {element_size}"
            )
        self._element_size = element_size
        self.equality: Equality[T] = (
            equality if equality is not None else bytewise(element_size)
        )
        self.allocator: Allocator = (
            allocator if allocator is not None else HeapAllocator()
        )
        self._head: NodeChain[T] = None
        self._tail: NodeChain[T] = None
        self.generation = 0
        """Bumped on every structural change"""
        self.destroyed = False

    @property
    def element_size(self) -> int:
        return self._element_size

    def size(self) -> int:
        return size(self)

    def add(self, index: int, element: T) -> bool:
        return add(self, index, element)

    def add_first(self, element: T) -> bool:
        return add_first(self, element)

    def add_last(self, element: T) -> bool:
        return add_last(self, element)

    def get(self, index: int) -> T | None:
        return get(self, index)

    def first(self) -> T | None:
        return first(self)

    def last(self) -> T | None:
        return last(self)

    def contains(self, element: T) -> bool:
        return contains(self, element)

    def index_of(self, element: T) -> int:
        return index_of(self, element)

    def remove(self, index: int) -> T | None:
        return remove(self, index)

    def set(self, index: int, element: T) -> T | None:
        return set_element(self, index, element)

    def clear(self, dispose: Callable[[T], Any] | None = None) -> None:
        clear(self, dispose)

    def destroy(self) -> None:
        destroy(self)

    def iterator(self, start_index: int = 0) -> ListIterator[T] | None:
        return create_iterator(self, start_index)

    def is_consistent(self) -> bool:
        return is_consistent(self)

    def __len__(self) -> int:
        return max(size(self), 0)

    def __contains__(self, element: T) -> bool:
        return contains(self, element)

    def __iter__(self) -> Iterator[T]:
        generation = self.generation
        for node in iter_nodes(self._head):
            yield node.element
            if self.generation != generation:
                raise StaleIteratorError()

    def __repr__(self) -> str:
        if self.destroyed:
            return f"{type(self).__name__}(destroyed)"
        elements = ", ".join(
            repr(node.element) for node in iter_nodes(self._head)
        )
        return (
            f"{type(self).__name__}([{elements}],"
            f" element_size={self._element_size})"
        )


# Implementations
from dstructs.linkedlist.crud import (
    add,
    add_first,
    add_last,
    clear,
    destroy,
    first,
    get,
    last,
    remove,
    set_element,
    size,
)
from dstructs.linkedlist.search import contains, index_of
from dstructs.linkedlist.invariants import is_consistent
from dstructs.linkedlist.iterator import (
    ListIterator,
    StaleIteratorError,
    create_iterator,
)
