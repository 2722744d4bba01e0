from __future__ import annotations
from dataclasses import dataclass
import logging
from typing import TYPE_CHECKING, Generic, Iterator, TypeVar
import weakref

from dstructs.linkedlist.alloc import Allocator
from dstructs.linkedlist.node import NodeChain, find_node

if TYPE_CHECKING:
    from dstructs.linkedlist import LinkedList

logger = logging.getLogger(__name__)

T = TypeVar("T")


class StaleIteratorError(Exception):
    def __init__(self):
        super().__init__(
            "The list was added to, removed from, cleared or collected"
            " after this iterator was created"
        )


@dataclass(eq=False)
class ListIterator(Generic[T]):
    """
    Forward cursor over a list

    Doesn't keep the list alive. Any add, remove or clear on the list
    after creation makes further use raise StaleIteratorError,
    replacing elements with `set` doesn't. An iterator over a list
    nothing else references is stale from the start.
    """

    list_ref: weakref.ref[LinkedList[T]]
    cursor: NodeChain[T]
    """Node to yield next, None once exhausted"""
    generation: int
    allocator: Allocator
    destroyed: bool = False

    def has_next(self) -> bool:
        return has_next(self)

    def next(self) -> T | None:
        return next_element(self)

    def destroy(self) -> None:
        destroy_iterator(self)

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        if not has_next(self):
            raise StopIteration
        assert self.cursor is not None
        element = self.cursor.element
        self.cursor = self.cursor.next
        return element


def create_iterator(
    lst: LinkedList[T] | None, start_index: int
) -> ListIterator[T] | None:
    """
    Iterator starting at `start_index`, which has to be a current
    index of the list. None otherwise, or if no cursor can be had
    """
    if lst is None or lst.destroyed:
        return None

    if start_index < 0 or start_index >= lst.size():
        return None

    if not lst.allocator.acquire("cursor"):
        logger.debug("No cursor available for list %x", id(lst))
        return None

    node = find_node(lst._head, start_index)
    assert node is not None, f"No node cached at index {start_index}"

    return ListIterator(
        weakref.ref(lst), node, lst.generation, lst.allocator
    )


def _check_fresh(iterator: ListIterator[T]) -> None:
    lst = iterator.list_ref()
    if lst is None or lst.generation != iterator.generation:
        logger.debug("Stale iterator %x", id(iterator))
        raise StaleIteratorError()


def has_next(iterator: ListIterator[T] | None) -> bool:
    """Whether next_element would give an element"""
    if iterator is None or iterator.destroyed:
        return False

    _check_fresh(iterator)
    return iterator.cursor is not None


def next_element(iterator: ListIterator[T] | None) -> T | None:
    if iterator is None or iterator.destroyed:
        return None

    _check_fresh(iterator)
    node = iterator.cursor
    if node is None:
        return None

    iterator.cursor = node.next
    return node.element


def destroy_iterator(iterator: ListIterator[T] | None) -> None:
    """Give the cursor back, the list and its nodes are untouched"""
    if iterator is None or iterator.destroyed:
        return

    iterator.destroyed = True
    iterator.cursor = None
    iterator.allocator.release("cursor")
