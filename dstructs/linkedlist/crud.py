from __future__ import annotations
import logging
from typing import TYPE_CHECKING, Any, Callable, TypeVar

from dstructs.linkedlist.node import (
    Node,
    find_node,
    find_predecessor,
    shift_indices,
)

if TYPE_CHECKING:
    from dstructs.linkedlist import LinkedList

logger = logging.getLogger(__name__)

T = TypeVar("T")


def size(lst: LinkedList[Any] | None) -> int:
    """-1 if the list is absent or destroyed"""
    if lst is None or lst.destroyed:
        return -1

    return lst._tail.index + 1 if lst._tail is not None else 0


def add(lst: LinkedList[T] | None, index: int, element: T) -> bool:
    """
    Insert `element` so that it ends up at `index`, shifting the
    elements from `index` onwards up by one

    `index` may be anything from 0 to size() inclusive. Nothing
    changes when it's out of range, the list is invalid or the
    allocator has no node to give.
    """
    if lst is None or lst.destroyed:
        return False

    n = size(lst)
    if index < 0 or index > n:
        return False

    if not lst.allocator.acquire("node"):
        logger.debug("No node available to add at %d", index)
        return False

    new = Node(element, index)
    lst.generation += 1

    if lst._head is None:
        lst._head = new
        lst._tail = new
        return True

    if index == n:
        assert lst._tail is not None
        lst._tail.next = new
        lst._tail = new
        return True

    if index == 0:
        new.next = lst._head
        lst._head = new
    else:
        before = find_predecessor(lst._head, index)
        assert before is not None, f"No node cached at index {index}"
        new.next = before.next
        before.next = new

    shift_indices(new.next, 1)
    return True


def add_first(lst: LinkedList[T] | None, element: T) -> bool:
    return add(lst, 0, element)


def add_last(lst: LinkedList[T] | None, element: T) -> bool:
    return add(lst, size(lst), element)


def get(lst: LinkedList[T] | None, index: int) -> T | None:
    if lst is None or lst.destroyed:
        return None

    if index < 0 or index >= size(lst):
        return None

    node = find_node(lst._head, index)
    assert node is not None, f"No node cached at index {index}"
    return node.element


def first(lst: LinkedList[T] | None) -> T | None:
    return get(lst, 0)


def last(lst: LinkedList[T] | None) -> T | None:
    # On an empty list this asks for -1, which get rejects
    return get(lst, size(lst) - 1)


def remove(lst: LinkedList[T] | None, index: int) -> T | None:
    """
    Unlink the node at `index` and hand its element back, shifting
    the following elements down by one
    """
    if lst is None or lst.destroyed:
        return None

    if index < 0 or index >= size(lst):
        return None

    assert lst._head is not None

    if index == 0:
        target = lst._head
        lst._head = target.next
        if lst._head is None:
            lst._tail = None
    else:
        before = find_predecessor(lst._head, index)
        assert before is not None and before.next is not None
        target = before.next
        before.next = target.next
        if target is lst._tail:
            lst._tail = before

    lst.generation += 1
    shift_indices(target.next, -1)

    element = target.element
    target.next = None
    lst.allocator.release("node")

    return element


def set_element(
    lst: LinkedList[T] | None, index: int, element: T
) -> T | None:
    """Swap in `element` at `index`, returning what was there"""
    if lst is None or lst.destroyed:
        return None

    if index < 0 or index >= size(lst):
        return None

    node = find_node(lst._head, index)
    assert node is not None, f"No node cached at index {index}"
    former = node.element
    node.element = element
    return former


def clear(
    lst: LinkedList[T] | None,
    dispose: Callable[[T], Any] | None = None,
) -> None:
    """
    Remove every element, front first. `dispose` gets each element
    as it comes out, otherwise they're dropped
    """
    if lst is None or lst.destroyed:
        return

    while size(lst) != 0:
        element = remove(lst, 0)
        if dispose is not None:
            dispose(element)  # type: ignore[arg-type]


def destroy(lst: LinkedList[Any] | None) -> None:
    """Clear the list then make it unusable"""
    if lst is None or lst.destroyed:
        return

    clear(lst)
    lst.destroyed = True
    logger.debug("Destroyed list %x", id(lst))
