from __future__ import annotations
from typing import TYPE_CHECKING, TypeVar

from dstructs.linkedlist.node import iter_nodes

if TYPE_CHECKING:
    from dstructs.linkedlist import LinkedList

T = TypeVar("T")


def index_of(lst: LinkedList[T] | None, element: T) -> int:
    """
    Cached index of the first stored element equal to `element`, -1
    if there isn't one or the list is invalid

    With the default byte-wise equality, elements whose compared bytes
    include uninitialised padding can fail to match
    """
    if lst is None or lst.destroyed:
        return -1

    for node in iter_nodes(lst._head):
        if lst.equality(element, node.element):
            return node.index

    return -1


def contains(lst: LinkedList[T] | None, element: T) -> bool:
    return index_of(lst, element) != -1
