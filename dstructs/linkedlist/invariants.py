from __future__ import annotations
from typing import TYPE_CHECKING, Any

from dstructs.linkedlist.node import iter_nodes

if TYPE_CHECKING:
    from dstructs.linkedlist import LinkedList


def is_consistent(lst: LinkedList[Any] | None) -> bool:
    """
    Cached indices run 0..size-1 along the chain and the tail is the
    last node reached from the head
    """
    if lst is None or lst.destroyed:
        return False

    if lst._head is None or lst._tail is None:
        return lst._head is None and lst._tail is None

    node = None
    for position, node in enumerate(iter_nodes(lst._head)):
        if node.index != position:
            return False

    return node is lst._tail and lst._tail.next is None
