from dataclasses import dataclass
from typing import Generic, Iterator, TypeVar

T = TypeVar("T")

type NodeChain[T] = Node[T] | None


@dataclass(eq=False, slots=True)
class Node(Generic[T]):
    element: T
    index: int
    """Cached position, always equal to the true position in the chain"""
    next: NodeChain[T] = None


def iter_nodes[T](chain: NodeChain[T]) -> Iterator[Node[T]]:
    node = chain
    while node is not None:
        # Read the link before handing out the node, the caller may
        # detach it
        following = node.next
        yield node
        node = following


def find_node[T](chain: NodeChain[T], index: int) -> NodeChain[T]:
    """Scan for the node whose cached index matches"""
    for node in iter_nodes(chain):
        if node.index == index:
            return node
    return None


def find_predecessor[T](
    chain: NodeChain[T], index: int
) -> NodeChain[T]:
    """The node whose successor has the given cached index"""
    for node in iter_nodes(chain):
        if node.next is not None and node.next.index == index:
            return node
    return None


def shift_indices[T](chain: NodeChain[T], delta: int) -> None:
    for node in iter_nodes(chain):
        node.index += delta
