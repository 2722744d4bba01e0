import gc

import pytest

from dstructs.linkedlist import LinkedList, StaleIteratorError
from dstructs.linkedlist.iterator import (
    create_iterator,
    destroy_iterator,
    has_next,
    next_element,
)


def int_list(*elements: int) -> LinkedList[int]:
    lst = LinkedList[int](4)
    for element in elements:
        lst.add_last(element)
    return lst


def drain(lst: LinkedList[int], start_index: int) -> list[int]:
    it = lst.iterator(start_index)
    assert it is not None
    out: list[int] = []
    while it.has_next():
        element = it.next()
        assert element is not None
        out.append(element)
    return out


def test_yields_the_last_element():
    lst = int_list(10, 20, 30)
    assert [10, 20, 30] == drain(lst, 0)
    assert [20, 30] == drain(lst, 1)
    assert [30] == drain(lst, 2)


def test_exhausted():
    lst = int_list(10)
    it = lst.iterator(0)
    assert it is not None
    assert 10 == it.next()
    for _ in range(2):
        assert not it.has_next()
        assert it.next() is None


def test_create_rejects_bad_start():
    lst = int_list(10, 20)
    assert lst.iterator(2) is None
    assert lst.iterator(-1) is None
    assert LinkedList[int](4).iterator(0) is None
    assert create_iterator(None, 0) is None


def test_invalid_iterator_sentinels():
    assert not has_next(None)
    assert next_element(None) is None
    destroy_iterator(None)


def test_destroy_leaves_list_alone():
    lst = int_list(10, 20)
    it = lst.iterator(0)
    assert it is not None
    it.destroy()
    assert not it.has_next()
    assert it.next() is None
    assert [10, 20] == list(lst)
    # Destroying twice is harmless
    it.destroy()


def test_independent_iterators():
    lst = int_list(1, 2, 3)
    a = lst.iterator(0)
    b = lst.iterator(1)
    assert a is not None and b is not None
    assert 1 == a.next()
    assert 2 == b.next()
    assert 2 == a.next()
    assert 3 == b.next()
    assert not b.has_next()
    assert a.has_next()


@pytest.mark.parametrize(
    "mutate",
    [
        lambda lst: lst.add_last(4),
        lambda lst: lst.add(0, 4),
        lambda lst: lst.remove(1),
        lambda lst: lst.clear(),
        lambda lst: lst.destroy(),
    ],
)
def test_structural_change_invalidates(mutate):
    lst = int_list(1, 2, 3)
    it = lst.iterator(0)
    assert it is not None
    it.next()
    mutate(lst)
    with pytest.raises(StaleIteratorError):
        it.has_next()
    with pytest.raises(StaleIteratorError):
        it.next()


def test_set_does_not_invalidate():
    lst = int_list(1, 2, 3)
    it = lst.iterator(0)
    assert it is not None
    lst.set(1, 20)
    assert [1, 20, 3] == list(it)


def test_does_not_keep_list_alive():
    lst = int_list(1, 2)
    it = lst.iterator(0)
    assert it is not None
    del lst
    gc.collect()
    with pytest.raises(StaleIteratorError):
        it.has_next()


def test_python_iteration():
    lst = int_list(1, 2, 3)
    it = lst.iterator(1)
    assert it is not None
    assert [2, 3] == list(it)
    assert [1, 2, 3] == [element for element in lst]


def test_for_loop_fails_fast_on_mutation():
    lst = int_list(1, 2, 3)
    with pytest.raises(StaleIteratorError):
        for element in lst:
            if element == 2:
                lst.remove(0)
