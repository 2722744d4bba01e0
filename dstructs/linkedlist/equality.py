import sys
from typing import Any, Callable

type Equality[T] = Callable[[T, T], bool]


class NoByteRepresentation(TypeError):
    def __init__(self, element: Any):
        super().__init__(
            f"Can't compare {type(element).__name__} byte-wise, store"
            " bytes-like objects or ints, or give the list an equality"
            " function"
        )


def as_bytes(element: Any, element_size: int) -> bytes:
    """
    The first `element_size` bytes of `element`

    Ints are laid out like a native integer of that width, keeping
    only the low order bytes of ones too wide for it. Anything
    else has to support the buffer protocol (bytes, bytearray, array,
    ctypes instances...). Trailing bytes past `element_size` never take
    part, so zero any padding that falls inside it
    """
    match element:
        case int():
            # Two's complement, wrapped to the width like a C cast
            mask = (1 << (8 * element_size)) - 1
            return (element & mask).to_bytes(element_size, sys.byteorder)
        case _:
            try:
                view = memoryview(element)
            except TypeError:
                raise NoByteRepresentation(element) from None
            with view:
                return view.tobytes()[:element_size]


def bytewise(element_size: int) -> Equality[Any]:
    def equal(probe: Any, stored: Any) -> bool:
        return as_bytes(probe, element_size) == as_bytes(
            stored, element_size
        )

    return equal
