"""Unsigned LEB128 varint reading."""

from typing import Tuple


def read_varint(data: bytes) -> Tuple[int, int]:
    """Read an unsigned varint from the start of `data`.

    Returns the decoded value and the number of bytes consumed. When the input
    ends before a terminating byte, every byte is consumed and the value is
    assembled from the groups that were seen. `multiformats.varint.decode_raw`
    raises a ValueError for such input, so it is not used here.
    """
    value = 0
    shift = 0
    pos = 0
    while pos < len(data):
        b = data[pos]
        pos += 1
        value |= (b & 0x7F) << shift
        if not b & 0x80:
            break
        shift += 7
    return value, pos
