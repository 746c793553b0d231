"""64-bit xxHash (XXH64) implemented over plain Python integers."""

from __future__ import annotations

from typing import Union

_MASK = 0xFFFFFFFFFFFFFFFF

_P1 = 11400714785074694791
_P2 = 14029467366897019727
_P3 = 1609587929392839161
_P4 = 9650029242287828579
_P5 = 2870177450012600261


def _rotl(x: int, r: int) -> int:
    return ((x << r) | (x >> (64 - r))) & _MASK


def _round(acc: int, lane: int) -> int:
    acc = (acc + lane * _P2) & _MASK
    acc = _rotl(acc, 31)
    return (acc * _P1) & _MASK


def _merge_round(acc: int, val: int) -> int:
    acc ^= _round(0, val)
    return (acc * _P1 + _P4) & _MASK


def _read64(data: bytes, offset: int) -> int:
    return int.from_bytes(data[offset:offset + 8], "little")


def _read32(data: bytes, offset: int) -> int:
    return int.from_bytes(data[offset:offset + 4], "little")


def xxh64(data: Union[bytes, bytearray, memoryview, str], seed: int = 0) -> int:
    """Return the XXH64 digest of ``data`` as an unsigned 64-bit integer.

    A ``str`` is hashed as its UTF-8 encoding.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    elif isinstance(data, (bytearray, memoryview)):
        data = bytes(data)
    elif not isinstance(data, bytes):
        raise TypeError(f"cannot hash object of type {type(data).__name__}")

    seed &= _MASK
    length = len(data)
    offset = 0

    if length >= 32:
        v1 = (seed + _P1 + _P2) & _MASK
        v2 = (seed + _P2) & _MASK
        v3 = seed
        v4 = (seed - _P1) & _MASK
        limit = length - 32
        while offset <= limit:
            v1 = _round(v1, _read64(data, offset))
            v2 = _round(v2, _read64(data, offset + 8))
            v3 = _round(v3, _read64(data, offset + 16))
            v4 = _round(v4, _read64(data, offset + 24))
            offset += 32
        h = (_rotl(v1, 1) + _rotl(v2, 7) + _rotl(v3, 12) + _rotl(v4, 18)) & _MASK
        for v in (v1, v2, v3, v4):
            h = _merge_round(h, v)
    else:
        h = (seed + _P5) & _MASK

    h = (h + length) & _MASK

    while offset + 8 <= length:
        h ^= _round(0, _read64(data, offset))
        h = (_rotl(h, 27) * _P1 + _P4) & _MASK
        offset += 8

    if offset + 4 <= length:
        h ^= (_read32(data, offset) * _P1) & _MASK
        h = (_rotl(h, 23) * _P2 + _P3) & _MASK
        offset += 4

    for byte in data[offset:]:
        h ^= (byte * _P5) & _MASK
        h = (_rotl(h, 11) * _P1) & _MASK

    h ^= h >> 33
    h = (h * _P2) & _MASK
    h ^= h >> 29
    h = (h * _P3) & _MASK
    h ^= h >> 32
    return h