"""The Whirlpool message digest (512 bits)."""

from __future__ import annotations

import struct

from gnablib.whirlpool_tables import build_circulant_table, build_round_constants

_BLOCK_SIZE = 64
_DIGEST_SIZE = 64
_LENGTH_BYTES = 32
_SIZE_SPACE = _BLOCK_SIZE - _LENGTH_BYTES
_LENGTH_MASK = (1 << (_LENGTH_BYTES * 8)) - 1

_CT = build_circulant_table()
_RC = tuple(build_round_constants(_CT))
_C0, _C1, _C2, _C3, _C4, _C5, _C6, _C7 = (
    tuple(_CT[t * 256:(t + 1) * 256]) for t in range(8)
)

_WORDS = struct.Struct(">8Q")


def _mix(v: list[int]) -> list[int]:
    # Negative indices wrap, matching (i - n) & 7 for eight words
    return [
        _C0[v[i] >> 56]
        ^ _C1[(v[i - 1] >> 48) & 0xFF]
        ^ _C2[(v[i - 2] >> 40) & 0xFF]
        ^ _C3[(v[i - 3] >> 32) & 0xFF]
        ^ _C4[(v[i - 4] >> 24) & 0xFF]
        ^ _C5[(v[i - 5] >> 16) & 0xFF]
        ^ _C6[(v[i - 6] >> 8) & 0xFF]
        ^ _C7[v[i - 7] & 0xFF]
        for i in range(8)
    ]


def _compress(state: list[int], block: bytes | bytearray) -> list[int]:
    x = _WORDS.unpack(block)
    key = list(state)
    cipher = [a ^ b for a, b in zip(x, key)]
    for rc in _RC:
        key = _mix(key)
        key[0] ^= rc
        cipher = [k ^ m for k, m in zip(key, _mix(cipher))]
    # Miyaguchi-Preneel compression
    return [h ^ c ^ w for h, c, w in zip(state, cipher, x)]


class Whirlpool:
    """Incremental Whirlpool hash."""

    name = "whirlpool"
    digest_size = _DIGEST_SIZE
    block_size = _BLOCK_SIZE

    def __init__(self, data: bytes = b"") -> None:
        self.reset()
        if data:
            self.update(data)

    def reset(self) -> None:
        """Return to the state of a fresh hash with no data."""
        self._state = [0] * 8
        self._buffer = bytearray()
        self._length = 0

    def update(self, data: bytes) -> None:
        """Feed more bytes into the hash."""
        raw = memoryview(data).tobytes()
        self._length += len(raw)
        buf = self._buffer
        buf += raw
        full = len(buf) - len(buf) % _BLOCK_SIZE
        for offset in range(0, full, _BLOCK_SIZE):
            self._state = _compress(self._state, buf[offset:offset + _BLOCK_SIZE])
        del buf[:full]

    def copy(self) -> Whirlpool:
        """An independent hash object with the same state."""
        other = Whirlpool.__new__(Whirlpool)
        other._state = list(self._state)
        other._buffer = bytearray(self._buffer)
        other._length = self._length
        return other

    def digest(self) -> bytes:
        """The digest of all data so far; the hash may still be updated."""
        tail = bytearray(self._buffer)
        tail.append(0x80)
        if len(tail) > _SIZE_SPACE:
            tail.extend(bytes(_BLOCK_SIZE - len(tail)))
        tail.extend(bytes(_SIZE_SPACE - len(tail) % _BLOCK_SIZE))
        tail += ((self._length * 8) & _LENGTH_MASK).to_bytes(_LENGTH_BYTES, "big")
        state = list(self._state)
        for offset in range(0, len(tail), _BLOCK_SIZE):
            state = _compress(state, tail[offset:offset + _BLOCK_SIZE])
        return _WORDS.pack(*state)

    def hexdigest(self) -> str:
        """The digest as lower-case hexadecimal."""
        return self.digest().hex()


def whirlpool(data: bytes = b"") -> Whirlpool:
    """A Whirlpool hash, optionally fed with ``data``."""
    return Whirlpool(data)