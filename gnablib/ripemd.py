"""RIPEMD-128, -160, -256 and -320 message digests."""

from __future__ import annotations

import struct
from typing import Callable, Sequence

_M32 = 0xFFFFFFFF
_M64 = 0xFFFFFFFFFFFFFFFF
_BLOCK_SIZE = 64
_LENGTH_OFFSET = _BLOCK_SIZE - 8

# Message word selection, left line
_R = (
    0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15,
    7, 4, 13, 1, 10, 6, 15, 3, 12, 0, 9, 5, 2, 14, 11, 8,
    3, 10, 14, 4, 9, 15, 8, 1, 2, 7, 0, 6, 13, 11, 5, 12,
    1, 9, 11, 10, 0, 8, 12, 4, 13, 3, 7, 15, 14, 5, 6, 2,
    4, 0, 5, 9, 7, 12, 2, 10, 14, 1, 3, 8, 11, 6, 15, 13,
)
# Message word selection, right line
_RR = (
    5, 14, 7, 0, 9, 2, 11, 4, 13, 6, 15, 8, 1, 10, 3, 12,
    6, 11, 3, 7, 0, 13, 5, 10, 14, 15, 8, 12, 4, 9, 1, 2,
    15, 5, 1, 3, 7, 14, 6, 9, 11, 8, 12, 2, 10, 0, 4, 13,
    8, 6, 4, 1, 3, 11, 15, 0, 5, 12, 2, 13, 9, 7, 10, 14,
    12, 15, 10, 4, 1, 5, 8, 7, 6, 2, 13, 14, 0, 3, 9, 11,
)
# Rotation amounts, left line
_S = (
    11, 14, 15, 12, 5, 8, 7, 9, 11, 13, 14, 15, 6, 7, 9, 8,
    7, 6, 8, 13, 11, 9, 7, 15, 7, 12, 15, 9, 11, 7, 13, 12,
    11, 13, 6, 7, 14, 9, 13, 15, 14, 8, 13, 6, 5, 12, 7, 5,
    11, 12, 14, 15, 14, 15, 9, 8, 9, 14, 5, 6, 8, 6, 5, 12,
    9, 15, 5, 11, 6, 8, 13, 12, 5, 12, 13, 14, 11, 8, 5, 6,
)
# Rotation amounts, right line
_SS = (
    8, 9, 9, 11, 13, 15, 15, 5, 7, 7, 8, 11, 14, 14, 12, 6,
    9, 13, 15, 7, 12, 8, 9, 11, 7, 7, 12, 7, 6, 15, 13, 11,
    9, 7, 15, 11, 8, 6, 6, 14, 12, 13, 5, 14, 13, 13, 7, 5,
    15, 5, 8, 11, 14, 14, 6, 14, 6, 9, 12, 9, 12, 5, 15, 8,
    8, 5, 12, 9, 12, 5, 14, 6, 8, 13, 6, 5, 15, 13, 11, 11,
)
_K = (0x00000000, 0x5A827999, 0x6ED9EBA1, 0x8F1BBCDC, 0xA953FD4E)
_KK = (0x50A28BE6, 0x5C4DD124, 0x6D703EF3, 0x7A6D76E9, 0x00000000)
# 128/256 zero the last constant of the parallel line
_KK128 = (0x50A28BE6, 0x5C4DD124, 0x6D703EF3, 0x00000000)
_IV = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476, 0xC3D2E1F0)
_IV2 = (0x76543210, 0xFEDCBA98, 0x89ABCDEF, 0x01234567, 0x3C2D1E0F)

# Words swapped between the lines after each round
_SWAP256 = (0, 1, 2, 3)
_SWAP320 = (1, 3, 0, 2, 4)


def _f0(x: int, y: int, z: int) -> int:
    return x ^ y ^ z


def _f1(x: int, y: int, z: int) -> int:
    return z ^ (x & (y ^ z))


def _f2(x: int, y: int, z: int) -> int:
    return ((x | (~y & _M32)) ^ z) & _M32


def _f3(x: int, y: int, z: int) -> int:
    return y ^ (z & (x ^ y))


def _f4(x: int, y: int, z: int) -> int:
    return (x ^ (y | (~z & _M32))) & _M32


_F = (_f0, _f1, _f2, _f3, _f4)

Func = Callable[[int, int, int], int]


def _rotl(v: int, n: int) -> int:
    return ((v << n) | (v >> (32 - n))) & _M32


def _line4(
    words: Sequence[int], x: Sequence[int], f: Func, k: int,
    order: Sequence[int], shifts: Sequence[int],
) -> list[int]:
    a, b, c, d = words
    for xi, s in zip(order, shifts):
        t = (a + f(b, c, d) + x[xi] + k) & _M32
        t = ((t << s) | (t >> (32 - s))) & _M32
        a, b, c, d = d, t, b, c
    return [a, b, c, d]


def _line5(
    words: Sequence[int], x: Sequence[int], f: Func, k: int,
    order: Sequence[int], shifts: Sequence[int],
) -> list[int]:
    a, b, c, d, e = words
    for xi, s in zip(order, shifts):
        t = (a + f(b, c, d) + x[xi] + k) & _M32
        t = (e + (((t << s) | (t >> (32 - s))) & _M32)) & _M32
        a, b, c, d, e = e, t, b, _rotl(c, 10), d
    return [a, b, c, d, e]


def _rounds(rnd: int) -> slice:
    return slice(rnd * 16, rnd * 16 + 16)


def _compress128(state: list[int], x: Sequence[int]) -> list[int]:
    left = list(state)
    right = list(state)
    for rnd in range(4):
        sl = _rounds(rnd)
        left = _line4(left, x, _F[rnd], _K[rnd], _R[sl], _S[sl])
        right = _line4(right, x, _F[3 - rnd], _KK128[rnd], _RR[sl], _SS[sl])
    a, b, c, d = left
    aa, bb, cc, dd = right
    return [
        (state[1] + c + dd) & _M32,
        (state[2] + d + aa) & _M32,
        (state[3] + a + bb) & _M32,
        (state[0] + b + cc) & _M32,
    ]


def _compress160(state: list[int], x: Sequence[int]) -> list[int]:
    left = list(state)
    right = list(state)
    for rnd in range(5):
        sl = _rounds(rnd)
        left = _line5(left, x, _F[rnd], _K[rnd], _R[sl], _S[sl])
        right = _line5(right, x, _F[4 - rnd], _KK[rnd], _RR[sl], _SS[sl])
    a, b, c, d, e = left
    aa, bb, cc, dd, ee = right
    return [
        (state[1] + c + dd) & _M32,
        (state[2] + d + ee) & _M32,
        (state[3] + e + aa) & _M32,
        (state[4] + a + bb) & _M32,
        (state[0] + b + cc) & _M32,
    ]


def _compress256(state: list[int], x: Sequence[int]) -> list[int]:
    left = state[:4]
    right = state[4:]
    for rnd, swap in enumerate(_SWAP256):
        sl = _rounds(rnd)
        left = _line4(left, x, _F[rnd], _K[rnd], _R[sl], _S[sl])
        right = _line4(right, x, _F[3 - rnd], _KK128[rnd], _RR[sl], _SS[sl])
        left[swap], right[swap] = right[swap], left[swap]
    return [(s + v) & _M32 for s, v in zip(state, left + right)]


def _compress320(state: list[int], x: Sequence[int]) -> list[int]:
    left = state[:5]
    right = state[5:]
    for rnd, swap in enumerate(_SWAP320):
        sl = _rounds(rnd)
        left = _line5(left, x, _F[rnd], _K[rnd], _R[sl], _S[sl])
        right = _line5(right, x, _F[4 - rnd], _KK[rnd], _RR[sl], _SS[sl])
        left[swap], right[swap] = right[swap], left[swap]
    return [(s + v) & _M32 for s, v in zip(state, left + right)]


_VARIANTS: dict[int, tuple[int, Callable[[list[int], Sequence[int]], list[int]]]] = {
    128: (4, _compress128),
    160: (5, _compress160),
    256: (8, _compress256),
    320: (10, _compress320),
}

_WORDS = struct.Struct("<16I")


def _as_bytes(data: object) -> bytes:
    return memoryview(data).tobytes()  # type: ignore[arg-type]


class RipeMd:
    """Incremental RIPEMD hash of 128, 160, 256 or 320 bits."""

    block_size = _BLOCK_SIZE

    def __init__(self, variant: int = 160, data: bytes = b"") -> None:
        if variant not in _VARIANTS:
            raise ValueError(
                f"unsupported RIPEMD variant {variant!r}; "
                f"expected one of {sorted(_VARIANTS)}"
            )
        self._variant = variant
        self._words, self._compress = _VARIANTS[variant]
        self.reset()
        if data:
            self.update(data)

    @property
    def name(self) -> str:
        return f"ripemd{self._variant}"

    @property
    def digest_size(self) -> int:
        return self._words * 4

    def reset(self) -> None:
        """Return to the state of a fresh hash with no data."""
        n = self._words
        if n > 5:
            half = n // 2
            self._state = list(_IV[:half]) + list(_IV2[:half])
        else:
            self._state = list(_IV[:n])
        self._buffer = bytearray()
        self._length = 0

    def _process(self, block: bytes | bytearray) -> None:
        self._state = self._compress(self._state, _WORDS.unpack(block))

    def update(self, data: bytes) -> None:
        """Feed more bytes into the hash."""
        raw = _as_bytes(data)
        self._length += len(raw)
        buf = self._buffer
        buf += raw
        full = len(buf) - len(buf) % _BLOCK_SIZE
        for offset in range(0, full, _BLOCK_SIZE):
            self._process(buf[offset:offset + _BLOCK_SIZE])
        del buf[:full]

    def copy(self) -> RipeMd:
        """An independent hash object with the same state."""
        other = RipeMd.__new__(RipeMd)
        other._variant = self._variant
        other._words = self._words
        other._compress = self._compress
        other._state = list(self._state)
        other._buffer = bytearray(self._buffer)
        other._length = self._length
        return other

    def digest(self) -> bytes:
        """The digest of all data so far; the hash may still be updated."""
        tail = bytearray(self._buffer)
        tail.append(0x80)
        if len(tail) > _LENGTH_OFFSET:
            tail.extend(bytes(_BLOCK_SIZE - len(tail)))
        tail.extend(bytes(_LENGTH_OFFSET - len(tail) % _BLOCK_SIZE))
        tail += ((self._length * 8) & _M64).to_bytes(8, "little")
        state = list(self._state)
        for offset in range(0, len(tail), _BLOCK_SIZE):
            state = self._compress(state, _WORDS.unpack(tail[offset:offset + _BLOCK_SIZE]))
        return struct.pack(f"<{len(state)}I", *state)

    def hexdigest(self) -> str:
        """The digest as lower-case hexadecimal."""
        return self.digest().hex()


def ripemd128(data: bytes = b"") -> RipeMd:
    """A RIPEMD-128 hash, optionally fed with ``data``."""
    return RipeMd(128, data)


def ripemd160(data: bytes = b"") -> RipeMd:
    """A RIPEMD-160 hash, optionally fed with ``data``."""
    return RipeMd(160, data)


def ripemd256(data: bytes = b"") -> RipeMd:
    """A RIPEMD-256 hash, optionally fed with ``data``."""
    return RipeMd(256, data)


def ripemd320(data: bytes = b"") -> RipeMd:
    """A RIPEMD-320 hash, optionally fed with ``data``."""
    return RipeMd(320, data)