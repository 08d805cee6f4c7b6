"""Lookup tables for the Whirlpool hash: circulant table and round constants."""

from __future__ import annotations

from typing import Sequence

ROUNDS = 10

_M64 = 0xFFFFFFFFFFFFFFFF
# GF(2^8) reduction polynomial x^8 + x^4 + x^3 + x^2 + 1
_GF_POLY = 0x11D

_SBOX = bytes.fromhex(
    "1823c6e887b8014f36a6d2f5796f9152"
    "60bc9b8ea30c7b351de0d7c22e4bfe57"
    "157737e59ff04ada58c9290ab1a06b85"
    "bd5d10f4cb3e0567e427418ba77d95d8"
    "fbee7c66dd17479eca2dbf07ad5a8333"
    "6302aa71c81949d9f2e35b889a2632b0"
    "e90fd580becd3448ff7a905f20681aae"
    "b454932264f173124008c3ecdba18d3d"
    "9700cf2b7682d61bb5af6a5045f330ef"
    "3f55a2ea65ba2fc0de1cfd4d9275068a"
    "b2e60e1f62d4a896f9c525598472394c"
    "5e78388cd1a5e261b3219c1e43c7fc04"
    "51996d0dfadf7e243babce118f4eb7eb"
    "3c8194f7b9132cd3e76ec403564 47fa9".replace(" ", "")
    + "2abbc153dc0b9d6c3174f646ac8914e1"
    "163a6909 70b6d0edcc4298a4285cf886".replace(" ", "")
)


def _gf_double(v: int) -> int:
    v <<= 1
    if v >= 0x100:
        v ^= _GF_POLY
    return v


def _rotr64(v: int, n: int) -> int:
    n %= 64
    return ((v >> n) | (v << (64 - n))) & _M64


def build_circulant_table() -> list[int]:
    """Return the 8x256 circulant table, row ``t`` at offset ``t * 256``.

    Row 0 holds the S-box output multiplied by the circulant matrix
    (1, 1, 4, 1, 8, 5, 2, 9); each further row is the previous one
    rotated right by one byte.
    """
    row0 = []
    for v1 in _SBOX:
        v2 = _gf_double(v1)
        v4 = _gf_double(v2)
        v5 = v4 ^ v1
        v8 = _gf_double(v4)
        v9 = v8 ^ v1
        row0.append(
            (v1 << 56) | (v1 << 48) | (v4 << 40) | (v1 << 32)
            | (v8 << 24) | (v5 << 16) | (v2 << 8) | v9
        )
    return [_rotr64(v, 8 * t) for t in range(8) for v in row0]


def build_round_constants(table: Sequence[int]) -> list[int]:
    """Return the round constants derived from a circulant table."""
    constants = []
    for r in range(ROUNDS):
        r8 = r * 8
        rc = 0
        for t in range(8):
            rc ^= table[(t << 8) | (r8 + t)] & (0xFF << (56 - 8 * t))
        constants.append(rc)
    return constants