#!/usr/bin/env python3

# Copyright (C) The keymaker developers
#
# This file is part of keymaker. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of keymaker including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""ECDSA signatures: strict DER and recoverable compact formats.

http://bitcoin.stackexchange.com/q/12554/40688

BIP66 mandates a strict DER format:

[0x30] [data-size][0x02][r-size][r][0x02][s-size][s]

* 0x30: header byte to indicate compound structure
* data-size: 1-byte size descriptor of the following data
* 0x02: header byte indicating an integer
* r-size: 1-byte size descriptor of the r value that follows
* r: arbitrary-size big-endian r value.
    It must use the shortest possible encoding for
    a positive integers: no null bytes at the start,
    except a single one when the next byte has its highest bit set
    (to avoid being interpreted as a negative number)
* 0x02: header byte indicating an integer
* s-size: 1-byte size descriptor of the s value that follows
* s: arbitrary-size big-endian s value. Same rules as for r apply

Bitcoin has a "low s" rule for the s value to be below ec.n / 2
to prevent signature malleability: (r, n - s) is valid too.

The compact signature is 65 bytes:
[header][r (32 bytes)][s (32 bytes)], where
header = 27 + recovery id (+ 4 if the public key is compressed).
"""

from dataclasses import dataclass
from io import BytesIO
from typing import Tuple

from keymaker.alias import Octets
from keymaker.exceptions import InvalidSignature, KeymakerValueError
from keymaker.scalar import SECP256K1_ORDER
from keymaker.utils import bytes_from_octets

_DER_SCALAR_MARKER = b"\x02"
_DER_SIG_MARKER = b"\x30"

COMPACT_SIG_SIZE = 65
_HEADER_BASE = 27
_HEADER_COMPRESSED = 4


def _serialize_scalar(scalar: int) -> bytes:
    # 'highest bit set' padding included here
    scalar_size = scalar.bit_length() // 8 + 1
    scalar_bytes = scalar.to_bytes(scalar_size, byteorder="big", signed=False)
    return _DER_SCALAR_MARKER + len(scalar_bytes).to_bytes(1, "big") + scalar_bytes


def _read(stream: BytesIO, size: int) -> bytes:
    data = stream.read(size)
    if len(data) != size:
        err_msg = f"not enough binary data: {len(data)} instead of {size}"
        raise InvalidSignature(err_msg)
    return data


def _deserialize_scalar(stream: BytesIO) -> int:

    marker = _read(stream, 1)
    if marker != _DER_SCALAR_MARKER:
        err_msg = f"invalid value header: {marker.hex()}"
        err_msg += f", instead of integer element {_DER_SCALAR_MARKER.hex()}"
        raise InvalidSignature(err_msg)

    size = _read(stream, 1)[0]
    if size == 0:
        raise InvalidSignature("zero size scalar")
    r_bytes = _read(stream, size)
    if size > 1 and r_bytes[0] == 0 and r_bytes[1] < 0x80:
        raise InvalidSignature("invalid 'highest bit set' padding")
    if r_bytes[0] >= 0x80:
        raise InvalidSignature("invalid negative scalar")

    return int.from_bytes(r_bytes, byteorder="big", signed=False)


def _parse_der(der: bytes) -> Tuple[int, int]:

    stream = BytesIO(der)
    marker = _read(stream, 1)
    if marker != _DER_SIG_MARKER:
        err_msg = f"invalid compound header: {marker.hex()}"
        err_msg += f", instead of DER sequence tag {_DER_SIG_MARKER.hex()}"
        raise InvalidSignature(err_msg)

    size = _read(stream, 1)[0]
    substream = BytesIO(_read(stream, size))
    r = _deserialize_scalar(substream)
    s = _deserialize_scalar(substream)

    # to prevent malleability
    # the DER sequence must have been consumed entirely
    if substream.read(1) != b"" or stream.read(1) != b"":
        raise InvalidSignature("invalid DER sequence length")

    for name, scalar in (("r", r), ("s", s)):
        if not 0 < scalar < SECP256K1_ORDER:
            raise InvalidSignature(f"scalar {name} not in 1..n-1")
    return r, s


@dataclass(frozen=True)
class Signature:
    "ECDSA signature in strict DER representation."

    der: bytes

    def __post_init__(self) -> None:
        # fail early on malformed DER
        _parse_der(self.der)

    @classmethod
    def from_rs(cls, r: int, s: int) -> "Signature":
        out = _serialize_scalar(r) + _serialize_scalar(s)
        return cls(_DER_SIG_MARKER + len(out).to_bytes(1, "big") + out)

    @classmethod
    def from_hex(cls, hex_str: str) -> "Signature":
        try:
            return cls(bytes_from_octets(hex_str))
        except KeymakerValueError as e:
            raise InvalidSignature(f"invalid signature: {hex_str!r}") from e

    @property
    def rs(self) -> Tuple[int, int]:
        return _parse_der(self.der)

    @property
    def r(self) -> int:
        return self.rs[0]

    @property
    def s(self) -> int:
        return self.rs[1]

    def check_low_s(self) -> bool:
        "Return True if s is in the lower half of the curve order."
        return self.s <= SECP256K1_ORDER // 2

    def __bytes__(self) -> bytes:
        return self.der

    def __len__(self) -> int:
        return len(self.der)

    def __str__(self) -> str:
        return self.der.hex()


@dataclass(frozen=True)
class CompactSignature:
    "Recoverable ECDSA signature: header byte followed by r||s."

    data: bytes

    def __post_init__(self) -> None:
        if len(self.data) != COMPACT_SIG_SIZE:
            err_msg = f"invalid compact signature size: {len(self.data)}"
            raise InvalidSignature(err_msg)
        header = self.data[0]
        if not _HEADER_BASE <= header < _HEADER_BASE + 2 * _HEADER_COMPRESSED:
            raise InvalidSignature(f"invalid compact signature header: {header}")

    @classmethod
    def from_rs(cls, recid: int, rs: bytes, compressed: bool) -> "CompactSignature":
        header = _HEADER_BASE + recid
        if compressed:
            header += _HEADER_COMPRESSED
        return cls(bytes([header]) + rs)

    @classmethod
    def from_hex(cls, hex_str: str) -> "CompactSignature":
        try:
            return cls(bytes_from_octets(hex_str))
        except KeymakerValueError as e:
            raise InvalidSignature(f"invalid compact signature: {hex_str!r}") from e

    @property
    def recid(self) -> int:
        return (self.data[0] - _HEADER_BASE) % _HEADER_COMPRESSED

    @property
    def compressed(self) -> bool:
        return self.data[0] - _HEADER_BASE >= _HEADER_COMPRESSED

    @property
    def rs(self) -> bytes:
        return self.data[1:]

    def __bytes__(self) -> bytes:
        return self.data

    def __len__(self) -> int:
        return len(self.data)

    def __str__(self) -> str:
        return self.data.hex()
