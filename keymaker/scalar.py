#!/usr/bin/env python3

# Copyright (C) The keymaker developers
#
# This file is part of keymaker. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of keymaker including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Fixed-width big-endian scalar arithmetic.

Operands are equal-length big-endian byte sequences;
results have the same width as the (first) operand.
Addition wraps around, i.e. it is modulo 256^width.

The secp256k1 private key range check is also provided here:
a valid private key k is a 32 bytes scalar with 0 < k < n,
where n is the curve order.
"""

from typing import Tuple

from keymaker.alias import Octets
from keymaker.exceptions import InvalidScalar, LengthMismatch
from keymaker.utils import bytes_from_octets, hex_string

SECP256K1_ORDER = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
SCALAR_SIZE = 32

_ORDER_BYTES = SECP256K1_ORDER.to_bytes(SCALAR_SIZE, byteorder="big", signed=False)


def _operands(a: Octets, b: Octets) -> Tuple[bytes, bytes]:
    a = bytes_from_octets(a)
    b = bytes_from_octets(b)
    if len(a) != len(b):
        err_msg = f"operand length mismatch: {len(a)} bytes vs {len(b)} bytes"
        raise LengthMismatch(err_msg)
    return a, b


def add(a: Octets, b: Octets) -> bytes:
    """Return a + b, truncated to the operand width.

    Radix-256 schoolbook addition, starting from the least significant byte
    and propagating the carry.
    """

    a, b = _operands(a, b)
    result = bytearray(len(a))
    carry = 0
    for i in reversed(range(len(a))):
        carry, result[i] = divmod(a[i] + b[i] + carry, 256)
    # the final carry is beyond the fixed width
    return bytes(result)


def modulo(a: Octets, b: Octets) -> bytes:
    "Return a mod b, left-zero-padded to the width of a."

    a, b = _operands(a, b)
    divisor = int.from_bytes(b, byteorder="big", signed=False)
    if divisor == 0:
        raise InvalidScalar("zero modulus")
    remainder = int.from_bytes(a, byteorder="big", signed=False) % divisor
    return remainder.to_bytes(len(a), byteorder="big", signed=False)


def is_valid_scalar(secret: Octets) -> bool:
    "Return True if secret is a 32 bytes scalar in [1, n-1]."

    try:
        secret = bytes_from_octets(secret, SCALAR_SIZE)
    except LengthMismatch:
        return False
    # secret mod n == secret if and only if secret < n
    return any(secret) and modulo(secret, _ORDER_BYTES) == secret


def assert_valid_scalar(secret: Octets) -> bytes:
    "Return the 32 bytes secret if it is a valid private key scalar."

    secret = bytes_from_octets(secret)
    if not is_valid_scalar(secret):
        q = int.from_bytes(secret, byteorder="big", signed=False)
        err_msg = "private key not in 1..n-1: "
        err_msg += f"'{hex_string(q)}'" if q > 0xFFFFFFFF else f"{q}"
        err_msg += f" ({len(secret)} bytes)" if len(secret) != SCALAR_SIZE else ""
        raise InvalidScalar(err_msg)
    return secret
