#!/usr/bin/env python3

# Copyright (C) The keymaker developers
#
# This file is part of keymaker. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of keymaker including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `keymaker.scalar` module."

import secrets

import pytest

from keymaker.exceptions import InvalidScalar, LengthMismatch
from keymaker.scalar import (
    SECP256K1_ORDER,
    add,
    assert_valid_scalar,
    is_valid_scalar,
    modulo,
)


def _int(b: bytes) -> int:
    return int.from_bytes(b, byteorder="big", signed=False)


def test_add() -> None:
    a = (65500).to_bytes(2, "big")
    b = (35).to_bytes(2, "big")
    assert _int(add(a, b)) == 65500 + 35

    c = (5_000_000).to_bytes(16, "big")
    d = (1_000_000).to_bytes(16, "big")
    assert _int(add(c, d)) == 6_000_000

    # carry propagation across several bytes
    assert add(b"\x00\xff\xff", b"\x00\x00\x01") == b"\x01\x00\x00"
    # overflow beyond the operand width is truncated
    assert add(b"\xff\xff", b"\x00\x01") == b"\x00\x00"
    assert add(b"\xff\xff", b"\xff\xff") == b"\xff\xfe"
    assert add("00ff", "0001") == b"\x01\x00"


def test_modulo() -> None:
    a = (65500).to_bytes(2, "big")
    b = (35).to_bytes(2, "big")
    assert _int(modulo(a, b)) == 65500 % 35

    c = (6_000_000).to_bytes(16, "big")
    d = (120_000).to_bytes(16, "big")
    result = modulo(c, d)
    assert len(result) == 16
    assert _int(result) == 0

    # left-zero-padded to the operand width
    assert modulo(b"\x01\x00\x05", b"\x00\x00\x10") == b"\x00\x00\x05"

    with pytest.raises(InvalidScalar, match="zero modulus"):
        modulo(b"\x01\x00", b"\x00\x00")


def test_length_mismatch() -> None:
    err_msg = "operand length mismatch: "
    with pytest.raises(LengthMismatch, match=err_msg):
        add(b"\x01", b"\x00\x01")
    with pytest.raises(LengthMismatch, match=err_msg):
        modulo(b"\x01\x00\x00", b"\x01")


def test_random_operands() -> None:
    for size in (1, 2, 8, 31, 32, 33, 64, 255, 256):
        for _ in range(16):
            a = secrets.token_bytes(size)
            b = secrets.token_bytes(size)
            expected = (_int(a) + _int(b)) % 256 ** size
            assert _int(add(a, b)) == expected
            assert len(add(a, b)) == size

            if not any(b):
                b = b[:-1] + b"\x01"
            result = modulo(a, b)
            assert len(result) == size
            assert _int(result) == _int(a) % _int(b)


def test_valid_scalar() -> None:
    n = SECP256K1_ORDER
    for q in (1, 2, n // 2, n - 1):
        secret = q.to_bytes(32, "big")
        assert is_valid_scalar(secret)
        assert assert_valid_scalar(secret) == secret

    err_msg = "private key not in 1..n-1: "
    for q in (0, n, n + 1, 2 ** 256 - 1):
        secret = q.to_bytes(32, "big")
        assert not is_valid_scalar(secret)
        with pytest.raises(InvalidScalar, match=err_msg):
            assert_valid_scalar(secret)

    assert not is_valid_scalar(b"\x01" * 31)
    with pytest.raises(InvalidScalar, match=err_msg):
        assert_valid_scalar(b"\x01" * 33)
