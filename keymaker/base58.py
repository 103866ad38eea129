#!/usr/bin/env python3

# Copyright (C) The keymaker developers
#
# This file is part of keymaker. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of keymaker including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Base58 encoding and decoding functions.

Base58 is similar to Base64, but it omits the similar-looking letters
0 (zero), O (capital o), I (capital i), and l (lower case L)
to avoid ambiguity when printed; moreover, it removes '+' and '/'
so that a double-click does select the whole string.

This is plain Base58: private key layouts already carry their own
hash256 checksum suffix, so no further checksum is added here.

The interface mimics the native python3 base64 interface, i.e.
it supports encoding bytes-like objects to ASCII bytes,
and decoding ASCII bytes-like objects or ASCII strings to bytes.
"""

from keymaker.alias import String
from keymaker.exceptions import ParseError

_ALPHABET = b"123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
__BASE = len(_ALPHABET)


def b58encode(v: bytes) -> bytes:
    "Encode a bytes-like object using Base58."

    # leading-0s become base58 leading-1s
    v = bytes(v)
    n_pad = len(v)
    v = v.lstrip(b"\0")
    n_pad -= len(v)

    i = int.from_bytes(v, byteorder="big", signed=False)
    result = b""
    while i:
        i, idx = divmod(i, __BASE)
        result = _ALPHABET[idx : idx + 1] + result

    return _ALPHABET[:1] * n_pad + result


def b58decode(v: String) -> bytes:
    "Decode a Base58 encoded bytes-like object or ASCII string."

    if isinstance(v, str):
        try:
            v = v.strip().encode("ascii")
        except UnicodeEncodeError as e:
            raise ParseError("Base58 string contains invalid characters") from e

    if any(x not in _ALPHABET for x in v):
        raise ParseError("Base58 string contains invalid characters")

    # base58 leading-1s become leading-0s
    n_pad = len(v)
    v = v.lstrip(_ALPHABET[:1])
    n_pad -= len(v)

    i = 0
    for char in v:
        i = i * __BASE + _ALPHABET.index(char)
    nbytes = (i.bit_length() + 7) // 8
    return b"\0" * n_pad + i.to_bytes(nbytes, byteorder="big", signed=False)
