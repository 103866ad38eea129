#!/usr/bin/env python3

# Copyright (C) The keymaker developers
#
# This file is part of keymaker. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of keymaker including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Entropy conversion functions.

The internal representation of entropy during mnemonic conversions
is the binary 0/1 string; leading zeros are never considered
redundant padding.
"""

from typing import Callable, List, Sequence

from keymaker.alias import Octets
from keymaker.exceptions import InvalidEntropySize, LengthMismatch
from keymaker.mnemonic.wordlist import BITS_PER_WORD
from keymaker.utils import bytes_from_octets

# entropy bits allowed for mnemonic sentences: 12 and 24 words
ENTROPY_BITS = (128, 256)

BinStr = str

RandBytes = Callable[[int], bytes]


def bytes_entropy_from_octets(entropy: Octets) -> bytes:
    "Return the bytes entropy, ensuring it is 128 or 256 bits."

    try:
        entropy = bytes_from_octets(entropy, [bits // 8 for bits in ENTROPY_BITS])
    except LengthMismatch as e:
        err_msg = "invalid entropy size: it must be 16 or 32 bytes"
        raise InvalidEntropySize(err_msg) from e
    return entropy


def bytes_entropy_from_random(bits: int, randbytes: RandBytes) -> bytes:
    "Return fresh random entropy drawn from randbytes."

    if bits not in ENTROPY_BITS:
        raise InvalidEntropySize(f"invalid number of bits: {bits}")
    return bytes_entropy_from_octets(randbytes(bits // 8))


def bin_str_from_bytes(bytes_entropy: bytes) -> BinStr:
    "Return the binary 0/1 string of the input bytes, leading zeros included."

    int_entropy = int.from_bytes(bytes_entropy, byteorder="big", signed=False)
    return bin(int_entropy)[2:].zfill(len(bytes_entropy) * 8)


def bytes_from_bin_str(bin_str: BinStr) -> bytes:
    "Return the bytes of a binary 0/1 string whose length is a multiple of 8."

    return int(bin_str, 2).to_bytes(len(bin_str) // 8, byteorder="big", signed=False)


def wordlist_indexes_from_bin_str(bin_str: BinStr) -> List[int]:
    "Split a binary 0/1 string into 11-bit word-list indexes."

    return [
        int(bin_str[i : i + BITS_PER_WORD], 2)
        for i in range(0, len(bin_str), BITS_PER_WORD)
    ]


def bin_str_from_wordlist_indexes(indexes: Sequence[int]) -> BinStr:
    "Return the binary 0/1 string of 11-bit word-list indexes."

    return "".join(bin(index)[2:].zfill(BITS_PER_WORD) for index in indexes)
