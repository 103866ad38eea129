#!/usr/bin/env python3

# Copyright (C) The keymaker developers
#
# This file is part of keymaker. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of keymaker including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""BIP39 entropy / mnemonic / seed functions.

https://github.com/bitcoin/bips/blob/master/bip-0039.mediawiki.

Checksummed entropy (**ENT+CS**) is converted from/to mnemonic.

* bits per word = bpw = 11
* **ENT** = raw entropy
* **CS** = checksum = **ENT** / 32
* **MS** = words in the mnemonic sentence = (**ENT+CS**) / bpw

+-----+----+--------+----+
| ENT | CS | ENT+CS | MS |
+=====+====+========+====+
| 128 |  4 |    132 | 12 |
+-----+----+--------+----+
| 256 |  8 |    264 | 24 |
+-----+----+--------+----+

Only 12 and 24 words mnemonic sentences are supported.

Mnemonic and passphrase are NFKD normalized before being used.
Seeds are stretched with 100_000 PBKDF2 iterations by default,
instead of the 2048 iterations of BIP39:
the iteration count must be set to 2048 to obtain BIP39 seeds.
"""

import hmac
import unicodedata
from hashlib import pbkdf2_hmac
from typing import List, Optional

from keymaker.alias import Mnemonic, Octets
from keymaker.exceptions import (
    ChecksumMismatch,
    KeymakerValueError,
    UnsupportedMnemonicLength,
)
from keymaker.hashes import sha256
from keymaker.mnemonic.entropy import (
    BinStr,
    bin_str_from_bytes,
    bin_str_from_wordlist_indexes,
    bytes_entropy_from_octets,
    bytes_from_bin_str,
    wordlist_indexes_from_bin_str,
)
from keymaker.mnemonic.wordlist import WORDLISTS, WordList

PBKDF2_ITERATIONS = 100_000
SEED_SIZE = 64
SALT_PREFIX = "mnemonic"

# words in the mnemonic sentence -> ENT bits
_ENTROPY_BITS_FROM_WORDS = {12: 128, 24: 256}


def _checksum(bytes_entropy: bytes) -> BinStr:
    "Return the leftmost ENT/32 bits of SHA256(entropy)."

    checksum_bits = len(bytes_entropy) * 8 // 32
    return bin_str_from_bytes(sha256(bytes_entropy))[:checksum_bits]


def words_from_mnemonic(mnemonic: Mnemonic) -> List[str]:
    "Return the NFKD normalized words of a mnemonic sentence."

    if isinstance(mnemonic, str):
        mnemonic = mnemonic.split()
    return [unicodedata.normalize("NFKD", word) for word in mnemonic]


def mnemonic_from_entropy(
    entropy: Octets, wordlist: Optional[WordList] = None
) -> str:
    """Convert input entropy to BIP39 checksummed mnemonic sentence.

    Input entropy can be expressed as bytes or hex-string;
    it must be 128 or 256 bits (16 or 32 bytes),
    resulting in a 12 or 24 words mnemonic sentence.
    Leading zeros are considered genuine entropy, not redundant padding.
    """

    bytes_entropy = bytes_entropy_from_octets(entropy)
    wordlist = wordlist or WORDLISTS.wordlist()

    cs_entropy = bin_str_from_bytes(bytes_entropy) + _checksum(bytes_entropy)
    indexes = wordlist_indexes_from_bin_str(cs_entropy)
    return " ".join(wordlist[index] for index in indexes)


def entropy_from_mnemonic(
    mnemonic: Mnemonic, wordlist: Optional[WordList] = None
) -> bytes:
    "Return the entropy from the BIP39 checksummed mnemonic sentence."

    words = words_from_mnemonic(mnemonic)
    try:
        bits = _ENTROPY_BITS_FROM_WORDS[len(words)]
    except KeyError:
        err_msg = f"invalid number of words: {len(words)}; must be 12 or 24"
        raise UnsupportedMnemonicLength(err_msg) from None

    wordlist = wordlist or WORDLISTS.wordlist()
    indexes = [wordlist.index(word) for word in words]
    cs_entropy = bin_str_from_wordlist_indexes(indexes)

    # entropy is only the first part of cs_entropy
    # the second part being the checksum, to be verified
    bytes_entropy = bytes_from_bin_str(cs_entropy[:bits])
    checksum = _checksum(bytes_entropy)
    if not hmac.compare_digest(cs_entropy[bits:], checksum):
        err_msg = f"invalid checksum: {cs_entropy[bits:]}; expected: {checksum}"
        raise ChecksumMismatch(err_msg)

    return bytes_entropy


def validate_mnemonic(mnemonic: Mnemonic, wordlist: Optional[WordList] = None) -> bool:
    """Return True if the mnemonic sentence is valid.

    Any mnemonic problem (word count, unknown word, checksum)
    results in False; see entropy_from_mnemonic for the details.
    """

    try:
        entropy_from_mnemonic(mnemonic, wordlist)
    except KeymakerValueError:
        return False
    return True


def seed_from_mnemonic(
    mnemonic: Mnemonic,
    passphrase: str = "",
    salt: Optional[bytes] = None,
    iterations: int = PBKDF2_ITERATIONS,
    verify_checksum: bool = True,
    wordlist: Optional[WordList] = None,
) -> bytes:
    """Return the 64 bytes seed from the provided mnemonic sentence.

    The salt is "mnemonic" + passphrase, unless explicitly provided.
    The mnemonic checksum verification can be skipped if needed.
    """

    words = words_from_mnemonic(mnemonic)
    if verify_checksum:
        entropy_from_mnemonic(words, wordlist)

    password = " ".join(words).encode()
    if salt is None:
        salt = (SALT_PREFIX + unicodedata.normalize("NFKD", passphrase)).encode()
    if iterations < 1:
        raise KeymakerValueError(f"invalid PBKDF2 iterations: {iterations}")
    return pbkdf2_hmac("sha512", password, bytes(salt), iterations, SEED_SIZE)
