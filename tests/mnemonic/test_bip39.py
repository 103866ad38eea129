#!/usr/bin/env python3

# Copyright (C) The keymaker developers
#
# This file is part of keymaker. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of keymaker including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `keymaker.mnemonic.bip39` module."

import secrets
from hashlib import pbkdf2_hmac

import pytest

from keymaker.exceptions import (
    ChecksumMismatch,
    InvalidEntropySize,
    KeymakerTypeError,
    UnknownWord,
    UnsupportedMnemonicLength,
)
from keymaker.mnemonic import bip39
from keymaker.mnemonic.wordlist import WORDLISTS

# https://github.com/trezor/python-mnemonic/blob/master/vectors.json
VECTORS = [
    (
        "00000000000000000000000000000000",
        "abandon abandon abandon abandon abandon abandon abandon abandon abandon abandon abandon about",
    ),
    (
        "7f7f7f7f7f7f7f7f7f7f7f7f7f7f7f7f",
        "legal winner thank year wave sausage worth useful legal winner thank yellow",
    ),
    (
        "80808080808080808080808080808080",
        "letter advice cage absurd amount doctor acoustic avoid letter advice cage above",
    ),
    (
        "ffffffffffffffffffffffffffffffff",
        "zoo zoo zoo zoo zoo zoo zoo zoo zoo zoo zoo wrong",
    ),
    ("00" * 32, "abandon " * 23 + "art"),
    ("ff" * 32, "zoo " * 23 + "vote"),
]


def test_vectors() -> None:
    for entropy, mnemonic in VECTORS:
        assert bip39.mnemonic_from_entropy(entropy) == mnemonic
        assert bip39.mnemonic_from_entropy(bytes.fromhex(entropy)) == mnemonic
        assert bip39.entropy_from_mnemonic(mnemonic) == bytes.fromhex(entropy)
        assert bip39.validate_mnemonic(mnemonic)
        assert bip39.validate_mnemonic(mnemonic.split())


def test_bip39_seed() -> None:
    "BIP39 seeds require 2048 iterations."

    mnemonic = VECTORS[0][1]
    seed = bip39.seed_from_mnemonic(mnemonic, "TREZOR", iterations=2048)
    assert seed.hex() == (
        "c55257c360c07c72029aebc1b53c05ed0362ada38ead3e3e9efa3708e5349553"
        "1f09a6987599d18264c1e1c92f2cf141630c7a3c4ab7c81b2f001698e7463b04"
    )

    mnemonic = VECTORS[4][1]
    seed = bip39.seed_from_mnemonic(mnemonic, "TREZOR", iterations=2048)
    assert seed.hex() == (
        "bda85446c68413707090a52022edd26a1c9462295029f2e60cd7c4f2bbd30971"
        "70af7a4d73245cafa9c3cca8d561a7c3de6f5d4a10be8ed2a5e608d68f92fcc8"
    )


def test_seed_from_mnemonic() -> None:
    mnemonic = "abandon abandon atom trust ankle walnut oil across awake bunker divorce abstract"

    seed = bip39.seed_from_mnemonic(mnemonic)
    assert len(seed) == 64
    password = mnemonic.encode()
    assert seed == pbkdf2_hmac("sha512", password, b"mnemonic", 100_000, 64)
    # spurious whitespaces are removed
    assert seed == bip39.seed_from_mnemonic("  " + mnemonic.replace(" ", "   "))

    seed = bip39.seed_from_mnemonic(mnemonic, "passphrase", iterations=10)
    assert seed == pbkdf2_hmac("sha512", password, b"mnemonicpassphrase", 10, 64)

    # an explicit salt overrides the passphrase
    seed = bip39.seed_from_mnemonic(mnemonic, "passphrase", b"mysalt", 10)
    assert seed == pbkdf2_hmac("sha512", password, b"mysalt", 10, 64)

    wrong_mnemonic = "abandon abandon atom trust ankle walnut oil across awake bunker divorce oil"
    with pytest.raises(ChecksumMismatch, match="invalid checksum: "):
        bip39.seed_from_mnemonic(wrong_mnemonic, iterations=10)
    seed = bip39.seed_from_mnemonic(wrong_mnemonic, iterations=10, verify_checksum=False)
    assert len(seed) == 64


def test_mnemonic_from_entropy() -> None:
    mnemonic = "abandon abandon atom trust ankle walnut oil across awake bunker divorce abstract"
    raw_entr = bytes.fromhex("0000003974d093eda670121023cd0000")
    assert bip39.mnemonic_from_entropy(raw_entr) == mnemonic

    for size in (16, 32):
        entropy = secrets.token_bytes(size)
        mnemonic = bip39.mnemonic_from_entropy(entropy)
        assert len(mnemonic.split()) == size * 3 // 4
        assert bip39.validate_mnemonic(mnemonic)
        assert bip39.entropy_from_mnemonic(mnemonic) == entropy

    err_msg = "invalid entropy size: "
    for size in (0, 15, 17, 20, 24, 31, 33, 64):
        with pytest.raises(InvalidEntropySize, match=err_msg):
            bip39.mnemonic_from_entropy(secrets.token_bytes(size))

    # an int is not a number of zero bytes
    with pytest.raises(KeymakerTypeError, match="not octets: int"):
        bip39.mnemonic_from_entropy(16)  # type: ignore


def test_entropy_from_mnemonic() -> None:
    mnemonic = "abandon abandon atom trust ankle walnut oil across awake bunker divorce abstract"

    err_msg = "invalid number of words: "
    for wrong_mnemonic in (mnemonic + " abandon", "", "abandon " * 15):
        with pytest.raises(UnsupportedMnemonicLength, match=err_msg):
            bip39.entropy_from_mnemonic(wrong_mnemonic)
        assert not bip39.validate_mnemonic(wrong_mnemonic)

    wrong_mnemonic = mnemonic.replace("walnut", "walnuts")
    with pytest.raises(UnknownWord, match="unknown word: 'walnuts'"):
        bip39.entropy_from_mnemonic(wrong_mnemonic)
    assert not bip39.validate_mnemonic(wrong_mnemonic)

    wrong_mnemonic = "abandon abandon atom trust ankle walnut oil across awake bunker divorce oil"
    with pytest.raises(ChecksumMismatch, match="invalid checksum: "):
        bip39.entropy_from_mnemonic(wrong_mnemonic)
    assert not bip39.validate_mnemonic(wrong_mnemonic)

    # zero entropy has checksum 0011: 'about', not 'abandon'
    assert not bip39.validate_mnemonic("abandon " * 12)
    assert not bip39.validate_mnemonic("abandon " * 24)


# checksum collision rate per mutation: 1/16 for 12 words, 1/256 for 24 words;
# allowed collisions keep the spurious failure rate below 1e-4
@pytest.mark.parametrize("size, tolerance", [(16, 5), (32, 3)])
def test_single_word_mutation(size: int, tolerance: int) -> None:
    wordlist = WORDLISTS.wordlist()
    entropy = secrets.token_bytes(size)
    words = bip39.mnemonic_from_entropy(entropy).split()

    failures = 0
    for i, word in enumerate(words):
        new_word = wordlist[(wordlist.index(word) + 1 + i) % len(wordlist)]
        mutated = words[:i] + [new_word] + words[i + 1 :]
        if not bip39.validate_mnemonic(mutated):
            failures += 1
    assert len(words) == size * 3 // 4
    assert failures >= len(words) - tolerance


def test_normalization() -> None:
    mnemonic = VECTORS[1][1]
    # U+00E9 and "e" + U+0301 are the same passphrase once NFKD normalized
    seed1 = bip39.seed_from_mnemonic(mnemonic, "caf\u00e9", iterations=10)
    seed2 = bip39.seed_from_mnemonic(mnemonic, "cafe\u0301", iterations=10)
    assert seed1 == seed2
