#!/usr/bin/env python3

# Copyright (C) The keymaker developers
#
# This file is part of keymaker. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of keymaker including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Seed building: fresh entropy, mnemonic sentence, stretched seed.

A SeedBuilder is an immutable configuration;
each with_* method returns an updated copy:

>>> from keymaker.seed import MnemonicSize, SeedBuilder
>>> seed = SeedBuilder().with_size(MnemonicSize.SIZE_24_WORDS).build()
>>> len(seed.mnemonic)
24
>>> len(str(seed))
128
"""

import logging
import secrets
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional, Tuple

from keymaker.exceptions import (
    InvalidEntropySize,
    KeymakerTypeError,
    KeymakerValueError,
    LengthMismatch,
)
from keymaker.mnemonic.bip39 import (
    PBKDF2_ITERATIONS,
    SEED_SIZE,
    mnemonic_from_entropy,
    seed_from_mnemonic,
    validate_mnemonic,
)
from keymaker.mnemonic.entropy import (
    ENTROPY_BITS,
    RandBytes,
    bytes_entropy_from_random,
)
from keymaker.mnemonic.wordlist import WORDLISTS
from keymaker.utils import bytes_from_octets

logger = logging.getLogger(__name__)


class MnemonicSize(Enum):
    "Convenient aliases for the entropy bit size."

    SIZE_128_BITS = "128-bit"
    SIZE_256_BITS = "256-bit"
    SIZE_16_BYTES = "16-byte"
    SIZE_32_BYTES = "32-byte"
    SIZE_12_WORDS = "12-word"
    SIZE_24_WORDS = "24-word"

    @property
    def bits(self) -> int:
        if self in (
            MnemonicSize.SIZE_256_BITS,
            MnemonicSize.SIZE_32_BYTES,
            MnemonicSize.SIZE_24_WORDS,
        ):
            return 256
        return 128


@dataclass(frozen=True)
class Seed:
    """Mnemonic words and the 64 bytes seed derived from them.

    Use SeedBuilder to create.
    """

    mnemonic: Tuple[str, ...]
    data: bytes = field(repr=False)
    hex: str = field(init=False, repr=False)
    wordlist_path: Optional[str] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        data = bytes_from_octets(self.data)
        if len(data) != SEED_SIZE:
            err_msg = f"invalid seed size: {len(data)} bytes instead of {SEED_SIZE}"
            raise LengthMismatch(err_msg)
        object.__setattr__(self, "data", data)
        object.__setattr__(self, "mnemonic", tuple(self.mnemonic))
        object.__setattr__(self, "hex", self.data.hex())

    def __str__(self) -> str:
        return self.hex

    @property
    def sentence(self) -> str:
        return " ".join(self.mnemonic)

    def validate(self) -> bool:
        "Return True if the retained mnemonic has a valid checksum."
        wordlist = WORDLISTS.wordlist(self.wordlist_path)
        return validate_mnemonic(self.mnemonic, wordlist)


@dataclass(frozen=True)
class SeedBuilder:
    """Build a mnemonic Seed with a few options.

    - bits: entropy bits, 128 (12 words, default) or 256 (24 words)
    - passphrase: the default salt is "mnemonic" + passphrase
    - salt: explicit salt, overriding the passphrase-derived one
    - iterations: PBKDF2-HMAC-SHA512 iterations
    - wordlist_path: word-list file, the BIP39 English one by default

    with_passphrase resets any explicit salt and with_salt overrides
    the passphrase-derived one: the last call wins.
    """

    bits: int = 128
    passphrase: str = ""
    salt: Optional[bytes] = None
    iterations: int = PBKDF2_ITERATIONS
    wordlist_path: Optional[str] = None

    def __post_init__(self) -> None:
        if self.bits not in ENTROPY_BITS:
            err_msg = f"invalid number of bits: {self.bits}; must be 128 or 256"
            raise InvalidEntropySize(err_msg)
        if self.iterations < 1:
            raise KeymakerValueError(f"invalid PBKDF2 iterations: {self.iterations}")
        if self.salt is not None and not isinstance(self.salt, bytes):
            raise KeymakerTypeError(f"salt must be bytes: {type(self.salt).__name__}")

    def with_size(self, size: MnemonicSize) -> "SeedBuilder":
        return replace(self, bits=size.bits)

    def with_bits(self, bits: int) -> "SeedBuilder":
        return replace(self, bits=bits)

    def with_salt(self, salt: bytes) -> "SeedBuilder":
        if not isinstance(salt, (bytes, bytearray, memoryview)):
            raise KeymakerTypeError(f"salt must be bytes: {type(salt).__name__}")
        return replace(self, salt=bytes(salt))

    def with_passphrase(self, passphrase: str) -> "SeedBuilder":
        return replace(self, passphrase=passphrase, salt=None)

    def with_iterations(self, iterations: int) -> "SeedBuilder":
        return replace(self, iterations=iterations)

    def with_wordlist_path(self, wordlist_path: str) -> "SeedBuilder":
        return replace(self, wordlist_path=wordlist_path)

    def build(self, randbytes: RandBytes = secrets.token_bytes) -> Seed:
        """Return a Seed from fresh entropy.

        randbytes(n) must return n cryptographically secure random bytes.
        """

        wordlist = WORDLISTS.wordlist(self.wordlist_path)
        entropy = bytes_entropy_from_random(self.bits, randbytes)
        mnemonic = mnemonic_from_entropy(entropy, wordlist)

        logger.debug(
            "building %d-bit seed with %d PBKDF2 iterations",
            self.bits,
            self.iterations,
        )
        data = seed_from_mnemonic(
            mnemonic,
            self.passphrase,
            self.salt,
            self.iterations,
            verify_checksum=False,
            wordlist=wordlist,
        )
        return Seed(tuple(mnemonic.split()), data, self.wordlist_path)
