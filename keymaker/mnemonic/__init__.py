#!/usr/bin/env python3

# Copyright (C) The keymaker developers
#
# This file is part of keymaker. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of keymaker including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Module keymaker.mnemonic."""

from keymaker.mnemonic.bip39 import (
    PBKDF2_ITERATIONS,
    entropy_from_mnemonic,
    mnemonic_from_entropy,
    seed_from_mnemonic,
    validate_mnemonic,
)
from keymaker.mnemonic.wordlist import WORDLISTS, WordList

__all__ = [
    "PBKDF2_ITERATIONS",
    "entropy_from_mnemonic",
    "mnemonic_from_entropy",
    "seed_from_mnemonic",
    "validate_mnemonic",
    "WORDLISTS",
    "WordList",
]
