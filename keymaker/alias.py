#!/usr/bin/env python3

# Copyright (C) The keymaker developers
#
# This file is part of keymaker. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of keymaker including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Aliases

mypy aliases, documenting also coding input conventions.
"""

from typing import Sequence, Union

# Octets are a sequence of eight-bit bytes or a hex-string (not text string)
#
# hex-strings are strings that can be converted to bytes using bytes.fromhex,
# e.g.:
# "deadbeef"
# "dead beef"
# "02cc71eb30d653c0c3163990c47b976f3fb3f37cccdcbedb169a1dfef58bbfbfaf"
#
# use keymaker.utils.bytes_from_octets to convert Octets to bytes
#
# Octets are used for entropy, seeds, 32-byte secrets and message hashes,
# SEC public keys, DER and compact signatures.
Octets = Union[bytes, str]

# bytes or text string (not hex-string)
#
# this is for 'ascii' strings like base58 private keys:
# "5HueCGU8rMjxEXxiPuD5BDku4MkFqeZyd4dZ1jvhTVqvbTLvyTJ"
#
# leading/trailing blanks should always be stripped
String = Union[bytes, str]

# a mnemonic sentence "abandon abandon ... about"
# or the sequence of its words
Mnemonic = Union[str, Sequence[str]]
