#!/usr/bin/env python3

# Copyright (C) The keymaker developers
#
# This file is part of keymaker. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of keymaker including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Hash based helper functions."""

import hashlib

from keymaker.alias import Octets
from keymaker.utils import bytes_from_octets

CHECKSUM_SIZE = 4


def sha256(octets: Octets) -> bytes:
    """Return the SHA256(*) of the input octet sequence."""
    octets = bytes_from_octets(octets)
    return hashlib.sha256(octets).digest()


def hash256(octets: Octets) -> bytes:
    """Return the SHA256(SHA256(*)) of the input octet sequence."""
    return sha256(sha256(octets))


dhash256 = hash256


def checksum(octets: Octets) -> bytes:
    """Return the 4-byte checksum of the input octet sequence.

    It is the leftmost four bytes of hash256,
    as appended to private key layouts before base58 encoding.
    """
    return hash256(octets)[:CHECKSUM_SIZE]
