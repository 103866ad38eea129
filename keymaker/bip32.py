#!/usr/bin/env python3

# Copyright (C) The keymaker developers
#
# This file is part of keymaker. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of keymaker including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Master extended key derivation from a seed.

The seed is split by HMAC-SHA512(key, seed): the left 32 bytes are the
master private key, the right 32 bytes its chain code.
BIP32 uses b"Bitcoin seed" as key; here the default key is "default_seed".

https://github.com/bitcoin/bips/blob/master/bip-0032.mediawiki

Child key derivation is not provided.
"""

import hmac
from dataclasses import dataclass, field
from typing import Optional, Union

from keymaker.alias import Octets
from keymaker.exceptions import KeymakerValueError
from keymaker.keys import KeyPair, PrivateKey, PublicKey
from keymaker.scalar import SCALAR_SIZE, assert_valid_scalar
from keymaker.seed import Seed
from keymaker.utils import bytes_from_octets

DEFAULT_KEY = "default_seed"


@dataclass(frozen=True)
class MasterKeys:
    "Master private key, its public key, and the chain code."

    private: PrivateKey
    public: PublicKey
    chain_code: bytes = field(repr=False)

    def key_pair(self) -> KeyPair:
        return KeyPair(self.private, self.public)


def master_keys_from_seed(
    seed: Union[Seed, Octets],
    key: Optional[str] = None,
    network: str = "mainnet",
    compressed: bool = False,
) -> MasterKeys:
    """Return the master keys for the provided seed.

    The seed must be 128 to 512 bits;
    key defaults to "default_seed".
    An out of range private key (0 or not less than the curve order)
    raises InvalidScalar: such seeds must be discarded.
    """

    seed = seed.data if isinstance(seed, Seed) else bytes_from_octets(seed)
    bitlength = len(seed) * 8
    if bitlength < 128:
        raise KeymakerValueError(f"too few bits for seed: {bitlength}")
    if bitlength > 512:
        raise KeymakerValueError(f"too many bits for seed: {bitlength}")

    key = DEFAULT_KEY if key is None else key
    hmac_ = hmac.new(key.encode(), seed, "sha512").digest()
    secret = assert_valid_scalar(hmac_[:SCALAR_SIZE])

    private = PrivateKey(network, secret, compressed)
    public = PublicKey.from_secret(secret, compressed)
    return MasterKeys(private, public, hmac_[SCALAR_SIZE:])
