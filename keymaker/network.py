#!/usr/bin/env python3

# Copyright (C) The keymaker developers
#
# This file is part of keymaker. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of keymaker including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Network constants and associated functions."""

from dataclasses import dataclass
from typing import Dict

from keymaker.exceptions import InvalidPrivate, KeymakerValueError


@dataclass(frozen=True)
class Network:
    name: str
    # private key layout prefix;
    # base58 starts with '5' or with 'K'/'L' if compressed on mainnet
    wif: int


NETWORKS: Dict[str, Network] = {
    "mainnet": Network("mainnet", 128),
    "testnet": Network("testnet", 239),
}


def network_from_name(network: str) -> Network:
    "Return the Network for a name ('mainnet' or 'testnet')."

    try:
        return NETWORKS[network]
    except KeyError as e:
        err_msg = f"unknown network: {network!r}"
        raise KeymakerValueError(err_msg) from e


def network_from_wif(wif: int) -> str:
    "Return the network name for a private key layout prefix."

    for net in NETWORKS.values():
        if net.wif == wif:
            return net.name
    raise InvalidPrivate(f"invalid network byte: {wif}")
