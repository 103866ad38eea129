#!/usr/bin/env python3

# Copyright (C) The keymaker developers
#
# This file is part of keymaker. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of keymaker including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Helper functions to use the libsecp256k1 python bindings.

All curve operations (generator multiplication, point serialization,
RFC 6979 deterministic ECDSA signing, public key recovery, verification)
are delegated to libsecp256k1 through coincurve.

A single libsecp256k1 context is created by the binding at import time
and is shared read-only by every call: it is never mutated afterwards,
hence no locking is needed.
"""

from typing import Tuple

from coincurve import PrivateKey as _PrivateKey
from coincurve import PublicKey as _PublicKey
from coincurve.context import GLOBAL_CONTEXT

from keymaker.alias import Octets
from keymaker.exceptions import InvalidSignature, KeymakerRuntimeError, KeymakerValueError
from keymaker.scalar import assert_valid_scalar
from keymaker.utils import bytes_from_octets

ctx = GLOBAL_CONTEXT


def _prv_key(secret: Octets) -> _PrivateKey:
    secret = assert_valid_scalar(secret)
    try:
        return _PrivateKey(secret, ctx)
    except ValueError as e:  # pragma: no cover
        raise KeymakerRuntimeError("secp256k1_ec_seckey_verify failure") from e


def _pub_key(pub_key: Octets) -> _PublicKey:
    pub_key = bytes_from_octets(pub_key, (33, 65))
    try:
        return _PublicKey(pub_key, ctx)
    except ValueError as e:
        err_msg = f"not a point on the curve: {pub_key.hex()}"
        raise KeymakerValueError(err_msg) from e


def pub_key_from_secret(secret: Octets, compressed: bool = True) -> bytes:
    """Derive the SEC serialized public key from a private key."""
    return _prv_key(secret).public_key.format(compressed=compressed)


def ecdsa_sign(msg_hash: Octets, secret: Octets) -> bytes:
    """Create a low-s DER ECDSA signature with RFC 6979 nonce."""

    msg_hash = bytes_from_octets(msg_hash, 32)
    # hasher=None: msg_hash is already a 32 bytes digest
    return _prv_key(secret).sign(msg_hash, hasher=None)


def ecdsa_sign_recoverable(msg_hash: Octets, secret: Octets) -> Tuple[int, bytes]:
    """Create a recoverable ECDSA signature.

    Return the recovery id and the 64 bytes r||s serialization.
    """

    msg_hash = bytes_from_octets(msg_hash, 32)
    sig = _prv_key(secret).sign_recoverable(msg_hash, hasher=None)
    return sig[64], sig[:64]


def ecdsa_recover(
    msg_hash: Octets, rs: Octets, recid: int, compressed: bool = True
) -> bytes:
    """Recover the SEC serialized public key from a r||s signature."""

    msg_hash = bytes_from_octets(msg_hash, 32)
    rs = bytes_from_octets(rs, 64)
    if recid not in range(4):
        raise InvalidSignature(f"invalid recovery id: {recid}")
    try:
        pub_key = _PublicKey.from_signature_and_message(
            rs + bytes([recid]), msg_hash, hasher=None, context=ctx
        )
    except ValueError as e:
        raise InvalidSignature("public key recovery failed") from e
    return pub_key.format(compressed=compressed)


def ecdsa_verify(msg_hash: Octets, pub_key: Octets, sig: Octets) -> bool:
    """Verify a DER ECDSA signature (high-s signatures do not verify)."""

    msg_hash = bytes_from_octets(msg_hash, 32)
    sig = bytes_from_octets(sig)
    key = _pub_key(pub_key)
    try:
        return key.verify(sig, msg_hash, hasher=None)
    except ValueError as e:
        raise InvalidSignature("secp256k1_ecdsa_signature_parse_der failed") from e
