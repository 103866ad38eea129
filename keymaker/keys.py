#!/usr/bin/env python3

# Copyright (C) The keymaker developers
#
# This file is part of keymaker. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of keymaker including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Private keys, public keys, and key pairs.

The private key layout is

[network byte][32 bytes secret][0x01 if compressed][4 bytes checksum]

where the network byte is 128 (mainnet) or 239 (testnet)
and the checksum is hash256(*)[:4] of all the preceding bytes.
Its base58 encoding is the private key display form
(a.k.a. Wallet Import Format).
"""

import hmac
from dataclasses import dataclass, field
from enum import Enum

from keymaker import libsecp256k1
from keymaker.alias import Octets, String
from keymaker.base58 import b58decode, b58encode
from keymaker.exceptions import InvalidChecksum, InvalidPrivate, KeymakerValueError
from keymaker.hashes import CHECKSUM_SIZE, checksum
from keymaker.network import network_from_name, network_from_wif
from keymaker.scalar import SCALAR_SIZE, assert_valid_scalar
from keymaker.signature import CompactSignature, Signature
from keymaker.utils import bytes_from_octets

_UNCOMPRESSED_LAYOUT_SIZE = 1 + SCALAR_SIZE + CHECKSUM_SIZE
_COMPRESSED_LAYOUT_SIZE = _UNCOMPRESSED_LAYOUT_SIZE + 1


class PubKeyFormat(Enum):
    "SEC public key serialization: size in bytes and allowed prefixes."

    STANDARD = (65, b"\x04")
    COMPRESSED = (33, b"\x02\x03")

    @property
    def size(self) -> int:
        return self.value[0]

    @property
    def prefixes(self) -> bytes:
        return self.value[1]


@dataclass(frozen=True)
class PublicKey:
    "SEC serialized public key, uncompressed (standard) or compressed."

    format: PubKeyFormat
    data: bytes

    def __post_init__(self) -> None:
        size, prefixes = self.format.value
        if len(self.data) != size or self.data[0] not in prefixes:
            err_msg = f"invalid {self.format.name.lower()} public key: "
            err_msg += f"{bytes(self.data).hex()}"
            raise KeymakerValueError(err_msg)

    @classmethod
    def parse(cls, pub_key: Octets) -> "PublicKey":
        "Return a PublicKey from its 65 or 33 bytes SEC serialization."

        pub_key = bytes_from_octets(pub_key, (33, 65))
        if len(pub_key) == PubKeyFormat.STANDARD.size:
            return cls(PubKeyFormat.STANDARD, pub_key)
        return cls(PubKeyFormat.COMPRESSED, pub_key)

    @classmethod
    def from_secret(cls, secret: Octets, compressed: bool) -> "PublicKey":
        data = libsecp256k1.pub_key_from_secret(secret, compressed)
        return cls.parse(data)

    @classmethod
    def recover(cls, msg_hash: Octets, sig: CompactSignature) -> "PublicKey":
        "Recover the signer public key from a compact signature."

        data = libsecp256k1.ecdsa_recover(msg_hash, sig.rs, sig.recid, sig.compressed)
        return cls.parse(data)

    @property
    def compressed(self) -> bool:
        return self.format is PubKeyFormat.COMPRESSED

    def verify(self, msg_hash: Octets, sig: Signature) -> bool:
        return libsecp256k1.ecdsa_verify(msg_hash, self.data, sig.der)

    def __bytes__(self) -> bytes:
        return self.data

    def __len__(self) -> int:
        return len(self.data)

    def __str__(self) -> str:
        return self.data.hex()


@dataclass(frozen=True)
class PrivateKey:
    "Private key secret, together with its network and compression flag."

    network: str
    secret: bytes = field(repr=False)
    compressed: bool = False

    def __post_init__(self) -> None:
        network_from_name(self.network)
        if len(self.secret) != SCALAR_SIZE:
            err_msg = f"invalid secret size: {len(self.secret)} bytes"
            raise InvalidPrivate(err_msg)

    def layout(self) -> bytes:
        "Return the checksummed private key layout."

        payload = bytes([network_from_name(self.network).wif]) + self.secret
        if self.compressed:
            payload += b"\x01"
        return payload + checksum(payload)

    @classmethod
    def from_layout(cls, data: Octets) -> "PrivateKey":
        "Return the PrivateKey of a checksummed private key layout."

        data = bytes_from_octets(data)
        if len(data) == _UNCOMPRESSED_LAYOUT_SIZE:
            compressed = False
        elif len(data) == _COMPRESSED_LAYOUT_SIZE:
            compressed = True
        else:
            raise InvalidPrivate(f"invalid private key layout size: {len(data)}")

        if compressed and data[-5] != 1:
            raise InvalidPrivate(f"invalid compression flag: {data[-5]}")

        payload, cs = data[:-CHECKSUM_SIZE], data[-CHECKSUM_SIZE:]
        if not hmac.compare_digest(cs, checksum(payload)):
            raise InvalidChecksum(f"invalid checksum: 0x{cs.hex()}")

        network = network_from_wif(data[0])
        return cls(network, data[1 : 1 + SCALAR_SIZE], compressed)

    def b58encode(self) -> str:
        return b58encode(self.layout()).decode("ascii")

    @classmethod
    def b58decode(cls, b58: String) -> "PrivateKey":
        return cls.from_layout(b58decode(b58))

    def sign(self, msg_hash: Octets) -> Signature:
        "Return the deterministic (RFC 6979) DER signature of a 32 bytes hash."
        return Signature(libsecp256k1.ecdsa_sign(msg_hash, self.secret))

    def sign_compact(self, msg_hash: Octets) -> CompactSignature:
        "Return the recoverable compact signature of a 32 bytes hash."
        recid, rs = libsecp256k1.ecdsa_sign_recoverable(msg_hash, self.secret)
        return CompactSignature.from_rs(recid, rs, self.compressed)

    def __str__(self) -> str:
        return self.b58encode()


@dataclass(frozen=True)
class KeyPair:
    "A private key and its public key."

    private: PrivateKey
    public: PublicKey

    @classmethod
    def from_private(cls, private: PrivateKey, compressed: bool) -> "KeyPair":
        assert_valid_scalar(private.secret)
        public = PublicKey.from_secret(private.secret, compressed)
        return cls(private, public)

    def sign(self, msg_hash: Octets) -> Signature:
        return self.private.sign(msg_hash)

    def sign_compact(self, msg_hash: Octets) -> CompactSignature:
        return self.private.sign_compact(msg_hash)

    def __str__(self) -> str:
        return f"private: {self.private}\npublic: {self.public}\n"
