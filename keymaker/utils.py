#!/usr/bin/env python3

# Copyright (C) The keymaker developers
#
# This file is part of keymaker. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of keymaker including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Assorted conversion utilities."

from __future__ import annotations

from collections.abc import Iterable as IterableCollection
from typing import Iterable, Optional, Union

from keymaker.alias import Octets
from keymaker.exceptions import KeymakerTypeError, LengthMismatch, ParseError

NoneOneOrMoreInt = Optional[Union[int, Iterable[int]]]


def bytes_from_octets(octets: Octets, out_size: NoneOneOrMoreInt = None) -> bytes:
    """Return bytes from a hex-string, stripping leading/trailing spaces.

    Bytes-like input is only converted to bytes,
    any other type raises KeymakerTypeError.
    Optionally, it also ensures required output size.
    """

    if isinstance(octets, str):  # hex string
        try:
            octets = bytes.fromhex(octets)
        except ValueError as e:
            raise ParseError(f"not a hex-string: {octets!r}") from e
    elif isinstance(octets, (bytes, bytearray, memoryview)):
        octets = bytes(octets)
    else:
        raise KeymakerTypeError(f"not octets: {type(octets).__name__}")

    if (
        out_size is None
        or isinstance(out_size, int)
        and len(octets) == out_size
        or isinstance(out_size, IterableCollection)
        and len(octets) in out_size
    ):
        return octets

    err_msg = f"invalid size: {len(octets)} bytes instead of {out_size}"
    raise LengthMismatch(err_msg)


def hex_string(i: int) -> str:
    """Return a hex-string from a non-negative integer.

    The resulting hex-string has an even number of hex-digits and
    includes a space every four bytes (i.e. every eight hex-digits).
    It is only meant for error messages.
    """

    a_str = hex(i)[2:]
    if len(a_str) % 2 != 0:
        a_str = "0" + a_str

    indx = list(reversed(range(len(a_str), 0, -8)))
    lresult = [a_str[max(0, j - 8) : j] for j in indx]
    return " ".join(lresult).upper()
