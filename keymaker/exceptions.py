#!/usr/bin/env python3

# Copyright (C) The keymaker developers
#
# This file is part of keymaker. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of keymaker including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

These are meant to discriminate between Exceptions being raised
by keymaker from those raised by other codebase.

Users are usually better off just dealing with the regular
ValueError, TypeError, and RuntimeError
from which the keymaker versions are derived.

Errors caused by externally provided data (mnemonic text, serialized keys
and signatures, scalar operands) are all KeymakerValueError subclasses;
KeymakerRuntimeError is reserved for failures that user input cannot trigger.
"""


class KeymakerValueError(ValueError):
    pass


class KeymakerTypeError(TypeError):
    pass


class KeymakerRuntimeError(RuntimeError):
    pass


class InvalidEntropySize(KeymakerValueError):
    pass


class UnknownWord(KeymakerValueError):
    pass


class UnsupportedMnemonicLength(KeymakerValueError):
    pass


class ChecksumMismatch(KeymakerValueError):
    pass


class MissingResource(KeymakerValueError):
    "A required file (e.g. the word list) is not available."

    def __init__(self, path: str) -> None:
        super().__init__(f"missing file or directory: {path}")
        self.path = path


class InvalidScalar(KeymakerValueError):
    pass


class InvalidSignature(KeymakerValueError):
    pass


class InvalidPrivate(KeymakerValueError):
    pass


class InvalidChecksum(KeymakerValueError):
    pass


class LengthMismatch(KeymakerValueError):
    pass


class ParseError(KeymakerValueError):
    pass
