#!/usr/bin/env python3

# Copyright (C) The keymaker developers
#
# This file is part of keymaker. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of keymaker including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Word-lists to be used in entropy/mnemonic conversions.

The default word-list is the BIP39 English one,
https://github.com/bitcoin/bips/blob/master/bip-0039/english.txt,
as shipped by the mnemonic distribution.

Word-lists are loaded only if needed and read only once from disk;
once loaded they are immutable and can be shared by any caller.
"""

import logging
from os import path
from typing import Dict, Iterator, Optional, Sequence

import mnemonic

from keymaker.exceptions import MissingResource, ParseError, UnknownWord

logger = logging.getLogger(__name__)

WORDLIST_SIZE = 2048
BITS_PER_WORD = 11

DEFAULT_WORDLIST_PATH = path.join(
    path.dirname(mnemonic.__file__), "wordlist", "english.txt"
)


class WordList:
    """Immutable ordered table of 2048 words, indexed 0..2047."""

    def __init__(self, words: Sequence[str], filename: Optional[str] = None) -> None:
        self._words = tuple(words)
        self.filename = filename

        nwords = len(self._words)
        if nwords != WORDLIST_SIZE:
            err_msg = f"invalid wordlist length: {nwords} instead of {WORDLIST_SIZE}"
            raise ParseError(err_msg)

        self._indexes = {word: i for i, word in enumerate(self._words)}
        if len(self._indexes) != WORDLIST_SIZE:
            raise ParseError("invalid wordlist: duplicated words")

    @classmethod
    def from_file(cls, filename: str) -> "WordList":
        "Load a word-list file: one word per line, index = line number."

        if not path.isfile(filename):
            raise MissingResource(filename)
        with open(filename, "r", encoding="utf-8") as file_:
            words = [line.strip() for line in file_]
        for i, word in enumerate(words):
            if not word:
                raise ParseError(f"invalid wordlist: blank line {i + 1}")
        logger.debug("loaded %d words from %s", len(words), filename)
        return cls(words, filename)

    def __len__(self) -> int:
        return len(self._words)

    def __getitem__(self, index: int) -> str:
        return self._words[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __contains__(self, word: object) -> bool:
        return word in self._indexes

    def index(self, word: str) -> int:
        "Return the index of a word, raising UnknownWord if missing."

        try:
            return self._indexes[word]
        except KeyError:
            raise UnknownWord(f"unknown word: {word!r}") from None


class WordLists:
    """Cache of the word-lists loaded so far, keyed by filename."""

    def __init__(self) -> None:
        self._wordlists: Dict[str, WordList] = {}

    def wordlist(self, filename: Optional[str] = None) -> WordList:
        "Return the word-list, loading it at the first request."

        filename = filename or DEFAULT_WORDLIST_PATH
        if filename not in self._wordlists:
            # a race may load the same file twice: both loads are equal
            self._wordlists[filename] = WordList.from_file(filename)
        return self._wordlists[filename]


# singleton
WORDLISTS = WordLists()
