# -*- coding: utf-8 -*-
"""
Sentence envelope: sigil, comma separated tokens and optional checksum.

    <sigil><token0>,<token1>,...,<tokenN>[*<HH>]

The checksum is the XOR of every byte strictly between the sigil and '*'.
"""

import operator, re
from dataclasses import dataclass
from functools import reduce
from typing import Optional, Tuple

from .errors import ChecksumSyntaxError, NoSigilError, TooShortError

SIGILS = ('$', '!')
MIN_LENGTH = 6  # [$!] + five character sentence type
MAX_CHECKSUM = 0x7F  # signed 8-bit; XOR of ASCII text never exceeds it

_checksumText = re.compile(r'[0-9A-Fa-f]{1,2}')


def checksum(text: str) -> int:
    """Returns checksum (int) of the text between sigil and '*'"""
    return reduce(operator.xor, text.encode('utf-8'), 0)


@dataclass(frozen=True)
class Envelope:
    """Tokenized sentence and its checksum outcome."""
    sigil: str
    tokens: Tuple[str, ...]
    declared: Optional[int] = None  # None when the sentence has no '*'
    computed: Optional[int] = None

    @property
    def hasChecksum(self) -> bool:
        return self.declared is not None

    @property
    def checksumValue(self) -> int:
        """Declared checksum, 0 when absent."""
        return self.declared if self.declared is not None else 0

    @property
    def checksumValid(self) -> bool:
        return self.declared == self.computed

    @property
    def sentenceType(self) -> str:
        return self.tokens[0]


def readEnvelope(sentence: str) -> Envelope:
    """
    Validate framing of a raw sentence and split it into tokens.

    Raises TooShortError, NoSigilError or ChecksumSyntaxError. A checksum
    mismatch is not raised here; callers compare declared and computed
    after decoding.
    """
    sentence = sentence.rstrip('\r\n')
    if len(sentence) < MIN_LENGTH:
        raise TooShortError("nmea: sentence is too short")
    if sentence[0] not in SIGILS:
        raise NoSigilError("nmea: no initial sentence sigil")

    sigil, body = sentence[0], sentence[1:]
    declared = computed = None
    starIdx = body.find('*')
    if starIdx != -1:
        sumText = body[starIdx + 1:]
        if not _checksumText.fullmatch(sumText):
            raise ChecksumSyntaxError(f"nmea: invalid checksum {sumText!r}")
        declared = int(sumText, 16)
        if declared > MAX_CHECKSUM:
            raise ChecksumSyntaxError(f"nmea: checksum {sumText!r} out of range")
        body = body[:starIdx]
        computed = checksum(body)

    return Envelope(sigil, tuple(body.split(',')), declared, computed)
