# -*- coding: utf-8 -*-
"""
NMEA (National Marine Electronics Association) 0183 parser
Decodes framed sentences into typed sentence records using a SentenceRegistry.

Usage:
    nmea = Nmea()
    gga = nmea.parse('$GPGGA,123519,4807.038,N,01131.000,W,1,2,3,4,M,5,M,,*41')
    gga.latitude            # 48.117299999999986

    bod = nmea.parseTo(BOD(), '$GPBOD,099.3,T,105.6,M,POINTB,*48')
"""

from collections import Counter
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional

from navsdk.logging import getLogger
from .decoder import parseTo
from .envelope import checksum
from .errors import ChecksumMismatchError, NmeaError, NotRegisteredError
from .registry import SentenceRegistry


@dataclass
class ParseResult:
    """Outcome of decoding one sentence in a batch."""
    sentence: str
    record: Any = None
    error: Optional[NmeaError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class Nmea:
    """NMEA Parsing class"""

    def __init__(self, registry: Optional[SentenceRegistry] = None, config: Optional[dict] = None):
        """Initializes Nmea with a registry, built from config when not given."""
        self.log = getLogger()
        if registry is None:
            registry = SentenceRegistry.fromConfig(config) if config else SentenceRegistry()
        self.registry = registry

        # Outcome counters for parseAll: parsed, checksumMismatch, notRegistered, rejected
        self.stats = Counter()
        self.log.info("[Nmea] Parser ready", sentenceTypes=len(self.registry))

    def checksum(self, message: str) -> int:
        """Returns checksum (int) for checksum portion of nmea message (between $ and *)"""
        return checksum(message)

    def parse(self, sentence: str) -> Any:
        """Parse a sentence into a new record of its registered type."""
        return self.registry.parse(sentence)

    def parseTo(self, record: Any, sentence: str) -> Any:
        """Parse a sentence into the given record, in place."""
        return parseTo(record, sentence)

    def parseAll(self, sentences: Iterable[str]) -> List[ParseResult]:
        """Takes framed sentences, returns one ParseResult per sentence.
        Rejected sentences are reported in the result, never raised."""
        results = []
        for sentence in sentences:
            try:
                results.append(ParseResult(sentence, self.registry.parse(sentence)))
                self.stats['parsed'] += 1
            except ChecksumMismatchError as err:
                results.append(ParseResult(sentence, err.record, err))
                self.stats['checksumMismatch'] += 1
                self.log.debug("[Nmea] Checksum mismatch", sentence=sentence,
                               declared=err.declared, computed=err.computed)
            except NotRegisteredError as err:
                results.append(ParseResult(sentence, None, err))
                self.stats['notRegistered'] += 1
                self.log.debug("[Nmea] Unregistered sentence type", sentence=sentence)
            except NmeaError as err:
                results.append(ParseResult(sentence, None, err))
                self.stats['rejected'] += 1
                self.log.debug("[Nmea] Rejected sentence", sentence=sentence,
                               errorClass=type(err).__name__, errorMsg=str(err))
        return results
