"""
Sentence Registry

Maps literal sentence type keys (token 0, e.g. 'GPGGA') to record classes
for dynamic decoding.

Architecture:
- Registry is an explicit object, built-in sentences loaded by the constructor
- Lookup is by exact type key; the record's own type matcher still validates
  the same token while decoding
- One lock guards the table, readers never see a partially updated entry
"""

import threading
from typing import Any, Dict, Iterable, List, Optional

from navsdk.logging import getLogger
from .decoder import decodeEnvelope
from .envelope import readEnvelope
from .errors import NmeaError, NotRegisteredError, RegistrationError
from .schema import isRecordType, schemaFor
from .sentences import DEFAULT_TALKERS, TALKER_SENTENCES, builtinSentences


class SentenceRegistry:
    """Type key -> sentence record class table with dynamic parsing."""

    def __init__(self, builtins: bool = True, talkers: Iterable[str] = DEFAULT_TALKERS):
        self.log = getLogger()
        self._lock = threading.Lock()

        # typeKey → record class
        self._records: Dict[str, type] = {}

        if builtins:
            for typeKey, recordType in builtinSentences(talkers).items():
                self.register(typeKey, recordType)
            self.log.debug("[SentenceRegistry] Loaded builtins", count=len(self._records))

    @classmethod
    def fromConfig(cls, config: Dict[str, Any]) -> 'SentenceRegistry':
        """
        Build a registry from the 'registry' section of a parser config.

        talkers: talker prefixes for the built-in talker sentences
        aliases: extra type key → built-in sentence code or proprietary key
        exclude: type keys removed after everything else is registered
        """
        section = config.get('registry', {})
        registry = cls(talkers=section.get('talkers', DEFAULT_TALKERS))

        for typeKey, code in section.get('aliases', {}).items():
            recordType = TALKER_SENTENCES.get(code) or registry.lookup(code)
            if recordType is None:
                raise RegistrationError(f"nmea: alias {typeKey!r} names unknown sentence {code!r}")
            registry.register(typeKey, recordType)

        for typeKey in section.get('exclude', []):
            registry.unregister(typeKey)
        return registry

    def register(self, typeKey: str, recordType: Optional[type]):
        """
        Register recordType for typeKey, replacing any existing entry.
        recordType None removes the entry.
        """
        if recordType is None:
            self.unregister(typeKey)
            return
        if not isRecordType(recordType):
            raise RegistrationError(f"nmea: {recordType!r} is not a sentence record class")
        try:
            schema = schemaFor(recordType)
        except NmeaError as err:
            raise RegistrationError(f"nmea: {recordType.__name__} has a malformed schema") from err
        if schema.typeField is None or schema.typeField.position != 0:
            raise RegistrationError(f"nmea: {recordType.__name__} needs a type field at position 0")

        with self._lock:
            self._records[typeKey] = recordType
        self.log.debug("[SentenceRegistry] Registered", typeKey=typeKey, record=recordType.__name__)

    def registerTalkers(self, code: str, recordType: type, talkers: Iterable[str] = DEFAULT_TALKERS):
        """Register recordType under '<talker><code>' for each talker."""
        for talker in talkers:
            self.register(f'{talker}{code}', recordType)

    def unregister(self, typeKey: str):
        with self._lock:
            removed = self._records.pop(typeKey, None)
        if removed is not None:
            self.log.debug("[SentenceRegistry] Unregistered", typeKey=typeKey)

    def lookup(self, typeKey: str) -> Optional[type]:
        """Get the record class registered for typeKey."""
        with self._lock:
            return self._records.get(typeKey)

    def keys(self) -> List[str]:
        with self._lock:
            return sorted(self._records)

    def __contains__(self, typeKey: str) -> bool:
        return self.lookup(typeKey) is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def parse(self, sentence: str) -> Any:
        """
        Parse a raw sentence into a new record of the class registered for
        its type and return it. Raises NotRegisteredError for unknown types;
        a ChecksumMismatchError carries the decoded record.
        """
        envelope = readEnvelope(sentence)
        recordType = self.lookup(envelope.sentenceType)
        if recordType is None:
            raise NotRegisteredError(f"nmea: sentence type {envelope.sentenceType!r} not registered")
        return decodeEnvelope(recordType(), envelope)
