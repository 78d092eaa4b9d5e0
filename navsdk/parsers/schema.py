# -*- coding: utf-8 -*-
"""
Record schemas for NMEA sentences.

A sentence record is a dataclass whose fields carry their decoding
descriptor in the field metadata. Field order is token order:

    @sentence
    class HDT:
        type: str = typeField('/^[A-Z]{2}HDT$/')
        heading: float = numberField()
        headingRef: None = padField()       # the 'T' token
        checksum: int = checksumField()

The descriptor table (RecordSchema) is derived once per class and cached,
so decoding never inspects the class again.
"""

import dataclasses, functools, re
from dataclasses import dataclass
from typing import Any, Optional, Pattern, Tuple

from .converters import KINDS, INTEGER_KINDS, FLOAT_KINDS, zeroValue
from .errors import BadTypeMatcherSyntaxError, FieldTypeMismatchError

METADATA_KEY = 'nmea'

TAGS = ('type', 'number', 'string', 'latlon', 'date', 'time', 'checksum')

# Kinds each tag can be stored as
_allowedKinds = {
    'type': {'CH'},
    'number': set(INTEGER_KINDS) | FLOAT_KINDS,
    'string': {'CH', 'BY'},
    'latlon': FLOAT_KINDS,
    'date': {'DT'},
    'time': {'DT'},
    'checksum': set(INTEGER_KINDS),
}


############################## Type matchers ##############################

@dataclass(frozen=True)
class LiteralMatcher:
    """Sentence type must equal text exactly."""
    text: str

    def matches(self, token: str) -> bool:
        return token == self.text


@dataclass(frozen=True)
class PatternMatcher:
    """Sentence type must contain a match of the expression (re.search)."""
    expression: Pattern

    def matches(self, token: str) -> bool:
        return self.expression.search(token) is not None


def compileMatcher(match: str):
    """Build the matcher for a type field; '/.../' denotes a regular expression."""
    if not match.startswith('/'):
        return LiteralMatcher(match)
    if len(match) < 2 or not match.endswith('/'):
        raise BadTypeMatcherSyntaxError(f"nmea: bad syntax for type match {match!r}")
    try:
        return PatternMatcher(re.compile(match[1:-1]))
    except re.error as err:
        raise BadTypeMatcherSyntaxError(f"nmea: bad syntax for type match {match!r}") from err


############################## Descriptors ##############################

@dataclass(frozen=True)
class FieldSpec:
    """Decoding descriptor of one record field. tag None marks a padding placeholder."""
    name: str
    position: int
    tag: Optional[str] = None
    kind: Optional[str] = None
    matcher: Any = None


@dataclass(frozen=True)
class RecordSchema:
    """Ordered descriptor table of a sentence record class."""
    recordType: type
    fields: Tuple[FieldSpec, ...]

    @property
    def typeField(self) -> Optional[FieldSpec]:
        return next((spec for spec in self.fields if spec.tag == 'type'), None)

    @property
    def taggedFields(self) -> Tuple[FieldSpec, ...]:
        return tuple(spec for spec in self.fields if spec.tag is not None)

    def __len__(self):
        return len(self.fields)


def _descriptor(tag: str, kind: str, match: Optional[str] = None) -> dict:
    return {METADATA_KEY: {'tag': tag, 'kind': kind, 'match': match}}


def typeField(match: str) -> Any:
    """Sentence type field; match is a literal type or a '/regexp/'."""
    return dataclasses.field(default='', metadata=_descriptor('type', 'CH', match))


def numberField(kind: str = 'R8') -> Any:
    return dataclasses.field(default=zeroValue(kind), metadata=_descriptor('number', kind))


def stringField(kind: str = 'CH') -> Any:
    return dataclasses.field(default=zeroValue(kind), metadata=_descriptor('string', kind))


def latlonField(kind: str = 'R8') -> Any:
    return dataclasses.field(default=zeroValue(kind), metadata=_descriptor('latlon', kind))


def dateField() -> Any:
    return dataclasses.field(default=None, metadata=_descriptor('date', 'DT'))


def timeField() -> Any:
    return dataclasses.field(default=None, metadata=_descriptor('time', 'DT'))


def checksumField(kind: str = 'U1') -> Any:
    return dataclasses.field(default=0, metadata=_descriptor('checksum', kind))


def padField() -> Any:
    """Placeholder occupying a token position that is not decoded (units, references)."""
    return dataclasses.field(default=None, init=False, repr=False, compare=False)


############################## Schema derivation ##############################

def isRecordType(obj: Any) -> bool:
    """True for dataclass types; instances and other objects are rejected."""
    return isinstance(obj, type) and dataclasses.is_dataclass(obj)


@functools.lru_cache(maxsize=None)
def schemaFor(recordType: type) -> RecordSchema:
    """
    Derive the descriptor table of a record class (cached per class).

    Raises BadTypeMatcherSyntaxError for a malformed '/regexp/' and
    FieldTypeMismatchError for a tag declared with a kind it cannot store.
    Placement of the type field is checked while decoding.
    """
    specs = []
    for position, field in enumerate(dataclasses.fields(recordType)):
        descriptor = field.metadata.get(METADATA_KEY)
        if descriptor is None:
            specs.append(FieldSpec(field.name, position))
            continue

        tag, kind = descriptor['tag'], descriptor['kind']
        if tag not in TAGS or kind not in KINDS:
            raise FieldTypeMismatchError(f"nmea: unknown descriptor {tag!r}/{kind!r}", field.name, position)
        if kind not in _allowedKinds[tag]:
            raise FieldTypeMismatchError(f"nmea: {tag} cannot be stored as {kind}", field.name, position)

        matcher = compileMatcher(descriptor['match']) if tag == 'type' else None
        specs.append(FieldSpec(field.name, position, tag, kind, matcher))

    return RecordSchema(recordType, tuple(specs))


def sentence(cls=None, **kwargs):
    """
    Class decorator turning a class into a sentence record: applies
    dataclass (keyword arguments pass through) and builds its schema so
    that schema errors surface at import time.
    """
    def wrap(cls):
        cls = dataclass(cls, **kwargs)
        schemaFor(cls)
        return cls

    return wrap if cls is None else wrap(cls)
