# -*- coding: utf-8 -*-
"""
Field decoder engine: applies a record schema to envelope tokens.

Descriptor i consumes token i. Fields written before a failing field stay
written; a checksum mismatch is raised only after every field was decoded.
"""

import dataclasses
from typing import Any

from .converters import convert, wrapInteger
from .envelope import Envelope, readEnvelope
from .errors import (ChecksumMismatchError, InvalidDestinationError, LateTypeFieldError,
                     MissingTypeFieldError, NmeaError, SentenceTypeMismatchError)
from .schema import RecordSchema, isRecordType, schemaFor


def decodeFields(record: Any, schema: RecordSchema, envelope: Envelope) -> Any:
    """
    Write the envelope tokens into record following schema.

    On a sentence type mismatch the observed token is written to the type
    field before SentenceTypeMismatchError is raised.
    """
    tokens = envelope.tokens
    hasType = False

    for spec in schema.fields:
        i = spec.position
        if spec.tag is None:
            continue

        if spec.tag == 'type':
            if i != 0:
                raise LateTypeFieldError("nmea: late type field", spec.name, i)
            setattr(record, spec.name, tokens[0])
            if not spec.matcher.matches(tokens[0]):
                raise SentenceTypeMismatchError(f"nmea: wrong nmea type {tokens[0]!r} for sentence",
                                                spec.name, i)
            hasType = True
            continue

        if spec.tag == 'checksum':
            setattr(record, spec.name, wrapInteger(envelope.checksumValue, spec.kind))
            continue

        # Trailing fields missing from short sentences keep their zero value
        if i >= len(tokens):
            continue

        try:
            value = convert(spec.tag, tokens[i], spec.kind)
        except NmeaError as err:
            err.field, err.position = spec.name, i
            raise
        setattr(record, spec.name, value)

    if not hasType:
        raise MissingTypeFieldError("nmea: missing type field")
    return record


def decodeEnvelope(record: Any, envelope: Envelope) -> Any:
    """Decode into record, then report a checksum mismatch with the record attached."""
    try:
        decodeFields(record, schemaFor(type(record)), envelope)
    except NmeaError as err:
        if not envelope.checksumValid:
            raise ChecksumMismatchError(envelope.declared, envelope.computed, record) from err
        raise
    if not envelope.checksumValid:
        raise ChecksumMismatchError(envelope.declared, envelope.computed, record)
    return record


def parseTo(record: Any, sentence: str) -> Any:
    """
    Parse a raw NMEA 0183 sentence into the fields of record (in place) and
    return it. record must be an instance of a sentence record class.
    """
    envelope = readEnvelope(sentence)
    if isRecordType(record) or not dataclasses.is_dataclass(record):
        raise InvalidDestinationError(f"nmea: destination {record!r} is not a record instance")
    return decodeEnvelope(record, envelope)
