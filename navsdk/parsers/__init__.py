# -*- coding: utf-8 -*-
"""
navsdk.parsers - NMEA 0183 and AIS Parsing Module

Public API:
    - Nmea: parser facade (dynamic, typed and batch decoding)
    - SentenceRegistry: type key -> sentence record table
    - parseTo: decode a sentence into a given record
    - sentence, typeField, numberField, ...: record declaration helpers
    - deArmor, extractBits, extractInt, extractText, sixBitToChar: AIS payload codec
    - recordToDict, recordToJson: record serialization
"""

from .ais import deArmor, extractBits, extractInt, extractText, sixBitToChar
from .decoder import parseTo
from .envelope import Envelope, checksum, readEnvelope
from .errors import (BadArmorCharacterError, BadTypeMatcherSyntaxError, BitRangeError,
                     ChecksumMismatchError, ChecksumSyntaxError, ConversionError,
                     FieldTypeMismatchError, InvalidDestinationError, LateTypeFieldError,
                     MissingTypeFieldError, NmeaError, NoSigilError, NotRegisteredError,
                     PreconditionError, RegistrationError, SchemaError, SentenceTypeMismatchError,
                     SixBitOverflowError, TooShortError)
from .export import recordToDict, recordToJson
from .nmea import Nmea, ParseResult
from .registry import SentenceRegistry
from .schema import (FieldSpec, LiteralMatcher, PatternMatcher, RecordSchema, checksumField,
                     dateField, latlonField, numberField, padField, schemaFor, sentence,
                     stringField, timeField, typeField)
from .sentences import builtinSentences

__all__ = [
    'Nmea', 'ParseResult', 'SentenceRegistry', 'parseTo',
    'Envelope', 'checksum', 'readEnvelope',
    'FieldSpec', 'LiteralMatcher', 'PatternMatcher', 'RecordSchema', 'schemaFor', 'sentence',
    'typeField', 'numberField', 'stringField', 'latlonField', 'dateField', 'timeField',
    'checksumField', 'padField', 'builtinSentences',
    'deArmor', 'extractBits', 'extractInt', 'extractText', 'sixBitToChar',
    'recordToDict', 'recordToJson',
    'NmeaError', 'TooShortError', 'NoSigilError', 'ChecksumSyntaxError', 'ChecksumMismatchError',
    'InvalidDestinationError', 'FieldTypeMismatchError', 'ConversionError', 'SentenceTypeMismatchError',
    'NotRegisteredError', 'BadArmorCharacterError', 'SchemaError', 'LateTypeFieldError',
    'MissingTypeFieldError', 'BadTypeMatcherSyntaxError', 'PreconditionError', 'BitRangeError',
    'SixBitOverflowError', 'RegistrationError',
]

# Define the version
__version__ = "navsdk NMEA/AIS Parsing Version 1.0"
