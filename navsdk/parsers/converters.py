# -*- coding: utf-8 -*-
"""
Semantic converters: token text -> typed field value.

Field kinds use the ICD style codes of receiver interface descriptions:
    I1/I2/I4/I8  signed integers of 8/16/32/64 bits
    U1/U2/U4/U8  unsigned integers of 8/16/32/64 bits
    R4/R8        32/64 bit floats
    CH           text
    BY           raw bytes
    DT           datetime (UTC)

Every converter is a pure function of (token, kind). An empty token yields the
converter's zero value.
"""

import math, re
from datetime import datetime, timezone
from typing import Any, Callable, Dict

import numpy as np

from .errors import ConversionError, FieldTypeMismatchError


# Bit widths of integer kinds, (bits, signed)
INTEGER_KINDS = {
    'I1': (8, True), 'I2': (16, True), 'I4': (32, True), 'I8': (64, True),
    'U1': (8, False), 'U2': (16, False), 'U4': (32, False), 'U8': (64, False),
}
FLOAT_KINDS = {'R4', 'R8'}
TEXT_KINDS = {'CH', 'BY'}
TIME_KINDS = {'DT'}
KINDS = set(INTEGER_KINDS) | FLOAT_KINDS | TEXT_KINDS | TIME_KINDS

# Time-of-day values are anchored to the strptime default date
PLACEHOLDER_DATE = (1900, 1, 1)

_signedInteger = re.compile(r'[+-]?[0-9]+')
_unsignedInteger = re.compile(r'[0-9]+')
_decimal = re.compile(r'[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?')
_date = re.compile(r'[0-9]{6}')
_time = re.compile(r'([0-9]{2})([0-9]{2})([0-9]{2})(?:\.([0-9]+))?')


def zeroValue(kind: str) -> Any:
    """Value a field of the given kind holds before anything is written to it."""
    if kind in INTEGER_KINDS:
        return 0
    if kind in FLOAT_KINDS:
        return 0.0
    if kind == 'CH':
        return ''
    if kind == 'BY':
        return b''
    return None


def wrapInteger(value: int, kind: str) -> int:
    """Truncate value to the kind's width, two's complement for signed kinds."""
    bits, signed = INTEGER_KINDS[kind]
    value &= (1 << bits) - 1
    if signed and value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def toNumber(token: str, kind: str) -> Any:
    """Parse an integer or float of the declared kind. Empty token -> 0."""
    if kind in INTEGER_KINDS:
        return _toInteger(token, kind)
    if kind in FLOAT_KINDS:
        return _toFloat(token, kind)
    raise FieldTypeMismatchError(f"nmea: number cannot be stored as {kind}")


def _toInteger(token: str, kind: str) -> int:
    if not token:
        return 0
    bits, signed = INTEGER_KINDS[kind]
    pattern = _signedInteger if signed else _unsignedInteger
    if not pattern.fullmatch(token):
        raise ConversionError(f"nmea: invalid {kind} integer {token!r}")
    value = int(token, 10)
    low, high = (-(1 << (bits - 1)), (1 << (bits - 1)) - 1) if signed else (0, (1 << bits) - 1)
    if not low <= value <= high:
        raise ConversionError(f"nmea: {token!r} out of range for {kind}")
    return value


def _toFloat(token: str, kind: str) -> float:
    if not token:
        return 0.0
    if not _decimal.fullmatch(token):
        raise ConversionError(f"nmea: invalid {kind} number {token!r}")
    value = float(token)
    if kind == 'R4':
        with np.errstate(over='ignore'):
            value = float(np.float32(value))
    # The grammar has no infinity literal, so inf is always an overflow
    if math.isinf(value):
        raise ConversionError(f"nmea: {token!r} out of range for {kind}")
    return value


def toString(token: str, kind: str) -> Any:
    """Copy the token verbatim, as bytes for BY fields."""
    if kind == 'CH':
        return token
    if kind == 'BY':
        return token.encode('utf-8')
    raise FieldTypeMismatchError(f"nmea: string cannot be stored as {kind}")


def toLatLon(token: str, kind: str) -> float:
    """Convert DDDMM.MMMM (degrees then minutes) to decimal degrees. Empty token -> 0."""
    if kind not in FLOAT_KINDS:
        raise FieldTypeMismatchError(f"nmea: latlon cannot be stored as {kind}")
    if not token:
        return 0.0
    value = _toFloat(token, 'R8')
    degrees = math.floor(value / 100)
    result = degrees + (value - degrees * 100) / 60.0
    if kind == 'R4':
        result = float(np.float32(result))
    return result


def toDate(token: str, kind: str) -> Any:
    """Parse DDMMYY into a UTC datetime. Empty token -> None.

    The two-digit year is resolved by the %y rule of strptime
    (69-99 -> 19xx, 00-68 -> 20xx) and by nothing else.
    """
    if kind not in TIME_KINDS:
        raise FieldTypeMismatchError(f"nmea: date cannot be stored as {kind}")
    if not token:
        return None
    if not _date.fullmatch(token):
        raise ConversionError(f"nmea: invalid date {token!r}")
    try:
        return datetime.strptime(token, '%d%m%y').replace(tzinfo=timezone.utc)
    except ValueError as err:
        raise ConversionError(f"nmea: invalid date {token!r}") from err


def toTime(token: str, kind: str) -> Any:
    """Parse HHMMSS[.fff] into a UTC datetime on the placeholder date. Empty token -> None."""
    if kind not in TIME_KINDS:
        raise FieldTypeMismatchError(f"nmea: time cannot be stored as {kind}")
    if not token:
        return None
    match = _time.fullmatch(token)
    if not match:
        raise ConversionError(f"nmea: invalid time {token!r}")
    hour, minute, second, fraction = match.groups()
    microsecond = int((fraction or '').ljust(6, '0')[:6])
    try:
        return datetime(*PLACEHOLDER_DATE, int(hour), int(minute), int(second), microsecond,
                        tzinfo=timezone.utc)
    except ValueError as err:
        raise ConversionError(f"nmea: invalid time {token!r}") from err


# Map semantic tag to converter
CONVERTERS: Dict[str, Callable[[str, str], Any]] = {
    'number': toNumber,
    'string': toString,
    'latlon': toLatLon,
    'date': toDate,
    'time': toTime,
}


def convert(tag: str, token: str, kind: str) -> Any:
    """Run the converter named by tag on token for a field of the given kind."""
    try:
        converter = CONVERTERS[tag]
    except KeyError:
        raise FieldTypeMismatchError(f"nmea: no converter for tag {tag!r}") from None
    return converter(token, kind)
