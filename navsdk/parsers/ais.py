# -*- coding: utf-8 -*-
"""
AIS payload armoring and bit field extraction.

AIVDM/AIVDO payloads carry six bits per character ("armor"). De-armoring
yields one symbol (0-63) per byte; bit i of the payload lives in
symbols[i // 6] at bit 5 - i % 6 (most significant bit first).

See https://gpsd.gitlab.io/gpsd/AIVDM.html#_aivdm_aivdo_payload_armoring
"""

import numpy as np

from .errors import BadArmorCharacterError, BitRangeError, SixBitOverflowError

# Six-bit ASCII alphabet used by AIS text fields
SIXBIT_ASCII = "@ABCDEFGHIJKLMNOPQRSTUVWXYZ[\\]^_ !\"#$%&'()*+,-./0123456789:;<=>?"


def deArmor(payload: str) -> bytes:
    """Returns the six-bit symbols of an armored payload, one symbol per byte."""
    if not payload:
        return b''
    try:
        raw = np.frombuffer(payload.encode('ascii'), dtype=np.uint8)
    except UnicodeEncodeError as err:
        raise BadArmorCharacterError(f"nmea: invalid binary data encoding {payload[err.start]!r}",
                                     position=err.start) from None

    bad = (raw < ord('0')) | (raw > ord('w')) | ((raw >= ord('X')) & (raw <= ord('_')))
    if bad.any():
        position = int(np.argmax(bad))
        raise BadArmorCharacterError(f"nmea: invalid binary data encoding {payload[position]!r}",
                                     position=position)

    symbols = raw - ord('0')
    symbols[symbols > 40] -= 8  # close the gap left by 'X'..'_'
    return symbols.tobytes()


def sixBitToChar(value: int) -> str:
    """Returns the six-bit ASCII character for value (0-63)."""
    if not 0 <= value <= 63:
        raise SixBitOverflowError(f"nmea: six bit ascii overflow {value}")
    return SIXBIT_ASCII[value]


def _bits(symbols: bytes, start: int, end: int) -> np.ndarray:
    """Bits [start, end) of the symbol buffer as a 0/1 array, validating the range."""
    if start < 0 or end < 0 or end < start:
        raise BitRangeError(f"nmea: bitfield index out of bounds [{start}, {end})")
    if end > len(symbols) * 6:
        raise BitRangeError(f"nmea: bitfield index out of bounds [{start}, {end}) "
                            f"for {len(symbols) * 6} bits")
    words = np.frombuffer(bytes(symbols), dtype=np.uint8).reshape(-1, 1)
    return np.unpackbits(words, axis=1)[:, 2:].ravel()[start:end]


def extractBits(symbols: bytes, start: int, end: int) -> bytes:
    """
    Returns bits [start, end) of a six-bit symbol buffer packed into bytes.

    The last extracted bit is the least significant bit of the result, after
    the value is shifted right by (6 - (end - start) % 6) % 6 bits to strip
    the padding of the final partial symbol. The value is serialized big-endian
    in as few bytes as it needs: leading zero bytes are dropped, and an all-zero
    field yields b''.
    """
    bits = _bits(symbols, start, end)
    if start == end:
        return b''
    padding = (6 - (end - start) % 6) % 6
    kept = bits[:max(len(bits) - padding, 0)]
    if not len(kept):
        return b''
    aligned = np.concatenate([np.zeros(-len(kept) % 8, dtype=np.uint8), kept])
    return np.packbits(aligned).tobytes().lstrip(b'\x00')


def extractInt(symbols: bytes, start: int, end: int, signed: bool = False) -> int:
    """Returns bits [start, end) as an integer, two's complement when signed."""
    bits = _bits(symbols, start, end)
    width = end - start
    if not width:
        return 0
    value = int(''.join(map(str, bits.tolist())), base=2)
    if signed and value & (1 << (width - 1)):
        value -= 1 << width
    return value


def extractText(symbols: bytes, start: int, end: int) -> str:
    """Returns bits [start, end) read as six-bit ASCII, trailing '@' and spaces removed."""
    bits = _bits(symbols, start, end)
    chars = [sixBitToChar(int(''.join(map(str, bits[i:i + 6].tolist())), base=2))
             for i in range(0, len(bits) - len(bits) % 6, 6)]
    return ''.join(chars).rstrip('@ ')
