"""
Sentence Envelope Tests

Tests framing checks and tokenization:
1. Checksum law: XOR of the bytes between sigil and '*'
2. Framing errors: too short, no sigil, malformed checksum
3. Token splitting keeps empty tokens
4. Single digit corruption always produces a checksum mismatch
"""

import pytest

from navsdk.parsers import parseTo
from navsdk.parsers.envelope import checksum, readEnvelope
from navsdk.parsers.errors import (ChecksumMismatchError, ChecksumSyntaxError, NoSigilError,
                                   TooShortError)
from navsdk.parsers.sentences import BOD


SIGNED_SENTENCES = [
    "$GPBOD,099.3,T,105.6,M,POINTB,*48",
    "$GPBWC,225444,4917.24,N,12309.57,W,051.9,T,031.6,M,001.3,N,004*29",
    "$GPGGA,170834,4124.8963,N,08151.6838,W,1,05,1.5,280.2,M,-34.0,M,,*75",
    "$GPGSA,A,3,,,,,,16,18,,22,24,,,3.6,2.1,2.2*3C",
    "$GPHDT,1,T*2A",
    "$PGRMZ,246,f,3*1B",
    "!AIVDM,1,1,,B,177KQJ5000G?tO`K>RA1wUbN0TKH,0*5C",
]


class TestChecksum:
    """XOR checksum"""

    @pytest.mark.parametrize("sentence", SIGNED_SENTENCES)
    def test_checksum_law(self, sentence):
        body, declared = sentence[1:].split('*')
        assert checksum(body) == int(declared, 16)

    def test_known_value(self):
        assert checksum('GPBOD,099.3,T,105.6,M,POINTB,') == 0x48

    def test_empty(self):
        assert checksum('') == 0

    @pytest.mark.parametrize("sentence", SIGNED_SENTENCES)
    def test_envelope_validates(self, sentence):
        envelope = readEnvelope(sentence)
        assert envelope.hasChecksum
        assert envelope.checksumValid


class TestFraming:
    """Framing errors"""

    def test_too_short(self):
        with pytest.raises(TooShortError):
            readEnvelope('$GPGG')
        with pytest.raises(TooShortError):
            readEnvelope('')

    def test_no_sigil(self):
        with pytest.raises(NoSigilError):
            readEnvelope('#GPGGA,1,2')
        with pytest.raises(NoSigilError):
            readEnvelope('GPHDT,1,T*2A')

    @pytest.mark.parametrize("sentence", [
        '$GPHDT,1,T*ZZ', '$GPHDT,1,T*', '$GPHDT,1,T*2A0', '$GPHDT,1,T*2A*2A', '$GPHDT,1,T* 2',
    ])
    def test_checksum_syntax(self, sentence):
        with pytest.raises(ChecksumSyntaxError):
            readEnvelope(sentence)

    @pytest.mark.parametrize("sentence", ['$GPHDT,1,T*80', '$GPHDT,1,T*C8', '$GPHDT,1,T*ff'])
    def test_checksum_out_of_range(self, sentence):
        with pytest.raises(ChecksumSyntaxError):
            readEnvelope(sentence)

    def test_largest_checksum(self):
        assert readEnvelope('$GPHDT,1,T*7F').declared == 0x7F

    def test_single_digit_checksum(self):
        envelope = readEnvelope('$GPSTN,3*5')
        assert envelope.declared == 0x5

    def test_lowercase_checksum(self):
        assert readEnvelope('$GPSTN,3*0a').declared == 0x0A


class TestTokens:
    """Tokenization"""

    def test_empty_tokens_kept(self):
        envelope = readEnvelope('$GPXTE,,,A')
        assert envelope.tokens == ('GPXTE', '', '', 'A')

    def test_trailing_empty_token(self):
        envelope = readEnvelope('$GPBOD,099.3,T,105.6,M,POINTB,*48')
        assert envelope.tokens[-1] == ''
        assert len(envelope.tokens) == 7

    def test_no_checksum(self):
        envelope = readEnvelope('$GPSTN,3')
        assert not envelope.hasChecksum
        assert envelope.checksumValue == 0
        assert envelope.checksumValid
        assert envelope.sentenceType == 'GPSTN'

    def test_line_ending_stripped(self):
        envelope = readEnvelope('$GPHDT,1,T*2A\r\n')
        assert envelope.declared == 0x2A
        assert envelope.tokens == ('GPHDT', '1', 'T')

    def test_ais_sigil(self):
        envelope = readEnvelope('!AIVDM,1,1,,B,177KQJ5000G?tO`K>RA1wUbN0TKH,0*5C')
        assert envelope.sigil == '!'
        assert envelope.tokens[5] == '177KQJ5000G?tO`K>RA1wUbN0TKH'


BOD_SENTENCE = "$GPBOD,099.3,T,105.6,M,POINTB,*48"
BOD_DIGITS = [i for i, c in enumerate(BOD_SENTENCE) if c.isdigit() and i < BOD_SENTENCE.index('*')]


class TestCorruption:
    """Any single digit change is detected"""

    @pytest.mark.parametrize("index", BOD_DIGITS)
    def test_digit_flip_is_mismatch(self, index):
        # flipping the low bit keeps a digit a digit
        corrupted = BOD_SENTENCE[:index] + chr(ord(BOD_SENTENCE[index]) ^ 1) + BOD_SENTENCE[index + 1:]
        with pytest.raises(ChecksumMismatchError) as excInfo:
            parseTo(BOD(), corrupted)
        assert excInfo.value.declared == 0x48
        assert excInfo.value.computed != 0x48
