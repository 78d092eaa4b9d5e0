"""
Semantic Converter Tests

Each converter is a pure function of (token, kind):
1. number: integer widths/signedness, floats, empty -> 0
2. string: text and bytes
3. latlon: DDDMM.MMMM -> decimal degrees
4. date/time: DDMMYY and HHMMSS[.fff] in UTC
5. Kind compatibility errors
"""

from datetime import datetime, timezone

import numpy as np
import pytest

from navsdk.parsers.converters import (convert, toDate, toLatLon, toNumber, toString, toTime,
                                       wrapInteger, zeroValue)
from navsdk.parsers.errors import ConversionError, FieldTypeMismatchError, NmeaError


class TestNumber:
    """number converter"""

    def test_empty_is_zero(self):
        assert toNumber('', 'I8') == 0
        assert toNumber('', 'U1') == 0
        assert toNumber('', 'R8') == 0.0

    def test_signed_integer(self):
        assert toNumber('-3', 'I8') == -3
        assert toNumber('+5', 'I8') == 5
        assert toNumber('05', 'I8') == 5

    @pytest.mark.parametrize("token,kind", [
        ('128', 'I1'), ('-129', 'I1'), ('256', 'U1'), ('65536', 'U2'), ('4294967296', 'U4'),
    ])
    def test_integer_out_of_range(self, token, kind):
        with pytest.raises(ConversionError):
            toNumber(token, kind)

    def test_integer_bounds(self):
        assert toNumber('127', 'I1') == 127
        assert toNumber('-128', 'I1') == -128
        assert toNumber('255', 'U1') == 255

    @pytest.mark.parametrize("token", ['1.5', 'abc', ' 5', '1_0', '5 ', '0x10'])
    def test_malformed_integer(self, token):
        with pytest.raises(ConversionError):
            toNumber(token, 'I8')

    def test_unsigned_rejects_sign(self):
        with pytest.raises(ConversionError):
            toNumber('-1', 'U8')
        with pytest.raises(ConversionError):
            toNumber('+1', 'U8')

    def test_float(self):
        assert toNumber('099.3', 'R8') == 99.3
        assert toNumber('-34.0', 'R8') == -34.0
        assert toNumber('1.', 'R8') == 1.0
        assert toNumber('.5', 'R8') == 0.5

    def test_float32_precision(self):
        value = toNumber('0.1', 'R4')
        assert value == float(np.float32(0.1))
        assert value != 0.1

    @pytest.mark.filterwarnings('error')
    @pytest.mark.parametrize("token,kind", [('1e400', 'R8'), ('-1e400', 'R8'), ('1e39', 'R4'), ('-1e39', 'R4')])
    def test_float_overflow(self, token, kind):
        with pytest.raises(ConversionError):
            toNumber(token, kind)

    def test_float_largest_finite(self):
        assert toNumber('1e39', 'R8') == 1e39
        assert toNumber('3.4e38', 'R4') == float(np.float32(3.4e38))

    @pytest.mark.parametrize("token", ['abc', '1.2.3', ' 1.0', '1_0.0', 'T'])
    def test_malformed_float(self, token):
        with pytest.raises(ConversionError):
            toNumber(token, 'R8')

    def test_conversion_error_is_value_error(self):
        with pytest.raises(ValueError):
            toNumber('x', 'R8')

    def test_wrong_kind(self):
        with pytest.raises(FieldTypeMismatchError):
            toNumber('1', 'CH')


class TestString:
    """string converter"""

    def test_verbatim(self):
        assert toString("Astrln Geod '66", 'CH') == "Astrln Geod '66"
        assert toString('', 'CH') == ''

    def test_bytes(self):
        assert toString('POINTB', 'BY') == b'POINTB'

    def test_wrong_kind(self):
        with pytest.raises(FieldTypeMismatchError):
            toString('x', 'R8')


class TestLatLon:
    """latlon converter"""

    def test_degrees_minutes(self):
        assert toLatLon('4917.24', 'R8') == pytest.approx(49.28733333333333)
        assert toLatLon('12309.57', 'R8') == pytest.approx(123.1595)
        assert toLatLon('00046.34', 'R8') == pytest.approx(0.7723333333333334)

    def test_empty_is_zero(self):
        assert toLatLon('', 'R8') == 0.0

    def test_negative_uses_floor(self):
        # deg = floor(-49.1724) = -50, minutes = 82.76
        assert toLatLon('-4917.24', 'R8') == pytest.approx(-48.620666666666665)

    def test_overflow(self):
        with pytest.raises(ConversionError):
            toLatLon('1e400', 'R8')

    def test_malformed(self):
        with pytest.raises(ConversionError):
            toLatLon('49N17', 'R8')

    def test_wrong_kind(self):
        with pytest.raises(FieldTypeMismatchError):
            toLatLon('4917.24', 'I8')


class TestDate:
    """date converter"""

    def test_ddmmyy(self):
        assert toDate('130998', 'DT') == datetime(1998, 9, 13, tzinfo=timezone.utc)
        assert toDate('051197', 'DT') == datetime(1997, 11, 5, tzinfo=timezone.utc)

    def test_two_digit_year_pivot(self):
        """Years below 69 resolve to 20xx, nothing else is inferred"""
        assert toDate('010168', 'DT').year == 2068
        assert toDate('010169', 'DT').year == 1969

    def test_empty_is_none(self):
        assert toDate('', 'DT') is None

    @pytest.mark.parametrize("token", ['1309', '1309989', '320198', '011398', 'ab0998'])
    def test_malformed(self, token):
        with pytest.raises(ConversionError):
            toDate(token, 'DT')

    def test_wrong_kind(self):
        with pytest.raises(FieldTypeMismatchError):
            toDate('130998', 'CH')


class TestTime:
    """time converter"""

    def test_hhmmss(self):
        assert toTime('225444', 'DT') == datetime(1900, 1, 1, 22, 54, 44, tzinfo=timezone.utc)

    def test_fractional_seconds(self):
        assert toTime('053220.03', 'DT').microsecond == 30000
        assert toTime('173958.45', 'DT').microsecond == 450000
        assert toTime('014035.1234567', 'DT').microsecond == 123456

    def test_utc(self):
        assert toTime('000000', 'DT').tzinfo == timezone.utc

    def test_empty_is_none(self):
        assert toTime('', 'DT') is None

    @pytest.mark.parametrize("token", ['250000', '126000', '12345', '1234567', '12:34:56', '123456.'])
    def test_malformed(self, token):
        with pytest.raises(ConversionError):
            toTime(token, 'DT')

    def test_wrong_kind(self):
        with pytest.raises(FieldTypeMismatchError):
            toTime('123456', 'R8')


class TestDispatch:
    """convert() and helpers"""

    def test_convert_by_tag(self):
        assert convert('number', '42', 'I8') == 42
        assert convert('string', 'A', 'CH') == 'A'

    def test_unknown_tag(self):
        with pytest.raises(FieldTypeMismatchError):
            convert('checksum', '42', 'U1')

    def test_all_errors_are_nmea_errors(self):
        with pytest.raises(NmeaError):
            convert('time', 'noon', 'DT')

    def test_zero_values(self):
        assert zeroValue('I4') == 0
        assert zeroValue('R4') == 0.0
        assert zeroValue('CH') == ''
        assert zeroValue('BY') == b''
        assert zeroValue('DT') is None

    def test_wrap_integer(self):
        assert wrapInteger(0xC8, 'U1') == 0xC8
        assert wrapInteger(0xC8, 'I1') == -56
        assert wrapInteger(0x48, 'I1') == 0x48
        assert wrapInteger(0x1FF, 'U1') == 0xFF
