# -*- coding: utf-8 -*-
"""
Built-in NMEA 0183 sentence records.

Talker sentences match any two letter talker ('GP', 'GL', 'GN', ...) through
their type pattern; the registry decides which talker variants are looked up.
References: http://aprs.gids.nl/nmea/ and https://gpsd.gitlab.io/gpsd/AIVDM.html
"""

from datetime import datetime
from typing import Dict, Iterable, Optional

from .ais import deArmor
from .schema import (checksumField, dateField, latlonField, numberField, padField, sentence,
                     stringField, timeField, typeField)


def _talker(code: str) -> str:
    return f'/^[A-Z]{{2}}{code}$/'


@sentence
class BOD:
    """Bearing, origin to destination"""
    type: str = typeField(_talker('BOD'))
    trueBearing: float = numberField()
    trueRef: None = padField()
    magneticBearing: float = numberField()
    magneticRef: None = padField()
    destination: str = stringField()
    start: str = stringField()
    checksum: int = checksumField()


@sentence
class BWC:
    """Bearing and distance to waypoint, great circle"""
    type: str = typeField(_talker('BWC'))
    timestamp: Optional[datetime] = timeField()
    latitude: float = latlonField()
    northSouth: str = stringField()
    longitude: float = latlonField()
    eastWest: str = stringField()
    trueBearing: float = numberField()
    trueRef: None = padField()
    magneticBearing: float = numberField()
    magneticRef: None = padField()
    range: float = numberField()
    rangeUnit: str = stringField()
    waypoint: str = stringField()
    checksum: int = checksumField()


@sentence
class GGA:
    """Global positioning system fix data"""
    type: str = typeField(_talker('GGA'))
    timestamp: Optional[datetime] = timeField()
    latitude: float = latlonField()
    northSouth: str = stringField()
    longitude: float = latlonField()
    eastWest: str = stringField()
    quality: int = numberField('I8')
    satellites: int = numberField('I8')
    hdop: float = numberField()
    altitude: float = numberField()
    altitudeUnit: str = stringField()
    separation: float = numberField()
    separationUnit: str = stringField()
    age: float = numberField()
    diffReferenceStationId: str = stringField()
    checksum: int = checksumField()


@sentence
class GLL:
    """Geographic position, latitude and longitude"""
    type: str = typeField(_talker('GLL'))
    latitude: float = latlonField()
    northSouth: str = stringField()
    longitude: float = latlonField()
    eastWest: str = stringField()
    timestamp: Optional[datetime] = timeField()
    status: str = stringField()
    checksum: int = checksumField()


@sentence
class GNS:
    """GNSS fix data"""
    type: str = typeField(_talker('GNS'))
    timestamp: Optional[datetime] = timeField()
    latitude: float = latlonField()
    northSouth: str = stringField()
    longitude: float = latlonField()
    eastWest: str = stringField()
    mode: str = stringField()
    satellites: int = numberField('I8')
    hdop: float = numberField()
    altitude: float = numberField()
    separation: float = numberField()
    age: float = numberField()
    referenceStation: int = numberField('I8')
    checksum: int = checksumField()


@sentence
class GSA:
    """GNSS DOP and active satellites"""
    type: str = typeField(_talker('GSA'))
    mode: str = stringField()
    fix: int = numberField('I8')
    sv0: str = stringField()
    sv1: str = stringField()
    sv2: str = stringField()
    sv3: str = stringField()
    sv4: str = stringField()
    sv5: str = stringField()
    sv6: str = stringField()
    sv7: str = stringField()
    sv8: str = stringField()
    sv9: str = stringField()
    sv10: str = stringField()
    sv11: str = stringField()
    pdop: float = numberField()
    hdop: float = numberField()
    vdop: float = numberField()
    checksum: int = checksumField()


@sentence
class GSV:
    """GNSS satellites in view, up to four satellites per sentence"""
    type: str = typeField(_talker('GSV'))
    messages: int = numberField('I8')
    messageNumber: int = numberField('I8')
    satellitesInView: int = numberField('I8')
    satellite0Prn: int = numberField('I8')
    elevation0: int = numberField('I8')
    azimuth0: int = numberField('I8')
    snr0: int = numberField('I8')
    satellite1Prn: int = numberField('I8')
    elevation1: int = numberField('I8')
    azimuth1: int = numberField('I8')
    snr1: int = numberField('I8')
    satellite2Prn: int = numberField('I8')
    elevation2: int = numberField('I8')
    azimuth2: int = numberField('I8')
    snr2: int = numberField('I8')
    satellite3Prn: int = numberField('I8')
    elevation3: int = numberField('I8')
    azimuth3: int = numberField('I8')
    snr3: int = numberField('I8')
    checksum: int = checksumField()


@sentence
class HDT:
    """Heading, true"""
    type: str = typeField(_talker('HDT'))
    heading: float = numberField()
    headingRef: None = padField()
    checksum: int = checksumField()


@sentence
class R00:
    """Waypoints in active route"""
    type: str = typeField(_talker('R00'))
    wp0: str = stringField()
    wp1: str = stringField()
    wp2: str = stringField()
    wp3: str = stringField()
    wp4: str = stringField()
    wp5: str = stringField()
    wp6: str = stringField()
    wp7: str = stringField()
    wp8: str = stringField()
    wp9: str = stringField()
    wp10: str = stringField()
    wp11: str = stringField()
    wp12: str = stringField()
    checksum: int = checksumField()


@sentence
class RMA:
    """Recommended minimum specific Loran-C data"""
    type: str = typeField(_talker('RMA'))
    status: str = stringField()
    latitude: float = latlonField()
    northSouth: str = stringField()
    longitude: float = latlonField()
    eastWest: str = stringField()
    timeDifferenceA: None = padField()
    timeDifferenceB: None = padField()
    speed: float = numberField()
    courseOverGround: int = numberField('I8')
    variation: float = numberField()
    varDirection: str = stringField()
    checksum: int = checksumField()


@sentence
class RMB:
    """Recommended minimum navigation information"""
    type: str = typeField(_talker('RMB'))
    status: str = stringField()
    crosstrackError: float = numberField()
    correctDirection: str = stringField()
    origin: str = stringField()
    destination: str = stringField()
    latitude: float = latlonField()
    northSouth: str = stringField()
    longitude: float = latlonField()
    eastWest: str = stringField()
    rangeToDestination: float = numberField()
    bearingToDestination: float = numberField()
    closingVelocity: float = numberField()
    arrivalStatus: str = stringField()
    checksum: int = checksumField()


@sentence
class RMC:
    """Recommended minimum specific GNSS data"""
    type: str = typeField(_talker('RMC'))
    time: Optional[datetime] = timeField()
    status: str = stringField()
    latitude: float = latlonField()
    northSouth: str = stringField()
    longitude: float = latlonField()
    eastWest: str = stringField()
    speed: float = numberField()
    track: float = numberField()
    date: Optional[datetime] = dateField()
    magneticVariation: float = numberField()
    varDirection: str = stringField()
    posMode: str = stringField()
    checksum: int = checksumField()


@sentence
class STN:
    """Multiple data ID"""
    type: str = typeField(_talker('STN'))
    talker: int = numberField('U1')


@sentence
class THS:
    """True heading and status"""
    type: str = typeField(_talker('THS'))
    heading: float = numberField()
    status: str = stringField()
    checksum: int = checksumField()


@sentence
class TRF:
    """Transit fix data"""
    type: str = typeField(_talker('TRF'))
    time: Optional[datetime] = timeField()
    date: Optional[datetime] = dateField()
    latitude: float = latlonField()
    northSouth: str = stringField()
    longitude: float = latlonField()
    eastWest: str = stringField()
    elevation: float = numberField()
    iterations: float = numberField()
    dopplerIntervals: float = numberField()
    updateDistance: float = numberField()
    satellite: str = stringField()


@sentence
class VBW:
    """Dual ground/water speed"""
    type: str = typeField(_talker('VBW'))
    longitudinalWaterSpeed: float = numberField()
    transverseWaterSpeed: float = numberField()
    waterSpeedStatus: str = stringField()
    longitudinalGroundSpeed: float = numberField()
    transverseGroundSpeed: float = numberField()
    groundSpeedStatus: str = stringField()


@sentence
class VTG:
    """Course over ground and ground speed"""
    type: str = typeField(_talker('VTG'))
    trackTrue: float = numberField()
    trackTrueRef: None = padField()
    trackMagnetic: float = numberField()
    trackMagneticRef: None = padField()
    speedKnots: float = numberField()
    speedKnotsUnit: None = padField()
    speedKph: float = numberField()
    speedKphUnit: None = padField()
    checksum: int = checksumField()


@sentence
class WPL:
    """Waypoint location"""
    type: str = typeField(_talker('WPL'))
    latitude: float = latlonField()
    northSouth: str = stringField()
    longitude: float = latlonField()
    eastWest: str = stringField()
    waypoint: str = stringField()
    checksum: int = checksumField()


@sentence
class XTE:
    """Cross-track error, measured"""
    type: str = typeField(_talker('XTE'))
    generalWarning: str = stringField()
    lockFlag: str = stringField()
    crossTrackError: float = numberField()
    steer: str = stringField()
    units: str = stringField()
    checksum: int = checksumField()


@sentence
class ZDA:
    """Time and date"""
    type: str = typeField(_talker('ZDA'))
    time: Optional[datetime] = timeField()
    day: int = numberField('U1')
    month: int = numberField('U1')
    year: int = numberField('I8')
    timeZone: int = numberField('I1')
    timeZoneMinutes: int = numberField('I1')
    checksum: int = checksumField()


@sentence
class RME:
    """Garmin estimated position error"""
    type: str = typeField('PGRME')
    hpe: float = numberField()
    hpeUnit: None = padField()
    vpe: float = numberField()
    vpeUnit: None = padField()
    osepe: float = numberField()
    osepeUnit: None = padField()
    checksum: int = checksumField()


@sentence
class RMM:
    """Garmin map datum"""
    type: str = typeField('PGRMM')
    mapDatum: str = stringField()
    checksum: int = checksumField()


@sentence
class RMZ:
    """Garmin altitude"""
    type: str = typeField('PGRMZ')
    altitude: float = numberField()
    altitudeUnit: None = padField()
    positionFixDimensions: int = numberField('I1')
    checksum: int = checksumField()


@sentence
class LIB:
    """Starlink beacon receiver tune/request"""
    type: str = typeField('PSLIB')
    frequency: float = numberField()
    bitRate: float = numberField()
    requestType: str = stringField()
    checksum: int = checksumField()


@sentence
class VDMVDO:
    """AIS VHF data-link message (AIVDM received, AIVDO own vessel), one fragment"""
    type: str = typeField('/^AIVD[MO]$/')
    fragments: int = numberField('I8')
    fragmentNumber: int = numberField('I8')
    messageId: str = stringField()
    channelCode: str = stringField()
    data: str = stringField()
    padding: int = numberField('U1')
    checksum: int = checksumField()

    def symbols(self) -> bytes:
        """De-armored payload, one six-bit symbol per byte."""
        return deArmor(self.data)

    def bitLength(self) -> int:
        """Number of payload bits, fill bits excluded."""
        return len(self.data) * 6 - self.padding


############################## Built-in registrations ##############################

DEFAULT_TALKERS = ('GL', 'GN', 'GP')

TALKER_SENTENCES = {
    'BOD': BOD, 'BWC': BWC, 'GGA': GGA, 'GLL': GLL, 'GNS': GNS,
    'GSA': GSA, 'GSV': GSV, 'HDT': HDT, 'R00': R00, 'RMA': RMA,
    'RMB': RMB, 'RMC': RMC, 'STN': STN, 'THS': THS, 'TRF': TRF,
    'VBW': VBW, 'VTG': VTG, 'WPL': WPL, 'XTE': XTE, 'ZDA': ZDA,
}

PROPRIETARY_SENTENCES = {
    'PGRME': RME,
    'PGRMM': RMM,
    'PGRMZ': RMZ,
    'PSLIB': LIB,
}

AIS_SENTENCES = {
    'AIVDM': VDMVDO,
    'AIVDO': VDMVDO,
}


def builtinSentences(talkers: Iterable[str] = DEFAULT_TALKERS) -> Dict[str, type]:
    """Map every built-in type key (talker variants expanded) to its record class."""
    registrations = {f'{talker}{code}': recordType
                     for code, recordType in TALKER_SENTENCES.items()
                     for talker in talkers}
    registrations.update(PROPRIETARY_SENTENCES)
    registrations.update(AIS_SENTENCES)
    return registrations
