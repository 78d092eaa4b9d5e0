"""navsdk - Marine Navigation Software Development Kit

Contains reusable modules for:
    - parsers: NMEA 0183 sentence decoding and AIS armor/bitfield decoding
    - logging: Centralized structured logging
    - config: Parser configuration loading with fallback defaults
"""

__version__ = "1.0-beta"
__versionInfo__ = (1, 0, 0, "beta")
__changelog__ = {
    "1.0-beta": "Initial beta release with sentence registry and AIS codec"
}
