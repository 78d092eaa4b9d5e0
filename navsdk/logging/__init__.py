"""
navsdk Logging - Hierarchical structured logger with automatic detection.

API:
    from navsdk.logging import getLogger

    # Class-level (auto-detect once in __init__)
    class SentenceRegistry:
        def __init__(self):
            self.log = getLogger()  # Auto: 'parsers.registry.SentenceRegistry'

        def register(self, typeKey, recordType):
            self.log.debug("Registered", typeKey=typeKey)

    # Module-level (auto-detect once at import)
    log = getLogger()  # Auto: module path without the 'navsdk' prefix

    # Global configuration (optional, once at app startup)
    from navsdk.logging import configureLogging
    configureLogging(logDir='../logs', level='DEBUG')
"""

from .logger import getLogger, configureLogging, StructuredFormatter

__all__ = [
    'getLogger',
    'configureLogging',
    'StructuredFormatter',
]
