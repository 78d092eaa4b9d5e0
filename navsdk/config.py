"""Utility helpers for loading parser-config.json with shared fallbacks."""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Optional, Tuple

import orjson

from .configDefaults import DEFAULT_PARSER_CONFIG
from .logging import configureLogging

ParserConfigResult = Tuple[dict, str, bool]


def _validateParserConfig(config: dict) -> None:
    if not isinstance(config, dict):
        raise ValueError('parser-config is not a JSON object')
    registry = config.get('registry')
    if not isinstance(registry, dict):
        raise ValueError("Missing 'registry' section")
    talkers = registry.get('talkers')
    if not isinstance(talkers, list) or not all(isinstance(t, str) and len(t) == 2 for t in talkers):
        raise ValueError("'talkers' must be a list of two letter talker ids")
    if not isinstance(registry.get('aliases', {}), dict):
        raise ValueError("'aliases' must be an object")
    if not isinstance(registry.get('exclude', []), list):
        raise ValueError("'exclude' must be a list")


def loadParserConfig(path: str | Path, log: Optional[object] = None) -> ParserConfigResult:
    """Load parser-config.json, falling back to immutable defaults on error.

    Returns (config, configVersion, usedDefaults).
    """
    cfgPath = Path(path)

    try:
        config = orjson.loads(cfgPath.read_bytes())
        _validateParserConfig(config)
        version = config.get('configVersion', '1.0')
        if log:
            log.info('Loaded parser-config.json', event='parserConfigLoad', component='ParserConfig',
                     configPath=str(cfgPath), configVersion=version)
        return config, version, False
    except (OSError, orjson.JSONDecodeError, ValueError) as exc:
        if log:
            log.error('Failed to load parser-config.json', event='parserConfigLoadError', component='ParserConfig',
                      configPath=str(cfgPath), errorClass=type(exc).__name__, errorMsg=str(exc))

    fallback = copy.deepcopy(DEFAULT_PARSER_CONFIG)
    version = fallback.get('configVersion', 'backup')
    if log:
        log.warning('Loaded parser-config backup defaults', event='parserConfigBackupLoad',
                    component='ParserConfig', configVersion=version)
    return fallback, version, True


def applyLoggingConfig(config: dict):
    """Configure navsdk logging from the 'logging' section of a parser config."""
    section = config.get('logging', {})
    configureLogging(logDir=section.get('logDir'), console=section.get('console', True),
                     level=section.get('level', 'INFO'), utc=section.get('utc', False))
