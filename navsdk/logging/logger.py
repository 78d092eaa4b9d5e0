"""
Hierarchical structured logger with automatic name detection.

Features:
- Auto-detects logger hierarchy from call stack (computed once, cached)
- Console output by default, rotating log files when a logDir is configured
- Structured field logging: log.info("Message", key=value)

Usage:
    from navsdk.logging import getLogger

    # Pattern 1: Class-level (compute once in __init__)
    class Nmea:
        def __init__(self):
            self.log = getLogger()  # Auto-detects hierarchy ONCE

        def parse(self, sentence):
            self.log.debug("Rejected", sentence=sentence)

    # Pattern 2: Module-level (compute once at import)
    log = getLogger()

    def loadParserConfig(path):
        log.info("Loaded", configPath=path)
"""

# Imports
import inspect, logging, logging.handlers, socket
from pathlib import Path
from typing import Optional
from datetime import datetime, timezone as tz


# Global state
_hostname = socket.gethostname()
_configured = False
_fileHandlers = {}  # Singleton cache: logPath -> handler
_config = {
    'logDir': None,                 # None = console only
    'maxBytes': 10_000_000,         # 10 MB per log file before rotation
    'backupCount': 5,
    'console': True,
    'level': logging.INFO,
    'utc': False
}


def configureLogging(logDir: Optional[str] = None, maxBytes: int = 10_000_000,
                     backupCount: int = 5, console: bool = True,
                     level: str = 'INFO', utc: bool = False):
    """
    Configure global logging settings (call once at app startup).

    Args:
        logDir: Directory for log files (default: None, no log files)
        maxBytes: Maximum size per log file before rotation (default: 10MB)
        backupCount: Number of backup files to keep per app (default: 5)
        console: Also log to console (default: True)
        level: Minimum log level (default: 'INFO')
        utc: Use UTC timestamps (default: False, uses local time)
    """
    global _configured, _config

    _config.update({'logDir': logDir, 'maxBytes': maxBytes, 'backupCount': backupCount,
                    'console': console, 'level': getattr(logging, level.upper()), 'utc': utc})

    if logDir is not None:
        Path(logDir).mkdir(parents=True, exist_ok=True)
    _configured = True


def _autoDetectName() -> str:
    """Auto-detect logger name from call stack. Returns hierarchy like: 'parsers.registry.SentenceRegistry'"""

    frame = inspect.currentframe()
    try:
        # Walk up the stack to find the first frame outside of this logging package
        current = frame
        while current is not None:
            current = current.f_back
            if current is None:
                break

            module = inspect.getmodule(current)
            if module is None:
                continue

            moduleName = module.__name__

            if moduleName.startswith('navsdk.logging'):
                continue

            # Skip Python's import machinery
            if moduleName.startswith('importlib') or moduleName == '__main__':
                continue

            parts = moduleName.split('.')

            # Remove 'navsdk' prefix if present (it's just a package wrapper)
            if parts and parts[0] == 'navsdk':
                parts = parts[1:]

            # Get class name if called from within a class method
            className = None
            if current.f_locals:
                if 'self' in current.f_locals:
                    className = current.f_locals['self'].__class__.__name__
                elif 'cls' in current.f_locals:
                    className = current.f_locals['cls'].__name__

            hierarchy = '.'.join(parts) if parts else 'unknown'
            if className:
                hierarchy = f"{hierarchy}.{className}"

            return hierarchy if hierarchy else 'unknown'

        return 'unknown'
    finally:
        del frame


class StructuredFormatter(logging.Formatter):
    """Formatter that includes hostname and structured fields.
    Format: timestamp - hostname - logger.name - level - message [field1=value1, field2=value2]"""

    _excluded = {
        'name', 'msg', 'args', 'created', 'filename', 'funcName',
        'levelname', 'levelno', 'lineno', 'module', 'msecs',
        'message', 'pathname', 'process', 'processName',
        'relativeCreated', 'thread', 'threadName', 'exc_info',
        'exc_text', 'stack_info', 'hostname', 'asctime', 'taskName'
    }

    def __init__(self, fmt=None, datefmt=None, utc=False):
        super().__init__(fmt, datefmt)
        self.utc = utc

    def formatTime(self, record, datefmt=None):
        """Override to support UTC if configured."""
        if self.utc:
            ct = datetime.fromtimestamp(record.created, tz=tz.utc)
        else:
            ct = datetime.fromtimestamp(record.created)

        if datefmt:
            s = ct.strftime(datefmt)
        else:
            s = ct.strftime("%Y-%m-%d %H:%M:%S")
            s = f"{s},{int(record.msecs):03d}"
        return s

    def format(self, record):
        record.hostname = _hostname

        structuredFields = [f"{key}={value}" for key, value in record.__dict__.items()
                            if key not in self._excluded and not key.startswith('_')]

        # Don't modify record.msg for other handlers, restore after formatting
        originalMsg = record.msg
        if structuredFields:
            record.msg = f"{originalMsg} [{', '.join(structuredFields)}]"

        result = super().format(record)

        record.msg = originalMsg
        return result


def getLogger(name: Optional[str] = None, separateFile: bool = False) -> logging.Logger:
    """
    Get or create a logger with automatic hierarchy detection.

    Stack inspection happens ONCE during getLogger(); keep the returned
    logger on the instance or module.

    Args:
        name: Logger name (auto-detected from call stack if None)
        separateFile: If True, creates separate log file for this logger (default: False)

    Returns:
        logging.Logger whose level methods accept structured fields as **kwargs
    """
    global _configured
    if not _configured:
        configureLogging()

    if name is None:
        name = _autoDetectName()

    logger = logging.getLogger(name)

    # Disable propagation to avoid duplicate messages
    logger.propagate = False

    if not logger.handlers and not hasattr(logger, '_configured_by_navsdk'):
        logger.setLevel(_config['level'])

        if _config['logDir'] is not None:
            # Use top-level app name (e.g., 'parsers' from 'parsers.registry.SentenceRegistry')
            logFilename = f"{name}.log" if separateFile else f"{name.split('.')[0]}.log"
            logPath = str(Path(_config['logDir']) / logFilename)

            if logPath not in _fileHandlers:
                fileHandler = logging.handlers.RotatingFileHandler(
                    logPath,
                    maxBytes=_config['maxBytes'],
                    backupCount=_config['backupCount'],
                    encoding='utf-8'
                )
                fileHandler.setLevel(_config['level'])
                fileHandler.setFormatter(StructuredFormatter(
                    '%(asctime)s - %(hostname)s - %(name)s - %(levelname)s - %(message)s',
                    utc=_config['utc']
                ))
                _fileHandlers[logPath] = fileHandler

            logger.addHandler(_fileHandlers[logPath])

        if _config['console']:
            consoleHandler = logging.StreamHandler()
            consoleHandler.setLevel(_config['level'])
            consoleHandler.setFormatter(StructuredFormatter(
                '%(name)s - %(levelname)s - %(message)s',
                utc=_config['utc']
            ))
            logger.addHandler(consoleHandler)

        logger._configured_by_navsdk = True

    return _wrapLogger(logger)


def _wrapLogger(logger: logging.Logger) -> logging.Logger:
    """
    Wrap a standard logger so level methods accept structured fields as **kwargs.

    This allows: log.info("Message", field1=value1, field2=value2)
    Instead of: log.info("Message", extra={'field1': value1, 'field2': value2})
    """
    if hasattr(logger, '_is_wrapped'):
        return logger

    def wrap(original):
        def method(msg, *args, **kwargs):
            # exc_info is a reserved logging param
            excInfo = kwargs.pop('exc_info', False)
            if kwargs:
                original(msg, *args, extra=kwargs, exc_info=excInfo)
            else:
                original(msg, *args, exc_info=excInfo)
        method.__doc__ = f"Log {original.__name__} message with structured fields."
        return method

    logger.debug = wrap(logger.debug)
    logger.info = wrap(logger.info)
    logger.warning = wrap(logger.warning)
    logger.error = wrap(logger.error)
    logger.critical = wrap(logger.critical)
    logger._is_wrapped = True

    return logger
