"""
Logging configuration for the line breaking library.

Provides one place to configure:
- user-facing messages for the CLI
- developer debug logs
- structured (JSON) output and optional rotating log files
- collection of recent records into a debug archive for bug reports
"""

import json
import logging
import logging.handlers
import platform
import sys
import tempfile
import zipfile
from dataclasses import asdict, dataclass, replace
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import psutil


class LogLevel(Enum):
    """Logging levels with user-friendly names."""
    SILENT = "silent"      # Only critical errors
    MINIMAL = "minimal"    # Bare messages
    NORMAL = "normal"      # Standard user logging
    VERBOSE = "verbose"    # Timings and details
    DEBUG = "debug"        # Full debugging information
    TRACE = "trace"        # Debugging plus per-token decisions


DEBUG_LEVELS = (LogLevel.DEBUG, LogLevel.TRACE)

DECISION_LOGGER = 'unibreak.core.engine'

_RESERVED_RECORD_FIELDS = frozenset({
    'name', 'msg', 'args', 'levelname', 'levelno', 'pathname', 'filename', 'module',
    'lineno', 'funcName', 'created', 'msecs', 'relativeCreated', 'thread', 'threadName',
    'processName', 'process', 'stack_info', 'exc_info', 'exc_text', 'taskName',
})


@dataclass
class LogConfig:
    """Configuration for logging behavior."""
    level: LogLevel = LogLevel.NORMAL
    console_output: bool = True
    file_output: bool = False
    log_file: Optional[Path] = None
    collect_performance: bool = True
    format_json: bool = False
    include_module_names: bool = True
    max_file_size: int = 10 * 1024 * 1024
    backup_count: int = 3

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        result = asdict(self)
        result['level'] = self.level.value
        result['log_file'] = str(self.log_file) if self.log_file else None
        return result


class BreakLogger:
    """Process-wide logging manager for the library."""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self._initialized = True
        self.config = LogConfig()
        self.log_records: List[Dict[str, Any]] = []
        self.performance_logs: List[Dict[str, Any]] = []
        self.session_id = datetime.now().strftime("%Y%m%d_%H%M%S")
        self._handlers: List[logging.Handler] = []
        self._temp_dir: Optional[Path] = None

    def configure(self, config: Optional[LogConfig] = None, **kwargs) -> None:
        """
        Configure logging behavior.

        Args:
            config: Complete configuration to use
            **kwargs: Individual fields overriding ``config``
        """
        base = config or self.config
        if isinstance(kwargs.get('level'), str):
            kwargs['level'] = LogLevel(kwargs['level'].lower())
        if kwargs.get('log_file'):
            kwargs['log_file'] = Path(kwargs['log_file'])
        self.config = replace(base, **kwargs)
        self._install_handlers()

    def _install_handlers(self) -> None:
        """Replace the handlers owned by this manager on the package logger."""
        package_logger = logging.getLogger('unibreak')
        for handler in self._handlers:
            package_logger.removeHandler(handler)
            handler.close()
        self._handlers = []

        level = self._python_level(self.config.level)
        package_logger.setLevel(level)
        # Per-token break decisions are only logged at trace level
        decision_level = logging.NOTSET if self.config.level is LogLevel.TRACE else logging.INFO
        logging.getLogger(DECISION_LOGGER).setLevel(decision_level)
        formatter = JsonFormatter() if self.config.format_json else self._text_formatter()

        if self.config.console_output:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setFormatter(formatter)
            console_handler.setLevel(level)
            self._handlers.append(console_handler)

        if self.config.file_output and self.config.log_file:
            self.config.log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.handlers.RotatingFileHandler(
                self.config.log_file,
                maxBytes=self.config.max_file_size,
                backupCount=self.config.backup_count,
                encoding='utf-8'
            )
            file_handler.setFormatter(formatter)
            file_handler.setLevel(level)
            self._handlers.append(file_handler)

        if self.config.level in DEBUG_LEVELS:
            collection_handler = LogCollectionHandler(self)
            collection_handler.setLevel(logging.DEBUG)
            self._handlers.append(collection_handler)

        for handler in self._handlers:
            package_logger.addHandler(handler)

    def get_logger(self, name: str) -> logging.Logger:
        """Get a logger for ``name`` (usually ``__name__``)."""
        return logging.getLogger(name)

    def user_info(self, message: str, **kwargs) -> None:
        """Log user-facing informational message."""
        if self.config.level is not LogLevel.SILENT:
            self.get_logger('unibreak.user').info(message, extra={'user_message': True, **kwargs})

    def user_success(self, message: str, **kwargs) -> None:
        """Log user-facing success message."""
        if self.config.level is not LogLevel.SILENT:
            self.get_logger('unibreak.user').info(f"OK: {message}", extra={'user_message': True, **kwargs})

    def user_warning(self, message: str, **kwargs) -> None:
        """Log user-facing warning message."""
        self.get_logger('unibreak.user').warning(message, extra={'user_message': True, **kwargs})

    def user_error(self, message: str, **kwargs) -> None:
        """Log user-facing error message."""
        self.get_logger('unibreak.user').error(message, extra={'user_message': True, **kwargs})

    def debug_operation(self, operation: str, details: Dict[str, Any]) -> None:
        """Log detailed operation information for debugging."""
        if self.config.level in DEBUG_LEVELS:
            self.get_logger('unibreak.debug').debug(operation, extra={'operation': operation, 'details': details})

    def performance_log(self, operation: str, duration: float, **kwargs) -> None:
        """Record the duration of an operation."""
        if not self.config.collect_performance:
            return
        perf_data = {
            'timestamp': datetime.now().isoformat(),
            'operation': operation,
            'duration_seconds': duration,
            'session_id': self.session_id,
            **kwargs
        }
        self.performance_logs.append(perf_data)
        if self.config.level in (LogLevel.VERBOSE,) + DEBUG_LEVELS:
            self.get_logger('unibreak.performance').info(f"{operation}: {duration:.3f}s", extra=perf_data)

    def enable_debug_mode(self, log_file: Optional[Path] = None) -> Path:
        """
        Switch to debug logging.

        Returns:
            Directory where debug archives will be written
        """
        self.configure(LogConfig(
            level=LogLevel.DEBUG,
            file_output=bool(log_file),
            log_file=log_file,
            collect_performance=True,
        ))
        self.user_info(f"Debug mode enabled (session {self.session_id})")
        return self._debug_dir()

    def collect_debug_info(self) -> Path:
        """
        Write system info, configuration and recent records to a zip file.

        Returns:
            Path to the created archive
        """
        zip_path = self._debug_dir() / f"unibreak_debug_{self.session_id}.zip"
        with zipfile.ZipFile(zip_path, 'w', zipfile.ZIP_DEFLATED) as zipf:
            zipf.writestr("system_info.json", json.dumps(self._system_info(), indent=2, default=str))
            zipf.writestr("config.json", json.dumps(self.config.to_dict(), indent=2))
            if self.log_records:
                zipf.writestr(
                    "recent_logs.jsonl",
                    "".join(json.dumps(record, default=str) + "\n" for record in self.log_records[-1000:])
                )
            if self.performance_logs:
                zipf.writestr("performance_logs.json", json.dumps(self.performance_logs, indent=2))
        return zip_path

    def _debug_dir(self) -> Path:
        if not self._temp_dir:
            self._temp_dir = Path(tempfile.mkdtemp(prefix="unibreak_debug_"))
        return self._temp_dir

    def _python_level(self, level: LogLevel) -> int:
        mapping = {
            LogLevel.SILENT: logging.CRITICAL,
            LogLevel.MINIMAL: logging.WARNING,
            LogLevel.NORMAL: logging.INFO,
            LogLevel.VERBOSE: logging.INFO,
            LogLevel.DEBUG: logging.DEBUG,
            LogLevel.TRACE: logging.DEBUG,
        }
        return mapping[level]

    def _text_formatter(self) -> logging.Formatter:
        if self.config.level is LogLevel.MINIMAL:
            fmt = '%(message)s'
        elif self.config.include_module_names and self.config.level in DEBUG_LEVELS:
            fmt = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        else:
            fmt = '%(asctime)s - %(levelname)s - %(message)s'
        return logging.Formatter(fmt, datefmt='%Y-%m-%d %H:%M:%S')

    def _system_info(self) -> Dict[str, Any]:
        return {
            'platform': platform.platform(),
            'python_version': sys.version,
            'unibreak_version': getattr(sys.modules.get('unibreak'), '__version__', 'unknown'),
            'timestamp': datetime.now().isoformat(),
            'session_id': self.session_id,
            'memory': psutil.virtual_memory()._asdict(),
            'cpu_count': psutil.cpu_count(),
        }


def _extra_fields(record: logging.LogRecord) -> Dict[str, Any]:
    return {k: v for k, v in record.__dict__.items() if k not in _RESERVED_RECORD_FIELDS}


class LogCollectionHandler(logging.Handler):
    """Keeps recent records in memory for debug archives."""

    def __init__(self, manager: BreakLogger, max_records: int = 2000):
        super().__init__()
        self.manager = manager
        self.max_records = max_records

    def emit(self, record: logging.LogRecord) -> None:
        log_data = {
            'timestamp': datetime.fromtimestamp(record.created).isoformat(),
            'level': record.levelname,
            'module': record.name,
            'message': record.getMessage(),
            'line_number': record.lineno,
        }
        extra = _extra_fields(record)
        if extra:
            log_data['extra'] = extra
        self.manager.log_records.append(log_data)
        if len(self.manager.log_records) > self.max_records:
            del self.manager.log_records[:-self.max_records // 2]


class JsonFormatter(logging.Formatter):
    """JSON formatter for structured logging output."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            'timestamp': datetime.fromtimestamp(record.created).isoformat(),
            'level': record.levelname,
            'module': record.name,
            'message': record.getMessage(),
        }
        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)
        log_data.update(_extra_fields(record))
        return json.dumps(log_data, default=str)


# Global manager instance
_logger = BreakLogger()


def get_logger(name: str = 'unibreak') -> logging.Logger:
    """Get a logger for the library (pass ``__name__``)."""
    return _logger.get_logger(name)


def configure_logging(level: Union[str, LogLevel] = LogLevel.NORMAL, **kwargs) -> None:
    """
    Configure library-wide logging.

    Args:
        level: Logging level
        **kwargs: Additional ``LogConfig`` fields
    """
    if isinstance(level, str):
        level = LogLevel(level.lower())
    _logger.configure(level=level, **kwargs)


def user_info(message: str, **kwargs) -> None:
    _logger.user_info(message, **kwargs)


def user_success(message: str, **kwargs) -> None:
    _logger.user_success(message, **kwargs)


def user_warning(message: str, **kwargs) -> None:
    _logger.user_warning(message, **kwargs)


def user_error(message: str, **kwargs) -> None:
    _logger.user_error(message, **kwargs)


def debug_operation(operation: str, details: Dict[str, Any]) -> None:
    _logger.debug_operation(operation, details)


def performance_log(operation: str, duration: float, **kwargs) -> None:
    _logger.performance_log(operation, duration, **kwargs)


def enable_debug_mode(log_file: Optional[Union[str, Path]] = None) -> Path:
    """Enable comprehensive debug logging."""
    if isinstance(log_file, str):
        log_file = Path(log_file)
    return _logger.enable_debug_mode(log_file)


def collect_debug_info() -> Path:
    """Collect debug information into a zip archive for bug reports."""
    return _logger.collect_debug_info()
