"""
Package-wide logger for pycircfit.

The numeric routines report their intermediate decisions (collinearity stages,
degenerate fits, window counts) at DEBUG level. The default logger only prints
INFO and above, so nothing is shown unless a caller installs a verbose one.
"""
import os
import sys
import time
from typing import Optional, Union
from enum import Enum, auto


class LogLevel(Enum):
    """Log levels for controlling verbosity."""
    DEBUG = auto()
    INFO = auto()
    WARNING = auto()
    ERROR = auto()
    CRITICAL = auto()


_MODES = ('console', 'file', 'both')


class CircfitLogger:
    """
    Logger that writes to the console, a file, or both, each sink with its
    own minimum level.
    """
    def __init__(
        self,
        mode: str = 'console',
        log_file: Optional[str] = None,
        console_level: LogLevel = LogLevel.INFO,
        file_level: LogLevel = LogLevel.DEBUG,
        include_timestamp: bool = True
    ):
        """
        Args:
            mode: 'console', 'file', or 'both'
            log_file: Path to log file (required if mode is 'file' or 'both')
            console_level: Minimum level printed to the console
            file_level: Minimum level appended to the log file
            include_timestamp: Prefix each line with the local time
        """
        if mode not in _MODES:
            raise ValueError(f"mode must be one of {', '.join(_MODES)}")
        if mode in ('file', 'both') and not log_file:
            raise ValueError("log_file must be provided when mode is 'file' or 'both'")

        self.mode = mode
        self.log_file = log_file
        self.console_level = console_level
        self.file_level = file_level
        self.include_timestamp = include_timestamp

        if self.log_file and mode != 'console':
            log_dir = os.path.dirname(self.log_file)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)
            # Start every session with an empty file
            with open(self.log_file, 'w'):
                pass

    @property
    def _to_console(self) -> bool:
        return self.mode in ('console', 'both')

    @property
    def _to_file(self) -> bool:
        return self.mode in ('file', 'both')

    def isEnabledFor(self, level: LogLevel) -> bool:
        """True if a message at ``level`` would reach at least one sink."""
        return ((self._to_console and level.value >= self.console_level.value) or
                (self._to_file and level.value >= self.file_level.value))

    def _format_message(self, message: str, level: LogLevel) -> str:
        stamp = f"[{time.strftime('%Y-%m-%d %H:%M:%S')}] " if self.include_timestamp else ""
        return f"{stamp}[{level.name}] {message}"

    def log(self, message: str, level: LogLevel = LogLevel.INFO) -> None:
        """
        Log a message with the specified level.

        Args:
            message: The message to log
            level: The log level (default: INFO)
        """
        if not self.isEnabledFor(level):
            return
        line = self._format_message(message, level)
        if self._to_console and level.value >= self.console_level.value:
            stream = sys.stderr if level.value >= LogLevel.WARNING.value else sys.stdout
            print(line, file=stream)
        if self._to_file and level.value >= self.file_level.value:
            with open(self.log_file, 'a') as f:
                f.write(line + '\n')

    def debug(self, message: str) -> None:
        self.log(message, LogLevel.DEBUG)

    def info(self, message: str) -> None:
        self.log(message, LogLevel.INFO)

    def warning(self, message: str) -> None:
        self.log(message, LogLevel.WARNING)

    def error(self, message: str) -> None:
        self.log(message, LogLevel.ERROR)

    def critical(self, message: str) -> None:
        self.log(message, LogLevel.CRITICAL)

    def __call__(self, message: str, level: Union[str, LogLevel] = LogLevel.INFO) -> None:
        """Shorthand for ``log``; ``level`` may also be a name such as 'debug'."""
        if isinstance(level, str):
            level = getattr(LogLevel, level.upper(), LogLevel.INFO)
        self.log(message, level)


DEFAULT_LOGGER = CircfitLogger(mode='console')


def get_logger(name: Optional[str] = None) -> CircfitLogger:
    """
    Return the package logger. ``name`` is accepted for compatibility with the
    standard logging module and ignored.
    """
    return DEFAULT_LOGGER


def set_logger(logger: Optional[CircfitLogger]) -> None:
    """
    Replace the package logger; ``None`` restores a default console logger.
    """
    global DEFAULT_LOGGER
    if logger is None:
        DEFAULT_LOGGER = CircfitLogger(mode='console')
    elif not isinstance(logger, CircfitLogger):
        raise ValueError("Logger must be an instance of CircfitLogger")
    else:
        DEFAULT_LOGGER = logger
