"""
PyExplorer Logger Module

Logging for the explorer built on the standard logging package:
- Structured logging with contextual information
- Subsystem-specific loggers
- Optional console (stderr) and file output

Nothing is written anywhere unless the logging section of the
configuration enables an output, so log lines never interleave with
the interactive command output by default.

Author: YSNRFD
Version: 1.0.0
"""

import logging
import sys
import threading
from datetime import datetime
from enum import IntEnum
from pathlib import Path
from typing import Optional, Any

from colorama import Fore, Style


class LogLevel(IntEnum):
    """Log level enumeration with numeric values for comparison."""
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50
    
    @classmethod
    def from_name(cls, name: str) -> 'LogLevel':
        return cls[name.upper()]


class LogFormatter(logging.Formatter):
    """
    Custom log formatter for PyExplorer.
    
    Provides formatted output with:
    - Timestamp with millisecond precision
    - Log level with color coding (if the stream is a terminal)
    - Subsystem identification
    - Trailing {key=value} context
    """
    
    COLORS = {
        'DEBUG': Fore.CYAN,
        'INFO': Fore.GREEN,
        'WARNING': Fore.YELLOW,
        'ERROR': Fore.RED,
        'CRITICAL': Fore.MAGENTA + Style.BRIGHT,
    }
    RESET = Style.RESET_ALL
    
    def __init__(self, use_colors: bool = True, stream=None):
        super().__init__()
        self.use_colors = use_colors and self._supports_color(stream or sys.stderr)
    
    @staticmethod
    def _supports_color(stream) -> bool:
        """Check if the stream is a terminal."""
        isatty = getattr(stream, 'isatty', None)
        return bool(isatty and isatty())
    
    def format(self, record: logging.LogRecord) -> str:
        """Format a log record."""
        timestamp = datetime.fromtimestamp(record.created).strftime(
            '%Y-%m-%d %H:%M:%S.%f'
        )[:-3]
        
        level = record.levelname
        
        if self.use_colors and level in self.COLORS:
            level_display = f"{self.COLORS[level]}{level:8s}{self.RESET}"
        else:
            level_display = f"{level:8s}"
        
        components = [f"[{timestamp}]", level_display]
        
        if hasattr(record, 'subsystem'):
            components.append(f"[{record.subsystem}]")
        
        components.append(str(record.getMessage()))
        
        if hasattr(record, 'context') and record.context:
            context_str = " ".join(f"{k}={v}" for k, v in record.context.items())
            components.append(f"{{{context_str}}}")
        
        message = " ".join(components)
        
        if record.exc_info:
            message += "\n" + self.formatException(record.exc_info)
        
        return message


class Logger:
    """
    Main logging class for PyExplorer.
    
    One instance per subsystem; all of them hang off the 'pyexplorer'
    stdlib logger so handlers are configured in a single place.
    
    Example:
        >>> log = Logger('explorer')
        >>> log.info("Changed directory", context={'path': '/tmp'})
    """
    
    _instances: dict[str, 'Logger'] = {}
    _lock = threading.Lock()
    _initialized = False
    _handlers: list[logging.Handler] = []
    
    ROOT_NAME = 'pyexplorer'
    
    def __new__(cls, subsystem: str = 'explorer') -> 'Logger':
        """Get or create a logger for a subsystem."""
        with cls._lock:
            if subsystem not in cls._instances:
                instance = super().__new__(cls)
                instance._subsystem = subsystem
                instance._logger = logging.getLogger(f'{cls.ROOT_NAME}.{subsystem}')
                cls._instances[subsystem] = instance
            return cls._instances[subsystem]
    
    @property
    def subsystem(self) -> str:
        return self._subsystem
    
    @classmethod
    def initialize(
        cls,
        level: int = LogLevel.WARNING,
        log_file: Optional[str] = None,
        console_output: bool = False,
        use_colors: bool = True
    ) -> None:
        """
        Initialize the logging system.
        
        Called once at startup; later calls are ignored until shutdown().
        A log file that cannot be opened is reported on stderr and skipped.
        
        Args:
            level: Minimum log level to capture
            log_file: Optional file path for log output
            console_output: Whether to echo log lines to stderr
            use_colors: Whether to use colors in console output
        """
        with cls._lock:
            if cls._initialized:
                return
            
            root_logger = logging.getLogger(cls.ROOT_NAME)
            root_logger.setLevel(level)
            root_logger.propagate = False
            
            if console_output:
                console_handler = logging.StreamHandler(sys.stderr)
                console_handler.setLevel(level)
                console_handler.setFormatter(LogFormatter(use_colors=use_colors))
                cls._add_handler(root_logger, console_handler)
            
            if log_file:
                try:
                    file_path = Path(log_file)
                    file_path.parent.mkdir(parents=True, exist_ok=True)
                    file_handler = logging.FileHandler(log_file, encoding='utf-8')
                except OSError as e:
                    # carry on without the file handler
                    print(f"pyexplorer: cannot open log file {log_file}: {e}", file=sys.stderr)
                else:
                    file_handler.setLevel(level)
                    file_handler.setFormatter(LogFormatter(use_colors=False))
                    cls._add_handler(root_logger, file_handler)
            
            if not cls._handlers:
                cls._add_handler(root_logger, logging.NullHandler())
            
            cls._initialized = True
    
    @classmethod
    def _add_handler(cls, root_logger: logging.Logger, handler: logging.Handler) -> None:
        root_logger.addHandler(handler)
        cls._handlers.append(handler)
    
    @classmethod
    def shutdown(cls) -> None:
        """Detach and close every handler added by initialize()."""
        with cls._lock:
            root_logger = logging.getLogger(cls.ROOT_NAME)
            for handler in cls._handlers:
                root_logger.removeHandler(handler)
                handler.close()
            cls._handlers = []
            cls._initialized = False
    
    def _log(
        self,
        level: int,
        message: str,
        context: Optional[dict[str, Any]] = None,
        exc_info: Any = None
    ) -> None:
        """Internal logging method."""
        extra = {
            'subsystem': self._subsystem,
            'context': context or {},
        }
        self._logger.log(level, message, extra=extra, exc_info=exc_info)
    
    def debug(self, message: str, context: Optional[dict[str, Any]] = None) -> None:
        """Log a debug message."""
        self._log(LogLevel.DEBUG, message, context)
    
    def info(self, message: str, context: Optional[dict[str, Any]] = None) -> None:
        """Log an info message."""
        self._log(LogLevel.INFO, message, context)
    
    def warning(self, message: str, context: Optional[dict[str, Any]] = None) -> None:
        """Log a warning message."""
        self._log(LogLevel.WARNING, message, context)
    
    def error(self, message: str, context: Optional[dict[str, Any]] = None) -> None:
        """Log an error message."""
        self._log(LogLevel.ERROR, message, context)
    
    def exception(
        self,
        message: str,
        exc: Optional[BaseException] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        """Log an exception with stack trace."""
        self._log(LogLevel.ERROR, message, context, exc_info=exc or True)


def get_logger(subsystem: str) -> Logger:
    """
    Get a logger for the specified subsystem.
    
    Args:
        subsystem: Name of the subsystem (e.g., 'shell', 'explorer')
    
    Returns:
        Logger instance for the subsystem
    """
    return Logger(subsystem)
