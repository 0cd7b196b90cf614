"""
Structured logging for sermo.

Log entries are plain dataclasses that render either as a colored console
line or as a single JSON object, so the same call site serves a terminal and
a log collector.

Usage:
    from sermo.logging import get_logger

    logger = get_logger("transport")
    logger.info("Client ready", provider="openai")
    logger.request("POST", url="https://api.openai.com/v1/chat/completions")
    logger.response(200, size=512)
"""

import json
import sys
import time
from enum import Enum
from typing import Optional
from dataclasses import dataclass, asdict


class LogLevel(Enum):
    """Log severity levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"

    @classmethod
    def parse(cls, value: str) -> "LogLevel":
        """Map a level name to a LogLevel; WARNING is accepted as WARN."""
        name = (value or "").strip().upper()
        if name == "WARNING":
            name = "WARN"
        try:
            return cls(name)
        except ValueError:
            return cls.INFO


@dataclass
class LogEntry:
    """Structured log entry."""
    ts: float           # Unix timestamp
    module: str         # Module name
    level: str          # Log level
    msg: str            # Message
    tag: Optional[str] = None      # Semantic tag (REQUEST/RESPONSE)
    details: Optional[dict] = None  # Additional data

    def to_json(self) -> str:
        """Convert to JSON string, omitting None fields."""
        data = {k: v for k, v in asdict(self).items() if v is not None}
        return json.dumps(data, ensure_ascii=False, default=str)

    def to_console(self) -> str:
        """Format for console output with colors."""
        colors = {
            "DEBUG": "\033[90m",    # Gray
            "INFO": "\033[97m",     # White
            "WARN": "\033[93m",     # Yellow
            "ERROR": "\033[91m",    # Red
        }
        reset = "\033[0m"

        color = colors.get(self.level, "")
        timestamp = time.strftime("%H:%M:%S", time.localtime(self.ts))
        details_str = ""
        if self.details:
            details_str = " " + " ".join(f"{k}={v}" for k, v in self.details.items())

        if self.tag == "REQUEST":
            return f"{color}[{timestamp}] -> {self.msg}{details_str}{reset}"
        elif self.tag == "RESPONSE":
            return f"{color}[{timestamp}] <- {self.msg}{details_str}{reset}"
        else:
            return f"{color}[{timestamp}] [{self.level}] [{self.module}] {self.msg}{details_str}{reset}"


class StructuredLogger:
    """
    Structured logger writing to stderr.

    Args:
        module: Module name for identification
        min_level: Minimum level to log (default: INFO)
        json_format: Emit one JSON object per line instead of console text
    """

    _LEVEL_ORDER = {
        LogLevel.DEBUG: 0,
        LogLevel.INFO: 1,
        LogLevel.WARN: 2,
        LogLevel.ERROR: 3,
    }

    def __init__(
        self,
        module: str,
        min_level: LogLevel = LogLevel.INFO,
        json_format: bool = False,
    ):
        self.module = module
        self.min_level = min_level
        self.json_format = json_format

    def _should_log(self, level: LogLevel) -> bool:
        """Check if level meets minimum threshold."""
        return self._LEVEL_ORDER.get(level, 0) >= self._LEVEL_ORDER.get(self.min_level, 0)

    def log(
        self,
        level: LogLevel,
        msg: str,
        tag: Optional[str] = None,
        **extra
    ) -> None:
        """
        Log a message with optional extra fields.

        Args:
            level: Log level
            msg: Log message
            tag: Optional semantic tag
            **extra: Additional fields to include
        """
        if not self._should_log(level):
            return

        entry = LogEntry(
            ts=time.time(),
            module=self.module,
            level=level.value,
            msg=msg,
            tag=tag,
            details=extra if extra else None
        )

        line = entry.to_json() if self.json_format else entry.to_console()
        sys.stderr.write(line + "\n")
        sys.stderr.flush()

    # ========== Standard Levels ==========

    def debug(self, msg: str, **extra) -> None:
        """Log debug message."""
        self.log(LogLevel.DEBUG, msg, **extra)

    def info(self, msg: str, **extra) -> None:
        """Log info message."""
        self.log(LogLevel.INFO, msg, **extra)

    def warn(self, msg: str, **extra) -> None:
        """Log warning message."""
        self.log(LogLevel.WARN, msg, **extra)

    def error(self, msg: str, **extra) -> None:
        """Log error message."""
        self.log(LogLevel.ERROR, msg, **extra)

    # ========== HTTP-Specific Methods ==========

    def request(self, method: str, **extra) -> None:
        """Log an outgoing HTTP call."""
        self.log(LogLevel.DEBUG, method, tag="REQUEST", **extra)

    def response(self, status_code: int, **extra) -> None:
        """Log the status of an HTTP answer."""
        self.log(LogLevel.DEBUG, str(status_code), tag="RESPONSE", **extra)


def mask_secret(text: str, secret: str) -> str:
    """
    Hide every occurrence of secret in text, keeping its last 4 characters.

    Short secrets are masked entirely.
    """
    if not secret or not text:
        return text
    tail = secret[-4:] if len(secret) > 8 else ""
    return text.replace(secret, f"****{tail}")


# ========== Logger Factory ==========

_loggers: dict[str, StructuredLogger] = {}
_global_level: LogLevel = LogLevel.INFO
_global_json: bool = False


def configure_logging(level: LogLevel | str = LogLevel.INFO, json_format: bool = False) -> None:
    """Set level and output format for all current and future loggers."""
    global _global_level, _global_json
    if isinstance(level, str):
        level = LogLevel.parse(level)
    _global_level = level
    _global_json = json_format
    for logger in _loggers.values():
        logger.min_level = level
        logger.json_format = json_format


def get_logger(module: str) -> StructuredLogger:
    """
    Get or create a logger for the given module.

    Args:
        module: Module name

    Returns:
        StructuredLogger instance
    """
    if module not in _loggers:
        _loggers[module] = StructuredLogger(module, _global_level, _global_json)
    return _loggers[module]
