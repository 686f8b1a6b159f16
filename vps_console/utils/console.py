"""Colorful console logging formatter."""

import logging
import re
from datetime import datetime

COLORS = {
    "reset": "\033[0m",
    "bold": "\033[1m",
    "dim": "\033[2m",
    "white": "\033[37m",
    "cyan": "\033[36m",
    "green": "\033[32m",
    "yellow": "\033[33m",
    "bright_black": "\033[90m",
    "bright_red": "\033[91m",
    "bright_green": "\033[92m",
    "bright_yellow": "\033[93m",
    "bright_blue": "\033[94m",
    "bright_magenta": "\033[95m",
    "bright_cyan": "\033[96m",
    "bg_red": "\033[41m",
}

LEVEL_COLORS = {
    "DEBUG": COLORS["bright_black"],
    "INFO": COLORS["bright_green"],
    "WARNING": COLORS["bright_yellow"],
    "ERROR": COLORS["bright_red"],
    "CRITICAL": COLORS["bg_red"] + COLORS["white"] + COLORS["bold"],
}

# Longest matching prefix wins
COMPONENT_COLORS = {
    "vps_console.server": COLORS["bright_cyan"],
    "vps_console.routes": COLORS["bright_cyan"],
    "vps_console.services.transport": COLORS["bright_magenta"],
    "vps_console.services": COLORS["bright_blue"],
    "vps_console.tools": COLORS["cyan"],
    "vps_console.middleware": COLORS["yellow"],
    "vps_console.config": COLORS["green"],
}

_ADDRESS_PATTERN = re.compile(r"([\w.-]+@[\w.\-]+:\d+)")
_DURATION_PATTERN = re.compile(r"(\d+\.?\d*ms)")


class ColorfulFormatter(logging.Formatter):
    """Log formatter with local timestamps and component highlighting."""

    def __init__(self, use_colors: bool = True) -> None:
        """Initialize the formatter.

        Args:
            use_colors: Whether to use ANSI colors.
        """
        super().__init__()
        self.use_colors = use_colors

    def _colorize(self, text: str, color: str) -> str:
        if not self.use_colors:
            return text
        return f"{color}{text}{COLORS['reset']}"

    def _component_color(self, name: str) -> str:
        matches = [prefix for prefix in COMPONENT_COLORS if name.startswith(prefix)]
        if not matches:
            return COLORS["white"]
        return COMPONENT_COLORS[max(matches, key=len)]

    def _format_timestamp(self, record: logging.LogRecord) -> str:
        dt = datetime.fromtimestamp(record.created)
        return f"{dt:%H:%M:%S}.{int(record.msecs):03d} {dt:%m/%d}"

    def _format_component(self, record: logging.LogRecord) -> str:
        name = record.name.removeprefix("vps_console.")
        return self._colorize(f"{name:<20}", self._component_color(record.name))

    def _highlight(self, message: str) -> str:
        if not self.use_colors:
            return message
        message = _ADDRESS_PATTERN.sub(
            f"{COLORS['bright_magenta']}\\1{COLORS['reset']}", message
        )
        return _DURATION_PATTERN.sub(
            f"{COLORS['bright_yellow']}\\1{COLORS['reset']}", message
        )

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record as a single aligned line."""
        sep = self._colorize("|", COLORS["dim"])
        timestamp = self._colorize(self._format_timestamp(record), COLORS["dim"])
        level = self._colorize(
            f"{record.levelname:<8}",
            LEVEL_COLORS.get(record.levelname, COLORS["white"]),
        )
        line = (
            f"{timestamp} {sep} {level} {sep} {self._format_component(record)} "
            f"{sep} {self._highlight(record.getMessage())}"
        )
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


class RequestFormatter(ColorfulFormatter):
    """Formatter that prefixes request and connection lifecycle events."""

    MARKERS = (
        (("starting", "ready"), "bright_green", ">>>"),
        (("shutting down", "shutdown"), "bright_red", "<<<"),
        (("error", "failed"), "bright_red", "!! "),
        (("desync", "slow"), "bright_yellow", "!  "),
        (("opening",), "bright_cyan", "+  "),
        (("closing", "closed"), "bright_yellow", "-  "),
    )

    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        if not self.use_colors:
            return base

        message = record.getMessage().lower()
        for keywords, color, marker in self.MARKERS:
            if any(word in message for word in keywords):
                return f"{COLORS[color]}{marker}{COLORS['reset']} {base}"
        return f"    {base}"
