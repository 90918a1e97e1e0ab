"""
Logging utilities for the hand gesture classifier.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Dict, Any
from datetime import datetime
import json


class Logger:
    """Logging wrapper with console, file and JSON outputs."""

    def __init__(
        self,
        name: str = "hand_gesture_classifier",
        log_dir: str = "logs",
        level: str = "INFO",
        console_output: bool = True,
        file_output: bool = True,
        json_output: bool = False
    ):
        """
        Initialize the logger.

        Args:
            name: Logger name
            log_dir: Directory for log files
            level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            console_output: Enable console output
            file_output: Enable file output
            json_output: Enable JSON formatted output
        """
        self.name = name
        self.log_dir = Path(log_dir)

        self.logger = logging.getLogger(name)
        self.logger.setLevel(getattr(logging, level.upper()))

        # Clear existing handlers
        self.logger.handlers.clear()

        self.console_formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%H:%M:%S'
        )

        self.file_formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        if console_output:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setFormatter(self.console_formatter)
            self.logger.addHandler(console_handler)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        if file_output or json_output:
            self.log_dir.mkdir(parents=True, exist_ok=True)

        if file_output:
            log_file = self.log_dir / f"{name}_{timestamp}.log"
            file_handler = logging.FileHandler(log_file)
            file_handler.setFormatter(self.file_formatter)
            self.logger.addHandler(file_handler)

        # JSON handler for structured logging
        if json_output:
            json_file = self.log_dir / f"{name}_{timestamp}.json"
            self.json_handler = JsonFileHandler(json_file)
            self.logger.addHandler(self.json_handler)

    @classmethod
    def from_config(cls, name: str, config: Optional[Dict[str, Any]] = None) -> "Logger":
        """Create a logger from the ``logging`` config section."""
        config = config or {}
        return cls(
            name=name,
            log_dir=config.get("log_dir", "logs"),
            level=config.get("level", "INFO"),
            console_output=config.get("console_output", True),
            file_output=config.get("file_output", False),
            json_output=config.get("json_output", False)
        )

    def debug(self, message: str, **kwargs) -> None:
        """Log debug message."""
        self.logger.debug(message, extra=kwargs)

    def info(self, message: str, **kwargs) -> None:
        """Log info message."""
        self.logger.info(message, extra=kwargs)

    def warning(self, message: str, **kwargs) -> None:
        """Log warning message."""
        self.logger.warning(message, extra=kwargs)

    def error(self, message: str, **kwargs) -> None:
        """Log error message."""
        self.logger.error(message, extra=kwargs)

    def critical(self, message: str, **kwargs) -> None:
        """Log critical message."""
        self.logger.critical(message, extra=kwargs)

    def log_config(self, config: Dict[str, Any]) -> None:
        """Log configuration parameters; the JSON output records the full config."""
        classifier = config.get("classifier", {})
        self.info(
            "Configuration loaded: "
            f"pip_margin={classifier.get('pip_margin')}, "
            f"mcp_margin={classifier.get('mcp_margin')}, "
            f"thumb_margin={classifier.get('thumb_margin')}",
            config=config
        )

    def log_frame_stats(self, stats: Dict[str, Any]) -> None:
        """Log frame processing statistics."""
        gestures = ", ".join(f"{name}={count}" for name, count in sorted(stats.get("gesture_counts", {}).items()))
        self.info(
            f"Frame stats: total={stats['total_frames']}, "
            f"classified={stats['classified_frames']}, "
            f"no_hand={stats['no_hand_frames']}, "
            f"invalid={stats['invalid_frames']}"
            + (f", gestures: {gestures}" if gestures else "")
        )


class JsonFileHandler(logging.Handler):
    """Custom handler for JSON formatted logs."""

    def __init__(self, filename: str):
        super().__init__()
        self.filename = filename

    def emit(self, record):
        """Emit a log record in JSON format."""
        log_entry = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno
        }

        # Add extra fields
        for key, value in record.__dict__.items():
            if key not in log_entry:
                log_entry[key] = value

        with open(self.filename, 'a') as f:
            f.write(json.dumps(log_entry, default=str) + '\n')
