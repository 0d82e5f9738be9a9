import logging
import sys
from pathlib import Path
from typing import Optional

import structlog

from src.config.config import Config


class CustomFormatter(logging.Formatter):
    """Custom formatter that implements the required format: [yyyy-mm-dd hh:mm:ss] [log_type] [class_name]: {message}"""

    def format(self, record):
        # Extract class name from the logger name
        class_name = record.name.split('.')[-1] if '.' in record.name else record.name

        # Format timestamp as yyyy-mm-dd hh:mm:ss
        timestamp = self.formatTime(record, '%Y-%m-%d %H:%M:%S')

        # Format the log message
        formatted_message = f"[{timestamp}] [{record.levelname}] [{class_name}]: {record.getMessage()}"

        # Add exception info if present
        if record.exc_info:
            formatted_message += '\n' + self.formatException(record.exc_info)

        return formatted_message


def get_log_file_path(settings: Config) -> Path:
    """Get the log file path based on environment, creating the directory if needed."""
    logs_dir = settings.get_logs_directory()
    logs_dir.mkdir(exist_ok=True)
    return logs_dir / f"weather_agent_{settings.environment}.log"


def setup_logging(settings: Config, level: Optional[str] = None):
    """
    Configure logging for the command line agent.

    Log records use the custom format
    [yyyy-mm-dd hh:mm:ss] [log_type] [class_name]: {message}
    and go to stderr, keeping stdout for the agent's answer. structlog
    events are rendered as key=value pairs and handed to the stdlib handlers.

    Args:
        settings: Configuration to read the level and file options from
        level: Overrides the configured log level (e.g. from --verbose)
    """
    log_level = getattr(logging, (level or settings.log_level).upper())

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Clear any existing handlers
    root_logger.handlers.clear()

    formatter = CustomFormatter()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    log_file_path = None
    if settings.log_to_file:
        log_file_path = get_log_file_path(settings)
        file_handler = logging.FileHandler(log_file_path, encoding='utf-8')
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(max(log_level, logging.WARNING))

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.format_exc_info,
            structlog.processors.KeyValueRenderer(key_order=["event"], drop_missing=True),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    logger = logging.getLogger(__name__)
    logger.debug(f"Logging configured - level {logging.getLevelName(log_level)}, file {log_file_path}")
