"""
Logging Configuration
"""
import logging
import logging.handlers
import sys
import json
from pathlib import Path
from typing import Optional, TextIO
from datetime import datetime, timezone

from brandstorm_domains.config.settings import settings


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging"""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON

        Args:
            record: Log record

        Returns:
            JSON formatted string
        """
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno
        }

        if record.exc_info:
            log_data['exception'] = {
                'type': record.exc_info[0].__name__,
                'message': str(record.exc_info[1]),
                'traceback': self.formatException(record.exc_info)
            }

        return json.dumps(log_data, ensure_ascii=False)


class ColoredFormatter(logging.Formatter):
    """Colored console formatter for development"""

    # ANSI color codes
    COLORS = {
        'DEBUG': '\033[36m',     # Cyan
        'INFO': '\033[32m',      # Green
        'WARNING': '\033[33m',   # Yellow
        'ERROR': '\033[31m',     # Red
        'CRITICAL': '\033[35m'   # Magenta
    }

    RESET = '\033[0m'
    BOLD = '\033[1m'

    def format(self, record: logging.LogRecord) -> str:
        levelname = record.levelname
        if levelname in self.COLORS:
            record.levelname = (
                f"{self.COLORS[levelname]}{self.BOLD}"
                f"{levelname:8}"
                f"{self.RESET}"
            )

        record.timestamp = datetime.now().strftime('%H:%M:%S.%f')[:-3]

        try:
            return super().format(record)
        finally:
            record.levelname = levelname


class LoggingConfig:
    """Centralized logging configuration"""

    DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    CONSOLE_FORMAT_DEV = (
        "%(timestamp)s │ %(levelname)-17s │ "
        "%(name)-40s │ %(message)s"
    )

    FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @classmethod
    def setup(
        cls,
        log_level: Optional[str] = None,
        log_file: Optional[Path] = None,
        stream: Optional[TextIO] = None,
        enable_json: Optional[bool] = None
    ) -> None:
        """Setup logging configuration

        Args:
            log_level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            log_file: Optional path to a rotating log file
            stream: Console stream (stdout by default; stdio transports need stderr)
            enable_json: Enable JSON formatting (auto-detected if None)
        """
        if log_level is None:
            log_level = "DEBUG" if settings.debug else settings.log_level

        numeric_level = getattr(logging, log_level.upper(), logging.INFO)

        if enable_json is None:
            enable_json = settings.is_production()

        if log_file is None and settings.log_file:
            log_file = Path(settings.log_file)

        root_logger = logging.getLogger()
        root_logger.setLevel(numeric_level)
        root_logger.handlers.clear()

        cls._setup_console_handler(
            root_logger, numeric_level, enable_json, stream or sys.stdout
        )

        if log_file is not None:
            cls._setup_file_handler(root_logger, numeric_level, log_file, enable_json)

        cls._configure_third_party_loggers(numeric_level)

        logger = logging.getLogger(__name__)
        logger.info(
            f"✅ Logging configured: level={log_level}, "
            f"env={settings.app_env}, json={enable_json}"
        )

    @classmethod
    def _setup_console_handler(
        cls,
        logger: logging.Logger,
        level: int,
        use_json: bool,
        stream: TextIO
    ) -> None:
        console_handler = logging.StreamHandler(stream)
        console_handler.setLevel(level)

        if use_json:
            console_handler.setFormatter(JSONFormatter())
        elif settings.is_development() and stream.isatty():
            console_handler.setFormatter(ColoredFormatter(cls.CONSOLE_FORMAT_DEV))
        else:
            console_handler.setFormatter(logging.Formatter(cls.DEFAULT_FORMAT))

        logger.addHandler(console_handler)

    @classmethod
    def _setup_file_handler(
        cls,
        logger: logging.Logger,
        level: int,
        log_file: Path,
        use_json: bool
    ) -> None:
        """Setup file handler with rotation

        Args:
            logger: Logger instance
            level: Log level
            log_file: Log file path
            use_json: Use JSON formatting
        """
        log_file.parent.mkdir(parents=True, exist_ok=True)

        # 10MB max, keep 5 backups
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setLevel(level)

        if use_json:
            file_handler.setFormatter(JSONFormatter())
        else:
            file_handler.setFormatter(logging.Formatter(cls.FILE_FORMAT))

        logger.addHandler(file_handler)

    @classmethod
    def _configure_third_party_loggers(cls, level: int) -> None:
        noisy_loggers = [
            "httpx",
            "httpcore",
            "aiohttp",
            "asyncio",
            "openai",
            "mcp",
            "uvicorn.access",
        ]

        for logger_name in noisy_loggers:
            logging.getLogger(logger_name).setLevel(
                logging.WARNING if level <= logging.INFO else level
            )

        logging.getLogger("uvicorn").setLevel(level)
        logging.getLogger("uvicorn.error").setLevel(level)
        logging.getLogger("fastapi").setLevel(level)


def setup_logging(
    log_level: Optional[str] = None,
    log_file: Optional[str] = None,
    **kwargs
) -> None:
    """Convenience function to setup logging

    Args:
        log_level: Log level
        log_file: Log file path
        **kwargs: Additional configuration
    """
    LoggingConfig.setup(
        log_level=log_level,
        log_file=Path(log_file) if log_file else None,
        **kwargs
    )

