import logging
import logging.handlers
import os
import sys
from pathlib import Path
import structlog

from cacheprobe.internal.constants import LOG_LEVEL_ENV_VAR

_LOGGING_CONFIGURED = False

def setup_logging(log_level_name: str = "WARNING", log_file_path: Path = None, console_output: bool = True):
    """
    Configure logging for the application.
    - Uses structlog for structured logging.
    - Writes logs to a rotating file if log_file_path is provided (JSON when the name ends in '.json').
    - Console logs go to stderr so the report on stdout stays clean.
    - Log level can be set with the CACHEPROBE_LOG_LEVEL environment variable or function argument.
    """
    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    effective_log_level_name = os.environ.get(LOG_LEVEL_ENV_VAR, log_level_name).upper()
    log_level = getattr(logging, effective_log_level_name, logging.WARNING)

    foreign_pre_chain = [
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    handlers = []

    if log_file_path:
        log_file_path = Path(log_file_path)
        log_file_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file_path,
            maxBytes=5 * 1024 * 1024,  # 5 MB
            backupCount=5,
        )
        file_handler.setFormatter(structlog.stdlib.ProcessorFormatter(
            processor=structlog.processors.JSONRenderer() if log_file_path.name.endswith('.json') else structlog.dev.ConsoleRenderer(colors=False),
            foreign_pre_chain=foreign_pre_chain,
        ))
        handlers.append(file_handler)

    if console_output:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(structlog.stdlib.ProcessorFormatter(
            processor=structlog.dev.ConsoleRenderer(colors=False),
            foreign_pre_chain=foreign_pre_chain,
        ))
        handlers.append(console_handler)

    if not handlers:
        handlers.append(logging.NullHandler())

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter, # Hands the event dict to the stdlib handlers
    ]

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    logging.basicConfig(
        level=log_level,
        handlers=handlers,
        force=True,
    )
    _LOGGING_CONFIGURED = True

def get_logger(name: str | None = None):
    return structlog.get_logger(name)
