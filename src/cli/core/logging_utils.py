"""
Logging configuration for the CLI.
"""

import logging
import logging.handlers
import sys


def setup_logging(log_file=None, verbose=False):
    """
    Configure logging for CLI commands.

    Args:
        log_file: Path to log file (None = console only)
        verbose: Enable DEBUG level logging (default level is WARNING so
                 the rich console output is not interleaved with log lines)
    """
    level = logging.DEBUG if verbose else logging.WARNING

    format_str = '[%(asctime)s] %(levelname)s [%(name)s] %(message)s'
    formatter = logging.Formatter(format_str, datefmt='%Y-%m-%d %H:%M:%S')

    handlers = []

    # Console handler
    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(formatter)
    handlers.append(console)

    # File handler
    if log_file:
        try:
            file_handler = logging.handlers.RotatingFileHandler(
                log_file,
                maxBytes=10*1024*1024,  # 10MB
                backupCount=5
            )
            file_handler.setFormatter(formatter)
            handlers.append(file_handler)
        except OSError as e:
            print(f"Warning: Could not create log file {log_file}: {e}", file=sys.stderr)

    # Configure root logger
    logging.basicConfig(level=level, handlers=handlers, force=True)

    # Suppress noisy libraries
    logging.getLogger('sqlalchemy.engine').setLevel(logging.WARNING)
    logging.getLogger('faker').setLevel(logging.WARNING)
