"""Logging configuration for the application.

Library modules call ``logging.getLogger(__name__)``, so their loggers live
under the ``src`` package. The dashboard configures handlers once, on the
``src`` logger, and every module logger propagates to them.
"""
import logging
import os
import sys
from pathlib import Path

LOG_DIR = Path(__file__).parent.parent.parent / 'logs'
LOG_FILE = 'dashboard.log'
PACKAGE_LOGGER = 'src'


def setup_logging(name: str = PACKAGE_LOGGER, log_dir: Path = LOG_DIR) -> logging.Logger:
    """Attach console and file handlers to the ``src`` package logger.

    Args:
        name: Name of the logger to return. It is created under ``src`` so
            it shares the package handlers.
        log_dir: Directory for ``dashboard.log``

    Returns:
        The requested logger
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(os.getenv('DASHBOARD_LOG_LEVEL', 'DEBUG').upper())

    # Streamlit reruns the app script; handlers are added only once
    if not package_logger.handlers:
        console = logging.StreamHandler(sys.stdout)
        console.setLevel(logging.WARNING)
        console.setFormatter(logging.Formatter('%(asctime)s - %(levelname)s - %(message)s'))
        package_logger.addHandler(console)

        try:
            log_dir.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_dir / LOG_FILE, encoding='utf-8')
        except OSError as e:
            # Read-only deployments still get console output
            package_logger.warning(f"File logging disabled: {str(e)}")
        else:
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
            package_logger.addHandler(file_handler)

    if name == PACKAGE_LOGGER or name.startswith(PACKAGE_LOGGER + '.'):
        return logging.getLogger(name)
    return logging.getLogger(f"{PACKAGE_LOGGER}.{name}")
