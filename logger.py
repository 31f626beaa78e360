"""Logging configuration module for the token top-up report application."""
import os
import logging
from logging.handlers import RotatingFileHandler
import config

# Console handler installed on the root logger by the last setup
_console_handler = None


def _reset_handlers(logger):
    """Close and detach handlers left over from a previous setup."""
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def setup_logging():
    """Set up logging with appropriate handlers and formatters."""
    global _console_handler

    # Ensure logs directory exists
    os.makedirs(config.LOGS_FOLDER, exist_ok=True)

    # Log file paths
    app_log_path = os.path.join(config.LOGS_FOLDER, 'app.log')
    error_log_path = os.path.join(config.LOGS_FOLDER, 'error.log')
    debug_log_path = os.path.join(config.LOGS_FOLDER, 'debug.log')

    # Log formatters
    detailed_formatter = logging.Formatter(
        '%(asctime)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(funcName)s - %(message)s'
    )
    simple_formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(message)s')

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if config.DEBUG else logging.INFO)
    if _console_handler is not None:
        root_logger.removeHandler(_console_handler)

    # Console handler for important messages
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(simple_formatter)
    console_handler.setLevel(logging.INFO)
    root_logger.addHandler(console_handler)
    _console_handler = console_handler

    # 1. App Logger (INFO level)
    app_logger = logging.getLogger('app')
    _reset_handlers(app_logger)
    app_logger.setLevel(logging.INFO)
    app_handler = RotatingFileHandler(
        app_log_path, maxBytes=config.APP_LOG_MAX_BYTES, backupCount=config.APP_LOG_BACKUPS
    )
    app_handler.setFormatter(simple_formatter)
    app_handler.setLevel(logging.INFO)
    app_logger.addHandler(app_handler)

    # 2. Error Logger (ERROR level)
    error_logger = logging.getLogger('error')
    _reset_handlers(error_logger)
    error_logger.setLevel(logging.ERROR)
    error_handler = RotatingFileHandler(
        error_log_path, maxBytes=config.ERROR_LOG_MAX_BYTES, backupCount=config.ERROR_LOG_BACKUPS
    )
    error_handler.setFormatter(detailed_formatter)
    error_handler.setLevel(logging.ERROR)
    error_logger.addHandler(error_handler)

    # 3. Debug Logger (DEBUG level)
    debug_logger = logging.getLogger('debug')
    _reset_handlers(debug_logger)
    debug_logger.setLevel(logging.DEBUG if config.DEBUG else logging.INFO)
    debug_handler = RotatingFileHandler(
        debug_log_path, maxBytes=config.DEBUG_LOG_MAX_BYTES, backupCount=config.DEBUG_LOG_BACKUPS
    )
    debug_handler.setFormatter(detailed_formatter)
    debug_handler.setLevel(logging.DEBUG if config.DEBUG else logging.INFO)
    debug_logger.addHandler(debug_handler)

    return {
        'app': app_logger,
        'error': error_logger,
        'debug': debug_logger
    }
