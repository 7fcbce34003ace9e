"""
Logging Configuration

Sets up logging for a bundler run:
- Console output on stderr at the requested level
- Optional rotating log file
- Debug dump of the resolved settings and bundle build timings
"""

import logging
import logging.handlers
import sys
from typing import Optional, Dict, Any
from pathlib import Path

CONSOLE_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
DEBUG_CONSOLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


class LoggingConfig:
    """
    Owns the root logger handlers installed for the bundler.

    Reconfiguring replaces the handlers installed by the previous call and
    leaves handlers added by others (pytest's caplog, for one) in place.
    """

    def __init__(self):
        self._configured = False
        self._handlers = []

    @property
    def handlers(self):
        return list(self._handlers)

    def configure_logging(
        self,
        level: str = "info",
        log_file: Optional[str] = None,
        max_log_file_size: int = 10 * 1024 * 1024,  # 10MB
        backup_count: int = 5,
        force: bool = False,
    ) -> None:
        """
        Configure logging for a run.

        Args:
            level: Logging level (debug, info, warning, error); unknown names mean info
            log_file: Optional log file path, rotated at max_log_file_size
            max_log_file_size: Maximum log file size before rotation
            backup_count: Number of rotated log files to keep
            force: Reconfigure even if logging was configured before
        """
        if self._configured and not force:
            return

        debug = level.lower() == "debug"
        log_level = LOG_LEVELS.get(level.lower(), logging.INFO)
        root_logger = logging.getLogger()
        root_logger.setLevel(log_level)

        for handler in self._handlers:
            root_logger.removeHandler(handler)
            handler.close()
        self._handlers = []

        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(logging.Formatter(
            DEBUG_CONSOLE_FORMAT if debug else CONSOLE_FORMAT,
            datefmt="%Y-%m-%d %H:%M:%S" if debug else "%H:%M:%S",
        ))
        self._install(console, log_level)

        if log_file:
            try:
                Path(log_file).parent.mkdir(parents=True, exist_ok=True)
                file_handler = logging.handlers.RotatingFileHandler(
                    log_file,
                    maxBytes=max_log_file_size,
                    backupCount=backup_count,
                    encoding='utf-8'
                )
            except OSError as e:
                # Continue with console only
                logging.getLogger(__name__).warning(f"Failed to setup log file {log_file}: {e}")
            else:
                file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
                self._install(file_handler, log_level)

        self._configured = True
        logging.getLogger(__name__).debug(f"Logging configured: level={level}, file={log_file}")

    def _install(self, handler: logging.Handler, log_level: int) -> None:
        handler.setLevel(log_level)
        logging.getLogger().addHandler(handler)
        self._handlers.append(handler)

    def log_configuration_details(self, config: Dict[str, Any]) -> None:
        """Log the resolved settings at debug level."""
        logger = logging.getLogger(__name__)

        if not logger.isEnabledFor(logging.DEBUG):
            return

        logger.debug("=== Bundler Settings ===")
        for key, value in config.items():
            logger.debug(f"  {key}: {value!r}")
        logger.debug("=== End Settings ===")

    def log_operation_timing(self, operation: str, duration: float) -> None:
        """Log how long an operation took; sub-second timings only at debug level."""
        logger = logging.getLogger(__name__)

        if duration < 1.0:
            logger.debug(f"{operation} completed in {duration*1000:.0f}ms")
        else:
            logger.info(f"{operation} completed in {duration:.1f}s")


# Global logging configuration instance
logging_config = LoggingConfig()


def configure_logging(level: str = "info", log_file: Optional[str] = None, force: bool = False) -> None:
    """
    Convenience function to configure the global logging setup.

    Args:
        level: Logging level (debug, info, warning, error)
        log_file: Optional log file path
        force: Reconfigure even if logging was configured before
    """
    logging_config.configure_logging(level=level, log_file=log_file, force=force)
