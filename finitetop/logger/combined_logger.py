"""Combined logger with all functionality."""

from finitetop.logger.table_logger import TableLogger
import logging


class Logger(TableLogger):
    """
    Combined logger used by the enumeration engine.

    Usage:
        logger = Logger("my_search")
        logger.section("Phase 1")
        logger.info("Starting phase 1...")
        logger.table(rows, headers=["open sets", "topologies"])
    """

    def __init__(self, name: str):
        """Initialize the combined logger."""
        TableLogger.__init__(self, name)

    def setup_console_logging(self, level: int = logging.INFO):
        """Enable logging to the console."""
        self.disabled = False
        self.echo = True
        if not any(isinstance(h, logging.StreamHandler) for h in self.logger.handlers):
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            )
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)
        self.logger.setLevel(level)

    def setup_html_logging(self):
        """Record into the HTML buffer only, keeping the console quiet."""
        self.disabled = False
        self.echo = False
