"""Rich console that mirrors CLI output into the debug log.

With ``--debug`` every line printed to the terminal is also written, as plain
text, to the debug log so a single file holds both log records and what the
user saw.
"""

import io
import logging
from typing import Optional

from rich.console import Console as RichConsole

DEBUG_LOGGER_NAME = "copilot.console"


class DebugCapturingConsole(RichConsole):
    """Rich Console that logs a plain-text copy of everything it prints"""

    def __init__(self, debug_logger: Optional[logging.Logger] = None, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.debug_logger = debug_logger
        self._log_prefix = "[CONSOLE] "

    def print(self, *objects, **kwargs):
        super().print(*objects, **kwargs)

        if self.debug_logger and self.debug_logger.isEnabledFor(logging.DEBUG):
            plain_text = self.render_plain(*objects, **kwargs)
            if plain_text.strip():
                self.debug_logger.debug(f"{self._log_prefix}{plain_text}")

    def render_plain(self, *objects, **kwargs) -> str:
        """Render objects the way print() would, minus styling"""
        buffer = io.StringIO()
        plain_console = RichConsole(
            file=buffer,
            force_terminal=False,
            no_color=True,
            width=self.width,
            legacy_windows=False,
        )
        plain_console.print(*objects, **kwargs)
        return buffer.getvalue().rstrip()


def create_debug_console(debug_enabled: bool = False,
                         debug_logger: Optional[logging.Logger] = None) -> RichConsole:
    """Return a capturing console in debug mode, a plain Rich console otherwise"""
    if debug_enabled and debug_logger:
        return DebugCapturingConsole(debug_logger=debug_logger)
    return RichConsole()


def setup_debug_logger(log_file: str = "copilot_debug.log") -> logging.Logger:
    """
    Set up the dedicated logger that receives captured console output.

    Args:
        log_file: Path to debug log file (appended to)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(DEBUG_LOGGER_NAME)
    logger.setLevel(logging.DEBUG)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter('%(asctime)s - %(message)s'))
    logger.addHandler(file_handler)

    # Console output already reaches the terminal; don't echo it through root
    logger.propagate = False

    return logger
