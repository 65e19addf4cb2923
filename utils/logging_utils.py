"""
Logging setup and secret redaction helpers.
"""
import logging
import os
from typing import Dict, Mapping, Optional

SENSITIVE_HEADERS = ('authorization', 'x-api-key', 'api-key')

logger = logging.getLogger(__name__)


def mask_token(token: Optional[str], visible: int = 4) -> str:
    """Return a display-safe form of a token (first characters only)"""
    if not token:
        return "<none>"
    if len(token) <= visible:
        return "*" * len(token)
    return f"{token[:visible]}...({len(token)} chars)"


def redact_headers(headers: Mapping[str, str]) -> Dict[str, str]:
    """Copy headers with credential values replaced by [REDACTED]"""
    redacted = {}
    for header_name, header_value in headers.items():
        if header_name.lower() in SENSITIVE_HEADERS:
            redacted[header_name] = "[REDACTED]"
        else:
            redacted[header_name] = header_value
    return redacted


def setup_logging(level: str = "info", log_file: Optional[str] = None) -> Optional[str]:
    """Configure the root logger

    Args:
        level: Level name (debug, info, warning, error)
        log_file: Optional file to append log records to as well

    Returns:
        Absolute path of the log file, if one was configured
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Clear existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    log_path = None
    if log_file:
        log_path = os.path.abspath(log_file)
        file_handler = logging.FileHandler(log_path, mode='a', encoding='utf-8')
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)
        logger.info(f"Logging enabled - appending to {log_path}")

    # httpx logs every request at INFO; keep it quiet unless debugging
    if root_logger.level > logging.DEBUG:
        logging.getLogger("httpx").setLevel(logging.WARNING)

    return log_path
