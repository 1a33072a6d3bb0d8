import logging
from typing import Optional, Union

DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(level: Union[int, str] = logging.INFO, fmt: str = DEFAULT_FORMAT,
                      log_file: Optional[str] = None):
    """
    Configure logging for HaikuPress.

    Args:
        level: Logging level, as a number or a name such as "DEBUG" (default: INFO)
        fmt: Log record format
        log_file: Optional path; records are written there as well as to stderr
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    # Basic logging configuration
    logging.basicConfig(
        level=level,
        format=fmt,
        datefmt='%Y-%m-%d %H:%M:%S',
        handlers=handlers
    )

    # Set root logger level
    logging.getLogger().setLevel(level)

    return logging.getLogger(__name__)
