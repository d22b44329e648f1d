import sys
import logging
from typing import Optional

HANDLER_NAME = 'funcotator_datasources'


def report_error(msg: str, logger: Optional[logging.Logger] = None) -> None:
    """
    Log an error and echo it to stderr in red.

    Args:
        msg: error message
        logger: optional logger to record the message on
    """
    if logger:
        logger.error(msg)
    print(f"\033[91mERROR:\033[0m {msg}", file=sys.stderr)


def setup_logger(log_file: Optional[str], verbose: bool) -> logging.Logger:
    logger = logging.getLogger()
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(message)s')

    # each handler kind is only attached once per process
    own = [h for h in logger.handlers if h.get_name() == HANDLER_NAME]
    if log_file and not any(isinstance(h, logging.FileHandler) for h in own):
        fh = logging.FileHandler(log_file)
        fh.set_name(HANDLER_NAME)
        fh.setFormatter(formatter)
        logger.addHandler(fh)

    if not any(type(h) is logging.StreamHandler for h in own):
        ch = logging.StreamHandler()
        ch.set_name(HANDLER_NAME)
        ch.setFormatter(formatter)
        ch.setLevel(logging.DEBUG if verbose else logging.INFO)
        logger.addHandler(ch)
    return logger
