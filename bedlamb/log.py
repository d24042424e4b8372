import logging
import sys

LOGGER_NAME = "bedlamb"


def configure_logging(verbose=False):
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.INFO if verbose else logging.WARNING)
    logger.handlers.clear()
    logger.propagate = False

    # stdout is reserved for the response
    sh = logging.StreamHandler(sys.stderr)
    sh.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(sh)
    return logger
