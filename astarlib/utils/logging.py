import logging

logger = logging.getLogger("astarlib")


def log(message, level=logging.INFO):
    """
    Log a message to the ``astarlib`` logger. Library code logs through this function
    rather than printing.
    """
    logger.log(level, message)
