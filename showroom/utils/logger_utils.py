import logging
import sys


from showroom.core.config import settings


logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    handlers=[logging.StreamHandler(sys.stdout)],
)


for noisy_logger in settings.QUIET_LOGGERS:
    logging.getLogger(noisy_logger).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """
    Return a logger for a showroom module.

    Args:
        name (str): Logger name, usually `__name__`.

    Returns:
        logging.Logger: Logger object.
    """
    return logging.getLogger(name)
