import logging
import os
from logging.handlers import RotatingFileHandler

from inquiry_desk.platform.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

log_dir = settings.LOG_DIR if os.path.isabs(settings.LOG_DIR) else os.path.join(os.getcwd(), settings.LOG_DIR)
os.makedirs(log_dir, exist_ok=True)

log_file_path = os.path.join(log_dir, "inquiry_desk.log")


def get_logger(name: str) -> logging.Logger:
    """
    Logger for one component, writing to the console and to
    ``<LOG_DIR>/inquiry_desk.log`` (size-rotated).
    """
    logger = logging.getLogger(name)

    if logger.handlers:
        return logger

    level = logging.getLevelName(settings.LOG_LEVEL.upper())
    logger.setLevel(level)
    formatter = logging.Formatter(LOG_FORMAT)

    file_handler = RotatingFileHandler(
        log_file_path,
        maxBytes=settings.LOG_MAX_BYTES,
        backupCount=settings.LOG_BACKUP_COUNT,
    )
    console_handler = logging.StreamHandler()

    for handler in (file_handler, console_handler):
        handler.setFormatter(formatter)
        handler.setLevel(level)
        logger.addHandler(handler)

    return logger
