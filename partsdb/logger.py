"""
Parts Inventory - Logging
=========================
Semua operasi penting ditulis ke file log (append) dengan timestamp.
Hanya pesan error yang juga ditampilkan di console.
"""

import logging
import os
import sys

LOGGER_NAME = 'partsdb'
LOG_FORMAT = '[%(asctime)s] %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
ERROR_KEYWORD = 'error'


class ErrorEchoFilter(logging.Filter):
    """Loloskan record yang pesannya mengandung 'error' (case-insensitive) atau level >= ERROR"""

    def filter(self, record):
        if record.levelno >= logging.ERROR:
            return True
        return ERROR_KEYWORD in record.getMessage().lower()


def setup_logging(log_file, stream=None):
    """
    Setup logger 'partsdb'.

    Args:
        log_file: Path file log, parent directory dibuat jika belum ada
        stream: Stream console (default sys.stdout)

    Returns:
        logging.Logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.INFO)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    log_dir = os.path.dirname(log_file)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

    file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(stream or sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.addFilter(ErrorEchoFilter())
    logger.addHandler(console_handler)

    return logger
