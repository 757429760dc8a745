from logging.handlers import RotatingFileHandler
from pix_brcode.config import LOG_DIR, LOG_LEVEL
import os
import logging


def configurar_logging():
    logger = logging.getLogger()

    # Chamado por vários módulos; os handlers só entram uma vez.
    if getattr(logger, '_pix_configurado', False):
        return logger

    if not os.path.exists(LOG_DIR):
        os.makedirs(LOG_DIR)

    logger.setLevel(LOG_LEVEL)

    file_handler = RotatingFileHandler(
        os.path.join(LOG_DIR, 'app.log'),
        maxBytes=2000000,
        backupCount=5
    )

    file_handler.setLevel(LOG_LEVEL)
    file_handler.setFormatter(logging.Formatter(
        '[%(asctime)s] [%(levelname)s] - [%(message)s]'
    ))

    console = logging.StreamHandler()
    console.setLevel(logging.DEBUG)
    console.setFormatter(logging.Formatter(
        '%(levelname)s: %(message)s'
    ))

    logger.addHandler(file_handler)
    logger.addHandler(console)

    logger._pix_configurado = True
    return logger
