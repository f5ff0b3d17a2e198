from loguru import logger
from typing import Optional
import sys
from pgquery.config.settings import settings

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {name}:{function}:{line} - {message}"


def setup_logging(level: Optional[str] = None):
    """Configure Loguru logging"""
    logger.remove()
    logger.add(sys.stdout,
               level=level or getattr(settings, 'log_level', 'INFO'),
               format=LOG_FORMAT,
               enqueue=True)
