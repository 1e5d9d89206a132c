import logging
import sys
from typing import Optional

from shorty.config import settings


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format='%(asctime)s | %(levelname)s | %(name)s | %(funcName)s:%(lineno)d | %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )

    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("redis").setLevel(logging.WARNING)

    return logging.getLogger("shorty")
