from __future__ import annotations

import logging
import sys
from typing import Union

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: Union[int, str] = logging.INFO) -> None:
    """Send package logs to stderr at the given level."""
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(format=LOG_FORMAT, stream=sys.stderr, level=level, force=True)
