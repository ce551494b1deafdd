from __future__ import annotations

import logging
from io import StringIO

# ------------------------------------ Logging ---------------------------------
logger = logging.getLogger("vcardx")
if not logging.getLogger().handlers:
    handler = logging.StreamHandler()
    formatter = logging.Formatter("%(name)s %(filename)s:%(lineno)d %(levelname)s %(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)
logger.setLevel(logging.WARNING)  # diagnostics are logged at DEBUG


def get_buffer(x: str | StringIO = None) -> StringIO:
    """
    Wrap a string in a StringIO, a stream is returned as it is.
    """
    return StringIO(x) if isinstance(x, str) or x is None else x
