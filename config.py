from __future__ import annotations
import logging
import numpy as np

# Coefficients are kept inside the signed 64-bit range.
INT64_MIN: int = int(np.iinfo(np.int64).min)
INT64_MAX: int = int(np.iinfo(np.int64).max)

# Names used when a polynomial is printed without a variable dictionary
DEFAULT_VARIABLE_PREFIX = "x"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: int = logging.INFO) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
