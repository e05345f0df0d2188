from __future__ import annotations

import logging
import sys


def setup_logging(log_level: str = "INFO") -> None:
    """Configure root logging once for the process."""
    level = getattr(logging, str(log_level).upper(), logging.INFO)
    logging.basicConfig(
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        stream=sys.stdout,
        level=level,
    )
    logging.getLogger().setLevel(level)
