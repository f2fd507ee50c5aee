from __future__ import annotations

import logging

from pokedex_lite.infra.config import log_level

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Configure root logging once for the server or the CLI process."""
    logging.basicConfig(level=level or log_level(), format=LOG_FORMAT)
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
