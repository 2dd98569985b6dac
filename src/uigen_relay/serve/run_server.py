"""Process entry point: validate configuration, then serve the relay with uvicorn."""
from __future__ import annotations
import logging
import sys

import uvicorn

from uigen_relay.common.config import load_settings
from uigen_relay.common.errors import ConfigError
from uigen_relay.common.logging_setup import setup_logging
from uigen_relay.serve.fastapi_app import create_app

LOGGER = logging.getLogger("uigen_relay.serve.run")

def main() -> None:
    setup_logging()
    try:
        settings = load_settings()
    except ConfigError as e:
        LOGGER.error("Refusing to start: %s", e)
        sys.exit(1)

    setup_logging(settings.log_level)
    app = create_app(settings)
    LOGGER.info(
        "Backend starting on %s:%s (models %s -> %s)",
        settings.host,
        settings.port,
        settings.models.primary,
        settings.models.fallback,
    )
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)

if __name__ == "__main__":
    main()
