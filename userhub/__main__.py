"""
Run the userhub API server.

    python -m userhub

Host, port and log level come from the environment (HOST, PORT, LOG_LEVEL).
"""

import logging
import logging.config

import uvicorn

from userhub.core.config import get_settings
from userhub.core.logging_config import get_logging_config


def main() -> None:
    settings = get_settings()
    log_config = get_logging_config(settings.log_level)
    logging.config.dictConfig(log_config)

    logging.getLogger("userhub").info("Server is running on port %s", settings.port)
    uvicorn.run(
        "userhub.main:create_application",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_config=log_config,
    )


if __name__ == "__main__":
    main()
