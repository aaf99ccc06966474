import logging
import sys

import uvicorn

from observer.config import settings
from observer.database import init_db
from observer.main import app, configure_logging
from observer.services.errors import ConnectionFailure

LOGGER = logging.getLogger("observer.__main__")


def main() -> None:
    configure_logging()
    try:
        init_db()
    except ConnectionFailure as exc:
        LOGGER.critical("%s", exc)
        sys.exit(1)
    LOGGER.info("Listening on %s:%s", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
