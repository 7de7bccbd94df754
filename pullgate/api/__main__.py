# pragma: no cover

import logging

import uvicorn
from uvicorn.config import LOGGING_CONFIG

from pullgate.api.infra.db_connection import get_default_db
from pullgate.api.infra.schema import setup_schema
from pullgate.api.settings import ServerSettings, verify_env_vars
from pullgate.logging import setup as setup_logging

setup_logging()


def run_server() -> None:
    from pullgate.api.main import app

    verify_env_vars()
    setup_schema(get_default_db())

    settings = ServerSettings()

    # include timestamps in uvicorn logs
    LOGGING_CONFIG["formatters"]["default"]["fmt"] = "%(asctime)s %(levelprefix)s %(message)s"
    LOGGING_CONFIG["formatters"]["access"][
        "fmt"
    ] = '%(asctime)s %(levelprefix)s %(client_addr)s - "%(request_line)s" %(status_code)s'

    logging.getLogger("pullgate").info(f"Server running on port {settings.port}")

    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
    )


run_server()
