"""Uvicorn server runner with custom configuration."""

import structlog
import uvicorn
from uvicorn.config import LOGGING_CONFIG

from rafflecode.app import App
from rafflecode.config import Config
from rafflecode.web.server import create_fastapi_app

logger = structlog.get_logger(__name__)

ENDPOINTS = [
    "POST /api/generate      - generate a new code",
    "GET  /api/codes         - list all stored codes",
    "GET  /api/codes/details - detailed code info (with timestamps)",
    "GET  /api/stats         - statistics about stored codes",
    "POST /api/reset         - clear all codes",
]


def run_server(app: App, config: Config) -> None:
    """Run the Uvicorn server with custom logging configuration."""
    fastapi_app = create_fastapi_app(app, config)

    log_config = LOGGING_CONFIG.copy()
    log_config["formatters"]["access"]["fmt"] = '%(asctime)s - "%(request_line)s" %(status_code)s'
    log_config["formatters"]["default"]["fmt"] = "%(asctime)s - %(levelname)s - %(message)s"

    logger.info(
        "Starting server",
        url=f"http://{config.host}:{config.port}",
        endpoints=ENDPOINTS,
        codes_file=app.codes_file,
        persist_generated=config.persist_generated,
    )
    uvicorn.run(fastapi_app, host=config.host, port=config.port, log_config=log_config, access_log=True)
