"""FastAPI application factory."""

import logging
import os
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from . import __version__
from .api.router import api_router
from .config import Settings, generate_token, load_settings
from .errors import AgentError
from .models.common import ErrorResponse
from .services.os_agent import OSAgent

logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(name)s: %(message)s")

logger = logging.getLogger(__name__)

CONFIG_FILE_ENV = "AGENT_CONFIG_FILE"


async def agent_error_handler(request: Request, exc: AgentError) -> JSONResponse:
    logger.error(f"{request.url.path}: {exc}")
    body = ErrorResponse(message=str(exc))
    return JSONResponse(status_code=500, content=body.model_dump(mode="json"))


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    if settings is None:
        settings = load_settings(os.environ.get(CONFIG_FILE_ENV))

    logging.getLogger("replica_agent").setLevel(settings.log_level.upper())

    app = FastAPI(
        title="replica-agent",
        version=__version__,
        description="Snapshot and database service control agent",
    )

    token = settings.token
    if not token:
        token = generate_token()
        logger.warning(f"No token configured, generated process token {token}")

    app.state.settings = settings
    app.state.token = token
    app.state.agent = OSAgent(settings)

    app.add_exception_handler(AgentError, agent_error_handler)
    app.include_router(api_router, prefix="/api")

    return app
