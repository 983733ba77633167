"""Request dependencies shared by the API routers."""

import secrets

from fastapi import Query, Request

from ..config import Settings
from ..errors import InvalidTokenError
from ..services.os_agent import OSAgent


def get_agent(request: Request) -> OSAgent:
    return request.app.state.agent


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def require_token(request: Request, token: str = Query("")) -> None:
    """Reject requests whose ``token`` query parameter is not the process token."""
    if not secrets.compare_digest(token.encode(), request.app.state.token.encode()):
        raise InvalidTokenError("Invalid token")
