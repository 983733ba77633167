"""Host information endpoints."""

from fastapi import APIRouter, Depends

from ..models.common import OKResponse
from ..services.os_agent import OSAgent
from .deps import get_agent

router = APIRouter(tags=["system"])


@router.get("/hostname")
async def get_hostname(agent: OSAgent = Depends(get_agent)):
    return OKResponse(details=agent.hostname())
