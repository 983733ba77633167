"""Database service control endpoints."""

from fastapi import APIRouter, Depends

from ..models.common import OKResponse
from ..services.os_agent import OSAgent
from .deps import get_agent, require_token

router = APIRouter(tags=["service"], dependencies=[Depends(require_token)])


@router.get("/mysql-status")
async def service_status(agent: OSAgent = Depends(get_agent)):
    return OKResponse(details=await agent.service_running())


@router.get("/mysql-stop")
async def service_stop(agent: OSAgent = Depends(get_agent)):
    return OKResponse(details=await agent.service_stop())


@router.get("/mysql-start")
async def service_start(agent: OSAgent = Depends(get_agent)):
    return OKResponse(details=await agent.service_start())
