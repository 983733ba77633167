"""Donor host discovery endpoints."""

from fastapi import APIRouter, Depends

from ..models.common import OKResponse
from ..services.os_agent import OSAgent
from .deps import get_agent, require_token

router = APIRouter(tags=["snapshots"], dependencies=[Depends(require_token)])


@router.get("/available-snapshots-local")
async def available_local_snapshots(agent: OSAgent = Depends(get_agent)):
    hosts = await agent.available_snapshot_hosts(local_only=True)
    return OKResponse(details=hosts)


@router.get("/available-snapshots")
async def available_snapshots(agent: OSAgent = Depends(get_agent)):
    hosts = await agent.available_snapshot_hosts(local_only=False)
    return OKResponse(details=hosts)
