"""Logical volume endpoints."""

from fastapi import APIRouter, Depends, Query

from ..models.common import OKResponse
from ..services.os_agent import OSAgent
from .deps import get_agent, require_token

router = APIRouter(tags=["volumes"], dependencies=[Depends(require_token)])


@router.get("/lvs")
@router.get("/lvs/{pattern}")
async def list_logical_volumes(pattern: str = "", agent: OSAgent = Depends(get_agent)):
    volumes = await agent.list_logical_volumes("", pattern)
    return OKResponse(details=volumes)


@router.get("/lvs-snapshots")
async def list_snapshot_volumes(agent: OSAgent = Depends(get_agent)):
    volumes = await agent.list_snapshot_volumes()
    return OKResponse(details=volumes)


@router.get("/lv")
async def get_logical_volume(lv: str = Query(""), agent: OSAgent = Depends(get_agent)):
    volumes = await agent.list_logical_volumes(lv, "")
    return OKResponse(details=volumes)


@router.get("/lv/{lv:path}")
async def get_logical_volume_by_path(lv: str, agent: OSAgent = Depends(get_agent)):
    volumes = await agent.list_logical_volumes(lv, "")
    return OKResponse(details=volumes)
