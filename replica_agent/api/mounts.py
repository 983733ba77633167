"""Snapshot mount point and disk usage endpoints."""

from fastapi import APIRouter, Depends, Query

from ..config import Settings
from ..models.common import OKResponse
from ..services.os_agent import OSAgent
from .deps import get_agent, get_settings, require_token

router = APIRouter(tags=["mounts"], dependencies=[Depends(require_token)])


@router.get("/mount")
async def get_mount(
    agent: OSAgent = Depends(get_agent),
    settings: Settings = Depends(get_settings),
):
    mount = await agent.get_mount(settings.snapshot_mount_point)
    return OKResponse(details=mount)


@router.get("/mountlv")
async def mount_logical_volume(
    lv: str = Query(""),
    agent: OSAgent = Depends(get_agent),
    settings: Settings = Depends(get_settings),
):
    mount = await agent.mount_logical_volume(settings.snapshot_mount_point, lv)
    return OKResponse(details=mount)


@router.get("/mountlv/{lv:path}")
async def mount_logical_volume_by_path(
    lv: str,
    agent: OSAgent = Depends(get_agent),
    settings: Settings = Depends(get_settings),
):
    mount = await agent.mount_logical_volume(settings.snapshot_mount_point, lv)
    return OKResponse(details=mount)


@router.get("/umount")
async def unmount(
    agent: OSAgent = Depends(get_agent),
    settings: Settings = Depends(get_settings),
):
    mount = await agent.unmount(settings.snapshot_mount_point)
    return OKResponse(details=mount)


@router.get("/du")
async def disk_usage(path: str = Query(""), agent: OSAgent = Depends(get_agent)):
    return OKResponse(details=await agent.disk_usage(path))
