"""Aggregate all API sub-routers."""

from fastapi import APIRouter

from . import system, volumes, mounts, snapshots, service

api_router = APIRouter()

api_router.include_router(system.router)
api_router.include_router(volumes.router)
api_router.include_router(mounts.router)
api_router.include_router(snapshots.router)
api_router.include_router(service.router)
