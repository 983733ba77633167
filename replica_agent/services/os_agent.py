"""Volume, mount and service operations built on external commands.

Every operation re-reads live system state; nothing is cached between
calls. Queries that ask "is it mounted / is it running" treat a negative
answer from the underlying command as a result, not as a failure. Failures
to run a command at all are raised as ``AgentError`` subclasses.
"""

import logging
import socket
from typing import Awaitable, TypeVar

from ..config import Settings
from ..errors import AgentError, ExecutionError, InvalidArgumentError, NotFoundError, ParseError
from ..models.volume import LogicalVolume, Mount
from ..utils.commands import run_command
from ..utils.output import command_lines, command_tokens, output_tokens

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def _optional(lookup: Awaitable[T], default: T) -> T:
    """Await a secondary lookup, falling back to ``default`` if it fails."""
    try:
        return await lookup
    except AgentError as e:
        logger.debug(f"Optional lookup failed: {e}")
        return default


def _parse_lv_row(fields: list[str]) -> LogicalVolume:
    # lvs indents its rows, which leaves an empty leading field
    if fields and fields[0] == "":
        fields = fields[1:]
    fields = fields + [""] * (4 - len(fields))

    lv = LogicalVolume(name=fields[0], group_name=fields[1], path=fields[2])
    try:
        lv.snapshot_percent = float(fields[3])
        lv.is_snapshot = True
    except ValueError:
        pass
    return lv


class OSAgent:
    def __init__(self, settings: Settings):
        self.settings = settings

    def hostname(self) -> str:
        return socket.gethostname()

    async def list_logical_volumes(
        self,
        volume_name_filter: str = "",
        name_pattern: str = "",
    ) -> list[LogicalVolume]:
        """List logical volumes whose name contains ``name_pattern``.

        ``volume_name_filter`` is passed to the volume manager to scope the
        listing; empty lists everything. A snapshot percentage that does not
        parse as a float marks the volume as not being a snapshot.
        """
        command = f"{self.settings.lvs_command} {volume_name_filter}"
        rows = await command_tokens(command)

        volumes = []
        for fields in rows:
            if not any(fields):
                continue
            lv = _parse_lv_row(fields)
            if name_pattern in lv.name:
                volumes.append(lv)
        return volumes

    async def list_snapshot_volumes(self) -> list[LogicalVolume]:
        return await self.list_logical_volumes("", self.settings.snapshot_volumes_filter)

    async def resolve_logical_volume_path(self, volume_name: str) -> str:
        try:
            volumes = await self.list_logical_volumes(volume_name, "")
        except AgentError as e:
            raise NotFoundError(f"logical volume not found: {volume_name}") from e
        if not volumes:
            raise NotFoundError(f"logical volume not found: {volume_name}")
        return volumes[0].path

    async def get_mount(self, mount_point: str) -> Mount:
        """Describe what is mounted at ``mount_point``.

        The mount table lookup exits non-zero when nothing matches, which
        means the mount point is not mounted.
        """
        mount = Mount(path=mount_point)

        command = (
            f"{self.settings.mount_lookup_command} {mount_point} {self.settings.mount_table_path}"
        )
        result = await run_command(command, check=False)
        if not result.ok:
            return mount

        rows = [fields for fields in output_tokens(result.output) if len(fields) >= 3]
        for fields in rows:
            mount.is_mounted = True
            mount.device = fields[0]
            mount.path = fields[1]
            mount.file_system = fields[2]

        if mount.is_mounted:
            mount.lv_path = await _optional(self.resolve_logical_volume_path(mount.device), "")
            mount.disk_usage = await _optional(self.disk_usage(mount_point), 0)
        return mount

    async def mount_logical_volume(self, mount_point: str, volume_name: str) -> Mount:
        if not volume_name:
            raise InvalidArgumentError("empty volume name in mount_logical_volume")

        command = f"{self.settings.mount_command} {volume_name} {mount_point}"
        try:
            await run_command(command)
        except ExecutionError as e:
            e.details = Mount(path=mount_point)
            raise
        logger.info(f"Mounted {volume_name} on {mount_point}")
        return await self.get_mount(mount_point)

    async def unmount(self, mount_point: str) -> Mount:
        command = f"{self.settings.unmount_command} {mount_point}"
        try:
            await run_command(command)
        except ExecutionError as e:
            e.details = Mount(path=mount_point)
            raise
        logger.info(f"Unmounted {mount_point}")
        return await self.get_mount(mount_point)

    async def disk_usage(self, path: str) -> int:
        """Recursive size of ``path`` in bytes."""
        rows = await command_tokens(f"{self.settings.disk_usage_command} {path}")
        field = rows[0][0]
        try:
            return int(field)
        except ValueError as e:
            raise ParseError(f"cannot parse disk usage of {path}: {field!r}") from e

    async def available_snapshot_hosts(self, local_only: bool) -> list[str]:
        """Hosts with a usable snapshot, as printed by the discovery command."""
        if local_only:
            command = self.settings.available_local_snapshot_hosts_command
        else:
            command = self.settings.available_snapshot_hosts_command
        return await command_lines(command)

    async def service_running(self) -> bool:
        # the status command exits 0 only while the service is up
        result = await run_command(self.settings.service_status_command, check=False)
        return result.ok

    async def service_stop(self) -> bool:
        await run_command(self.settings.service_stop_command)
        logger.info("Database service stopped")
        return True

    async def service_start(self) -> bool:
        await run_command(self.settings.service_start_command)
        logger.info("Database service started")
        return True
