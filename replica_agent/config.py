"""Application settings."""

import json
import secrets
from pathlib import Path
from typing import Optional, Union

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    host: str = "0.0.0.0"
    port: int = 3002
    debug: bool = False
    log_level: str = "INFO"

    # empty means one is generated at startup
    token: str = ""

    lvs_command: str = "lvs --noheading -o lv_name,vg_name,lv_path,snap_percent"
    mount_command: str = "mount"
    unmount_command: str = "umount"
    disk_usage_command: str = "du -sb"
    mount_lookup_command: str = "grep"
    mount_table_path: str = "/etc/mtab"

    service_status_command: str = ""
    service_start_command: str = ""
    service_stop_command: str = ""
    available_local_snapshot_hosts_command: str = ""
    available_snapshot_hosts_command: str = ""
    snapshot_volumes_filter: str = ""
    snapshot_mount_point: str = ""

    model_config = {"env_prefix": "AGENT_"}


def load_settings(config_file: Optional[Union[str, Path]] = None) -> Settings:
    """Build settings from the environment, overridden by a JSON config file."""
    if config_file is None:
        return Settings()
    with open(config_file, encoding="utf-8") as f:
        overrides = json.load(f)
    return Settings(**overrides)


def generate_token() -> str:
    return secrets.token_hex(32)
