"""Host agent for provisioning database replicas from LVM snapshots."""

__version__ = "0.1.0"
