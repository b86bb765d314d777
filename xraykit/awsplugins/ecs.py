"""Records the ECS container name in the plugin metadata."""

from __future__ import annotations

import socket

from xraykit import logger, plugins
from xraykit.plugins import ECSMetadata, PluginMetadata

ORIGIN = "AWS::ECS::Container"


def init() -> None:
    """Fill in the shared plugin metadata unless it already holds ECS data."""
    metadata = plugins.instance_plugin_metadata
    if metadata is not None and metadata.ecs_metadata is None:
        add_plugin_metadata(metadata)


def add_plugin_metadata(metadata: PluginMetadata) -> None:
    """Record the host name as the container name; failures are logged."""
    try:
        hostname = socket.gethostname()
    except OSError as exc:
        logger.error("Unable to retrieve hostname from OS. %s", exc)
        return

    metadata.ecs_metadata = ECSMetadata(container_name=hostname)
    metadata.origin = ORIGIN