"""Records Elastic Beanstalk environment details in the plugin metadata."""

from __future__ import annotations

import json

from xraykit import logger, plugins
from xraykit.plugins import BeanstalkMetadata, PluginMetadata

ORIGIN = "AWS::ElasticBeanstalk::Environment"
EB_CONFIG_PATH = "/var/elasticbeanstalk/xray/environment.conf"


def init() -> None:
    """Fill in the shared plugin metadata unless it already holds Beanstalk data."""
    metadata = plugins.instance_plugin_metadata
    if metadata is not None and metadata.beanstalk_metadata is None:
        add_plugin_metadata(metadata)


def add_plugin_metadata(metadata: PluginMetadata, config_path: str = EB_CONFIG_PATH) -> None:
    """Read the environment configuration file into ``metadata``.

    Failures are logged and leave ``metadata`` untouched.
    """
    try:
        with open(config_path, "rb") as config_file:
            raw_config = config_file.read()
    except OSError as exc:
        logger.error(
            "Unable to read Elastic Beanstalk configuration file %s: %s", config_path, exc
        )
        return

    try:
        document = json.loads(raw_config)
        config = BeanstalkMetadata() if document is None else BeanstalkMetadata.from_dict(document)
    except ValueError as exc:
        logger.error(
            "Unable to unmarshal Elastic Beanstalk configuration file %s: %s", config_path, exc
        )
        return

    metadata.beanstalk_metadata = config
    metadata.origin = ORIGIN