"""Metadata describing the AWS infrastructure hosting a traced application."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

EB_SERVICE_NAME = "elastic_beanstalk"
EC2_SERVICE_NAME = "ec2"
ECS_SERVICE_NAME = "ecs"


@dataclass
class EC2Metadata:
    instance_id: str = ""
    availability_zone: str = ""


@dataclass
class ECSMetadata:
    container_name: str = ""


@dataclass
class BeanstalkMetadata:
    environment: str = ""
    version_label: str = ""
    deployment_id: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> "BeanstalkMetadata":
        """Build from an environment configuration document.

        Missing keys keep their defaults; values of the wrong type raise
        ``ValueError``.
        """
        if not isinstance(data, Mapping):
            raise ValueError("beanstalk configuration must be an object")
        environment = data.get("environment_name", "")
        version_label = data.get("version_label", "")
        deployment_id = data.get("deployment_id", 0)
        if not isinstance(environment, str):
            raise ValueError("environment_name must be a string")
        if not isinstance(version_label, str):
            raise ValueError("version_label must be a string")
        if isinstance(deployment_id, bool) or not isinstance(deployment_id, int):
            raise ValueError("deployment_id must be an integer")
        return cls(environment, version_label, deployment_id)


@dataclass
class PluginMetadata:
    ec2_metadata: EC2Metadata | None = None
    beanstalk_metadata: BeanstalkMetadata | None = None
    ecs_metadata: ECSMetadata | None = None
    origin: str = ""

    def to_dict(self) -> dict[str, dict[str, Any]]:
        """Return the recorded metadata keyed by service name."""
        aws: dict[str, dict[str, Any]] = {}
        if self.ec2_metadata is not None:
            aws[EC2_SERVICE_NAME] = {
                "instance_id": self.ec2_metadata.instance_id,
                "availability_zone": self.ec2_metadata.availability_zone,
            }
        if self.beanstalk_metadata is not None:
            aws[EB_SERVICE_NAME] = {
                "environment_name": self.beanstalk_metadata.environment,
                "version_label": self.beanstalk_metadata.version_label,
                "deployment_id": self.beanstalk_metadata.deployment_id,
            }
        if self.ecs_metadata is not None:
            aws[ECS_SERVICE_NAME] = {"container": self.ecs_metadata.container_name}
        return aws


instance_plugin_metadata = PluginMetadata()