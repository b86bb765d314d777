"""Records EC2 instance identity in the plugin metadata."""

from __future__ import annotations

import json
import urllib.error
import urllib.request
from typing import Any

from xraykit import logger, plugins
from xraykit.plugins import EC2Metadata, PluginMetadata

ORIGIN = "AWS::EC2::Instance"
IMDS_URL = "http://169.254.169.254/latest/"

_TTL_HEADER = "X-aws-ec2-metadata-token-ttl-seconds"
_DEFAULT_TTL = "60"
_TOKEN_HEADER = "X-aws-ec2-metadata-token"
_TIMEOUT = 30.0
_FIELDS = ("availabilityzone", "imageid", "instanceid", "instancetype")

_opener = urllib.request.build_opener(urllib.request.ProxyHandler({}))


def init() -> None:
    """Fill in the shared plugin metadata unless it already holds EC2 data."""
    metadata = plugins.instance_plugin_metadata
    if metadata is not None and metadata.ec2_metadata is None:
        add_plugin_metadata(metadata)


def add_plugin_metadata(metadata: PluginMetadata, imds_url: str = IMDS_URL) -> None:
    """Query the instance metadata service and record the instance identity.

    A missing session token falls back to unauthenticated requests. Other
    failures are logged and leave ``metadata`` untouched.
    """
    try:
        token = get_token(imds_url)
    except OSError as exc:
        logger.debug("Unable to fetch EC2 instance metadata token fallback to IMDS V1: %s", exc)
        token = ""

    try:
        body = get_metadata(imds_url, token)
    except OSError as exc:
        logger.error("Unable to read EC2 instance metadata: %s", exc)
        return

    try:
        identity = _parse_identity(body)
    except ValueError as exc:
        logger.error("Error while unmarshal operation: %s", exc)
        return

    metadata.ec2_metadata = EC2Metadata(
        instance_id=identity["instanceid"],
        availability_zone=identity["availabilityzone"],
    )
    metadata.origin = ORIGIN


def get_token(imds_url: str) -> str:
    """Fetch a session token for the metadata service; raises ``OSError`` on failure."""
    body = _request("PUT", imds_url + "api/token", {_TTL_HEADER: _DEFAULT_TTL})
    return body.decode("utf-8", errors="replace")


def get_metadata(imds_url: str, token: str) -> bytes:
    """Fetch the instance identity document; raises ``OSError`` on failure."""
    headers = {_TOKEN_HEADER: token} if token else {}
    return _request("GET", imds_url + "dynamic/instance-identity/document", headers)


def _request(method: str, url: str, headers: dict[str, str]) -> bytes:
    try:
        request = urllib.request.Request(url, method=method, headers=headers)
    except ValueError as exc:
        raise OSError(f"{method} {url}: {exc}") from exc
    try:
        with _opener.open(request, timeout=_TIMEOUT) as response:
            return response.read()
    except urllib.error.HTTPError as exc:
        # Any answer from the server counts as a response, whatever its status.
        with exc:
            return exc.read()


def _parse_identity(body: bytes) -> dict[str, str]:
    document: Any = json.loads(body)
    identity = dict.fromkeys(_FIELDS, "")
    if document is None:
        return identity
    if not isinstance(document, dict):
        raise ValueError("instance identity document must be an object")
    for key, value in document.items():
        field = key.lower()
        if field not in identity or value is None:
            continue
        if not isinstance(value, str):
            raise ValueError(f"{key} must be a string")
        identity[field] = value
    return identity