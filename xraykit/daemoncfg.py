"""Resolution of the UDP and TCP endpoints of the tracing daemon.

An address is either ``host:port``, in which case UDP and TCP share it, or
two space separated forms ``tcp:host:port udp:host:port`` in any order.
The ``AWS_XRAY_DAEMON_ADDRESS`` environment variable, when set, takes
precedence over an address given by the caller.
"""

from __future__ import annotations

import ipaddress
import os
import re
import socket
from dataclasses import dataclass

from xraykit import logger

ENV_VARIABLE = "AWS_XRAY_DAEMON_ADDRESS"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 2000

_ADDRESS_DELIMITER = " "
_UDP_KEY = "udp"
_TCP_KEY = "tcp"

_SIGNED_INT = re.compile(r"[+-]?[0-9]+")
_DIGITS = re.compile(r"[0-9]+")

Address = tuple[str, int]


class DaemonConfigError(ValueError):
    """Raised when a daemon address cannot be parsed or resolved."""


@dataclass(frozen=True)
class DaemonEndpoints:
    """UDP endpoint for emitted segments and TCP endpoint for sampling calls."""

    udp_addr: Address
    tcp_addr: Address


def get_daemon_endpoints() -> DaemonEndpoints:
    """Return the endpoints from the environment, or the defaults if unset.

    Raises ``DaemonConfigError`` if the environment variable is invalid.
    """
    endpoints = get_daemon_endpoints_from_string("")
    if endpoints is None:
        return get_default_daemon_endpoints()
    return endpoints


def get_daemon_endpoints_from_env() -> DaemonEndpoints | None:
    """Resolve the address in the environment, or return None if unset."""
    env_address = os.environ.get(ENV_VARIABLE, "")
    if env_address:
        return _resolve_address(env_address)
    return None


def get_default_daemon_endpoints() -> DaemonEndpoints:
    """Return the default endpoints, both at 127.0.0.1:2000."""
    return DaemonEndpoints(
        udp_addr=(DEFAULT_HOST, DEFAULT_PORT),
        tcp_addr=(DEFAULT_HOST, DEFAULT_PORT),
    )


def get_daemon_endpoints_from_string(address: str = "") -> DaemonEndpoints | None:
    """Resolve the environment address, else ``address``; None if neither is set."""
    env_address = os.environ.get(ENV_VARIABLE, "")
    if env_address:
        logger.info(
            "using daemon endpoints from environment variable %s: %s",
            ENV_VARIABLE,
            env_address,
        )
        chosen = env_address
    else:
        chosen = address
    if chosen:
        return _resolve_address(chosen)
    return None


def _resolve_address(address: str) -> DaemonEndpoints:
    parts = address.split(_ADDRESS_DELIMITER)
    if len(parts) == 1:
        return _parse_single_form(parts[0])
    if len(parts) == 2:
        return _parse_double_form(parts[0], parts[1])
    raise DaemonConfigError("invalid daemon address: " + address)


def _parse_double_form(first: str, second: str) -> DaemonEndpoints:
    first_parts = first.split(":")
    second_parts = second.split(":")
    if len(first_parts) != 3 or len(second_parts) != 3:
        raise DaemonConfigError("invalid daemon address: " + first + " " + second)

    # Only the first form's port is checked here; the second one is checked
    # when it is resolved.
    if not _SIGNED_INT.fullmatch(first_parts[2]):
        raise DaemonConfigError("invalid daemon address port")

    by_protocol = {
        first_parts[0]: first_parts[1] + ":" + first_parts[2],
        second_parts[0]: second_parts[1] + ":" + second_parts[2],
    }
    if _UDP_KEY not in by_protocol or _TCP_KEY not in by_protocol:
        raise DaemonConfigError("invalid daemon address")

    udp_addr = _resolve(by_protocol[_UDP_KEY], socket.SOCK_DGRAM)
    tcp_addr = _resolve(by_protocol[_TCP_KEY], socket.SOCK_STREAM)
    return DaemonEndpoints(udp_addr=udp_addr, tcp_addr=tcp_addr)


def _parse_single_form(address: str) -> DaemonEndpoints:
    parts = address.split(":")
    if len(parts) != 2:
        raise DaemonConfigError("invalid daemon address: " + address)
    if not _SIGNED_INT.fullmatch(parts[1]):
        raise DaemonConfigError("invalid daemon address port")

    udp_addr = _resolve(address, socket.SOCK_DGRAM)
    tcp_addr = _resolve(address, socket.SOCK_STREAM)
    return DaemonEndpoints(udp_addr=udp_addr, tcp_addr=tcp_addr)


def _resolve(address: str, socktype: int) -> Address:
    host, _, port_text = address.rpartition(":")
    if not _DIGITS.fullmatch(port_text) or int(port_text) > 65535:
        raise DaemonConfigError(f"unable to resolve daemon address {address}: invalid port")
    port = int(port_text)

    if not host:
        return ("", port)

    try:
        return (str(ipaddress.ip_address(host)), port)
    except ValueError:
        pass

    # A name whose last label is numeric cannot be a host name.
    if host.rsplit(".", 1)[-1].isdigit():
        raise DaemonConfigError(f"unable to resolve daemon address {address}: invalid host")

    try:
        infos = socket.getaddrinfo(host, port, 0, socktype)
    except (OSError, UnicodeError) as exc:
        raise DaemonConfigError(f"unable to resolve daemon address {address}: {exc}") from exc
    if not infos:
        raise DaemonConfigError(f"unable to resolve daemon address {address}: no addresses")

    preferred = next((info for info in infos if info[0] == socket.AF_INET), infos[0])
    return (preferred[4][0], port)