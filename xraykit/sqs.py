"""Helpers for SQS messages delivered to Lambda functions."""

from __future__ import annotations

from typing import Any, Mapping

TRACE_HEADER_ATTRIBUTE = "AWSTraceHeader"


def is_sampled(message: Mapping[str, Any]) -> bool:
    """Return whether an SQS record's trace header marks it as sampled.

    ``message`` is a record as delivered in a Lambda SQS event, holding an
    ``attributes`` mapping.
    """
    attributes = message.get("attributes") or {}
    value = attributes.get(TRACE_HEADER_ATTRIBUTE)
    if value is None:
        return False
    return "Sampled=1" in value