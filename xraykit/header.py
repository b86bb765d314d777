"""Parsing and rendering of the X-Amzn-Trace-Id header value."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

ROOT_PREFIX = "Root="
PARENT_PREFIX = "Parent="
SAMPLED_PREFIX = "Sampled="
SELF_PREFIX = "Self="


class SamplingDecision(str, Enum):
    """Whether the current segment has been sampled."""

    SAMPLED = "Sampled=1"
    NOT_SAMPLED = "Sampled=0"
    REQUESTED = "Sampled=?"
    UNKNOWN = ""

    @classmethod
    def _from_part(cls, part: str) -> "SamplingDecision":
        try:
            return cls(part)
        except ValueError:
            return cls.UNKNOWN


@dataclass
class Header:
    """The fields carried by a trace header."""

    trace_id: str = ""
    parent_id: str = ""
    sampling_decision: SamplingDecision = SamplingDecision.UNKNOWN
    additional_data: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_string(cls, s: str) -> "Header":
        header = cls()
        for raw in s.split(";"):
            part = raw.strip()
            key, sep, value = part.partition("=")
            if not sep:
                continue
            if part.startswith(ROOT_PREFIX):
                header.trace_id = value
            elif part.startswith(PARENT_PREFIX):
                header.parent_id = value
            elif part.startswith(SAMPLED_PREFIX):
                header.sampling_decision = SamplingDecision._from_part(part)
            elif not part.startswith(SELF_PREFIX):
                header.additional_data[key] = value
        return header

    def __str__(self) -> str:
        parts = []
        if self.trace_id:
            parts.append(ROOT_PREFIX + self.trace_id)
        if self.parent_id:
            parts.append(PARENT_PREFIX + self.parent_id)
        parts.append(SamplingDecision(self.sampling_decision).value)
        parts.extend(f"{key}={value}" for key, value in self.additional_data.items())
        return ";".join(parts)