"""Feedback primitives passed from services to the presentation layer."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class MessageLevel(str, Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class ServiceMessage:
    level: MessageLevel
    text: str

    @classmethod
    def error(cls, text: str) -> "ServiceMessage":
        return cls(MessageLevel.ERROR, text)

    @classmethod
    def warning(cls, text: str) -> "ServiceMessage":
        return cls(MessageLevel.WARNING, text)
