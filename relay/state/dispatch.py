"""Per-request dispatch values (dataclasses only)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class DispatchRequest:
    channel_id: str
    recipient_ids: tuple[str, ...]
    message_prefix: str | None = None


@dataclass(frozen=True, slots=True)
class DispatchReceipt:
    channel_name: str
    channel_id: str
    recipient_count: int


__all__ = ["DispatchReceipt", "DispatchRequest"]
