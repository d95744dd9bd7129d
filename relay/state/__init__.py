from .phase import SessionPhase
from .runtime import RuntimeDeps
from .session import SessionState
from .settings import AppSettings
from .dispatch import DispatchReceipt, DispatchRequest

__all__ = [
    "AppSettings",
    "DispatchReceipt",
    "DispatchRequest",
    "RuntimeDeps",
    "SessionPhase",
    "SessionState",
]
