from .message import compose_message
from .dispatch import DispatchGate
from .connector import GatewayConnector
from .coordinator import ConnectionCoordinator

__all__ = ["ConnectionCoordinator", "DispatchGate", "GatewayConnector", "compose_message"]
