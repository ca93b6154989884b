from depthalert.bus.base import MessageBus
from depthalert.bus.local import LocalBus

__all__ = ["MessageBus", "LocalBus"]
