from abc import ABC, abstractmethod
from typing import Optional

class BaseDatabaseDriver(ABC):
    @abstractmethod
    async def connect(self):
        pass

    @abstractmethod
    async def disconnect(self):
        pass

    @abstractmethod
    async def is_active(self, timeout: Optional[float] = None) -> bool:
        """Whether the connection is open and answers a liveness ping."""
        pass
