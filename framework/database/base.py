from abc import ABC, abstractmethod


class BaseDatabaseDriver(ABC):
    """Lifecycle hooks called from the application lifespan."""

    @abstractmethod
    async def connect(self):
        pass

    @abstractmethod
    async def disconnect(self):
        pass
