from abc import ABC, abstractmethod


class IIrmcApi(ABC):
    @abstractmethod
    async def get(self, url: str) -> str:
        """Return the response body of a GET"""
        pass

    @abstractmethod
    async def post_file(self, url: str, filepath: str) -> str:
        """Upload a file and return the task location"""
        pass

    @abstractmethod
    async def post_action(self, url: str) -> str:
        """Trigger an action without payload and return the response body"""
        pass
