from abc import ABC, abstractmethod


class ISessionQueryRepo(ABC):
    @abstractmethod
    async def exists_by_token(self, *, token: str) -> bool:
        pass
