from abc import ABC, abstractmethod


class StarkBankAbstractApiClient(ABC):
    @abstractmethod
    def get(self, endpoint: str, params: dict | None = None) -> dict:
        pass

    @abstractmethod
    def get_content(self, endpoint: str, params: dict | None = None) -> bytes:
        pass

    @abstractmethod
    def post(self, endpoint: str, data: dict) -> dict:
        pass

    @abstractmethod
    def patch(self, endpoint: str, data: dict) -> dict:
        pass

    @abstractmethod
    def delete(self, endpoint: str) -> dict:
        pass
