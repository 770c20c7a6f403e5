from abc import ABC, abstractmethod


class MessagePlatformPort(ABC):
    @abstractmethod
    def build_chat_link(self, text: str | None = None, phone: str | None = None) -> str:
        """Deep link opening a chat with `phone` (the business number when None), pre-filled with `text`."""
        raise NotImplementedError
