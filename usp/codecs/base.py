"""Base codec interface for USP structures."""

from abc import ABC, abstractmethod
from typing import TypeVar

from ..fields import Message

M = TypeVar("M", bound=Message)


class Codec(ABC):
    """Base interface for USP codecs.

    Every codec produces and accepts the USP protobuf binary encoding; they
    differ in the machinery used to get there.
    """

    name = "codec"

    @abstractmethod
    def encode(self, message: Message) -> bytes:
        """Encode a Msg, a Record or any nested structure to bytes."""

    @abstractmethod
    def decode(self, data: bytes, message_type: type[M]) -> M:
        """Decode bytes into a new instance of ``message_type``."""
