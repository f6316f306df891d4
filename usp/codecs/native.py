"""Codec backed by the field tables of the schema classes."""

from ..fields import Message
from .base import Codec, M


class NativeCodec(Codec):
    """Pure Python encoder and decoder driven by each class's ``FIELDS``."""

    name = "native"

    def encode(self, message: Message) -> bytes:
        return message.to_bytes()

    def decode(self, data: bytes, message_type: type[M]) -> M:
        return message_type.from_bytes(data)
