"""USP codec implementations."""

from ..constants import CodecID
from .base import Codec
from .native import NativeCodec
from .protobuf_codec import ProtobufCodec, from_protobuf, message_class, to_protobuf

__all__ = [
    "Codec",
    "NativeCodec",
    "ProtobufCodec",
    "from_protobuf",
    "message_class",
    "to_protobuf",
    "register_codec",
    "get_codec",
    "list_codecs",
]


# Codec registry
_CODECS: dict[int, type[Codec]] = {}


def register_codec(codec_id: int, codec_class: type[Codec]) -> None:
    """Register a codec implementation."""
    _CODECS[codec_id] = codec_class


def get_codec(codec_id: int) -> Codec:
    """Get a codec instance by ID."""
    if codec_id not in _CODECS:
        raise ValueError(f"Unsupported codec ID: {codec_id}")
    return _CODECS[codec_id]()


def list_codecs() -> list[int]:
    """List all registered codec IDs."""
    return list(_CODECS.keys())


# Register default codecs
register_codec(CodecID.NATIVE, NativeCodec)
register_codec(CodecID.PROTOBUF, ProtobufCodec)
