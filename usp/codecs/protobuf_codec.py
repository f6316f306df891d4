"""Codec backed by the official protobuf runtime.

The protobuf message classes are generated at runtime from the same field
tables that drive :class:`~usp.codecs.native.NativeCodec`, so both codecs
always agree on the schema. Generated types live in a private descriptor
pool and never clash with other USP bindings loaded in the process.
"""

import functools
import logging
from enum import IntEnum
from typing import Any

from google.protobuf import descriptor_pb2, descriptor_pool, message_factory
from google.protobuf.message import DecodeError as ProtobufDecodeError
from google.protobuf.message import EncodeError as ProtobufEncodeError

from ..errors import DecodeError, EncodeError
from ..fields import BOOL, BYTES, FIXED32, STRING, UINT64, EnumOf, Field, Message, MessageOf, Oneof
from ..msg import Msg
from ..record import Record
from .base import Codec, M

PACKAGE = "usp"
FILE_NAME = "usp/usp_codec_generated.proto"

_FDP = descriptor_pb2.FieldDescriptorProto

_SCALAR_TYPES = {
    STRING: _FDP.TYPE_STRING,
    BYTES: _FDP.TYPE_BYTES,
    BOOL: _FDP.TYPE_BOOL,
    UINT64: _FDP.TYPE_UINT64,
    FIXED32: _FDP.TYPE_FIXED32,
}

# ----------------------------------------------------------------------------
# Descriptor generation
# ----------------------------------------------------------------------------


def proto_name(cls: type[Message]) -> str:
    """Flat protobuf message name of a schema class, e.g. ``GetResp_ResolvedPathResult``."""
    return cls.__qualname__.replace(".", "_")


def _map_entry_name(field_name: str) -> str:
    return "".join(part[:1].upper() + part[1:] for part in field_name.split("_")) + "Entry"


def _collect(roots: tuple[type[Message], ...]) -> list[type[Message]]:
    """Every schema class reachable from ``roots``, parents first."""
    seen: dict[type[Message], None] = {}
    pending = list(roots)
    while pending:
        cls = pending.pop(0)
        if cls in seen:
            continue
        seen[cls] = None
        for entry in cls.FIELDS:
            members = entry.variants if isinstance(entry, Oneof) else (entry,)
            pending.extend(member.kind.message_cls for member in members if isinstance(member.kind, MessageOf))
    return list(seen)


def _enum_proto(enum_cls: type[IntEnum]) -> descriptor_pb2.EnumDescriptorProto:
    enum_proto = descriptor_pb2.EnumDescriptorProto(name=enum_cls.__name__)
    for member in sorted(enum_cls, key=int):
        enum_proto.value.add(name=member.name, number=int(member))
    return enum_proto


def _field_proto(
    message_proto: descriptor_pb2.DescriptorProto,
    owner: str,
    field: Field,
    enum_owners: dict[type[IntEnum], str],
    oneof_index: int | None = None,
) -> None:
    field_proto = message_proto.field.add(name=field.name, number=field.number, label=_FDP.LABEL_OPTIONAL)
    if oneof_index is not None:
        field_proto.oneof_index = oneof_index
    if field.repeated:
        field_proto.label = _FDP.LABEL_REPEATED

    kind = field.kind
    if field.is_map:
        entry_name = _map_entry_name(field.name)
        entry = message_proto.nested_type.add(name=entry_name)
        entry.options.map_entry = True
        entry.field.add(name="key", number=1, label=_FDP.LABEL_OPTIONAL, type=_FDP.TYPE_STRING)
        entry.field.add(name="value", number=2, label=_FDP.LABEL_OPTIONAL, type=_FDP.TYPE_STRING)
        field_proto.label = _FDP.LABEL_REPEATED
        field_proto.type = _FDP.TYPE_MESSAGE
        field_proto.type_name = f".{PACKAGE}.{owner}.{entry_name}"
    elif isinstance(kind, MessageOf):
        field_proto.type = _FDP.TYPE_MESSAGE
        field_proto.type_name = f".{PACKAGE}.{proto_name(kind.message_cls)}"
    elif isinstance(kind, EnumOf):
        if kind.enum_cls not in enum_owners:
            enum_owners[kind.enum_cls] = owner
            message_proto.enum_type.append(_enum_proto(kind.enum_cls))
        field_proto.type = _FDP.TYPE_ENUM
        field_proto.type_name = f".{PACKAGE}.{enum_owners[kind.enum_cls]}.{kind.enum_cls.__name__}"
    else:
        field_proto.type = _SCALAR_TYPES[kind]


def build_file_descriptor(*roots: type[Message]) -> descriptor_pb2.FileDescriptorProto:
    """Describe the schema classes reachable from ``roots`` as a proto3 file.

    Nested schema classes become flat top-level messages. Each enum is
    declared inside the first message that uses it.
    """
    file_proto = descriptor_pb2.FileDescriptorProto(name=FILE_NAME, package=PACKAGE, syntax="proto3")
    enum_owners: dict[type[IntEnum], str] = {}
    for cls in _collect(roots):
        owner = proto_name(cls)
        message_proto = file_proto.message_type.add(name=owner)
        for entry in cls.FIELDS:
            if isinstance(entry, Oneof):
                index = len(message_proto.oneof_decl)
                message_proto.oneof_decl.add(name=entry.name)
                for variant in entry.variants:
                    _field_proto(message_proto, owner, variant, enum_owners, oneof_index=index)
            else:
                _field_proto(message_proto, owner, entry, enum_owners)
    return file_proto


@functools.cache
def _message_classes() -> dict[str, Any]:
    file_proto = build_file_descriptor(Msg, Record)
    pool = descriptor_pool.DescriptorPool()
    pool.AddSerializedFile(file_proto.SerializeToString())
    classes = {}
    for message_proto in file_proto.message_type:
        descriptor = pool.FindMessageTypeByName(f"{PACKAGE}.{message_proto.name}")
        classes[message_proto.name] = message_factory.GetMessageClass(descriptor)
    logging.debug("Generated %d protobuf message classes for package %s", len(classes), PACKAGE)
    return classes


def message_class(cls: type[Message]) -> Any:
    """The generated protobuf class matching a schema class."""
    try:
        return _message_classes()[proto_name(cls)]
    except KeyError:
        raise ValueError(f"{cls.__qualname__} is not part of the USP Msg or Record schema") from None


# ----------------------------------------------------------------------------
# Conversion
# ----------------------------------------------------------------------------


def _scalar_to_pb(field: Field, value: Any) -> Any:
    if isinstance(field.kind, EnumOf):
        return int(value)
    if field.kind is BYTES:
        return bytes(value)
    return value


def _scalar_from_pb(field: Field, value: Any) -> Any:
    if isinstance(field.kind, EnumOf):
        try:
            return field.kind.enum_cls(value)
        except ValueError:
            return field.kind.enum_cls(0)
    return value


def _set_field(pb: Any, field: Field, value: Any) -> None:
    kind = field.kind
    if field.repeated:
        target = getattr(pb, field.name)
        for item in value:
            if isinstance(kind, MessageOf):
                _fill(target.add(), item)
            else:
                target.append(_scalar_to_pb(field, item))
    elif field.is_map:
        getattr(pb, field.name).update(value)
    elif isinstance(kind, MessageOf):
        sub = getattr(pb, field.name)
        sub.SetInParent()
        _fill(sub, value)
    else:
        setattr(pb, field.name, _scalar_to_pb(field, value))


def _fill(pb: Any, value: Message) -> None:
    for entry in value.FIELDS:
        attr = getattr(value, entry.name)
        if isinstance(entry, Oneof):
            if attr is not None:
                _set_field(pb, entry.variant_for(attr), attr)
        elif isinstance(entry.kind, MessageOf) and not entry.repeated:
            if attr is not None:
                _set_field(pb, entry, attr)
        else:
            _set_field(pb, entry, attr)


def _get_field(pb: Any, field: Field) -> Any:
    kind = field.kind
    value = getattr(pb, field.name)
    if field.repeated:
        if isinstance(kind, MessageOf):
            return [from_protobuf(item, kind.message_cls) for item in value]
        return [_scalar_from_pb(field, item) for item in value]
    if field.is_map:
        return dict(value)
    if isinstance(kind, MessageOf):
        return from_protobuf(value, kind.message_cls)
    return _scalar_from_pb(field, value)


def to_protobuf(value: Message) -> Any:
    """Convert a schema instance to the generated protobuf message.

    Raises:
        EncodeError: If a field holds a value protobuf cannot carry
    """
    pb = message_class(type(value))()
    try:
        _fill(pb, value)
    except (TypeError, ValueError) as exc:
        raise EncodeError(f"Cannot convert {type(value).__qualname__} to protobuf: {exc}") from exc
    return pb


def from_protobuf(pb: Any, cls: type[M]) -> M:
    """Convert a generated protobuf message back to a schema instance."""
    kwargs = {}
    for entry in cls.FIELDS:
        if isinstance(entry, Oneof):
            selected = pb.WhichOneof(entry.name)
            kwargs[entry.name] = None if selected is None else _get_field(pb, entry.variant_named(selected))
        elif isinstance(entry.kind, MessageOf) and not entry.repeated:
            kwargs[entry.name] = _get_field(pb, entry) if pb.HasField(entry.name) else None
        else:
            kwargs[entry.name] = _get_field(pb, entry)
    return cls(**kwargs)


class ProtobufCodec(Codec):
    """Protobuf codec using the official runtime for serialization."""

    name = "protobuf"

    def encode(self, message: Message) -> bytes:
        """Encode a schema instance to protobuf bytes.

        Args:
            message: Msg, Record or nested structure to encode

        Returns:
            Serialized protobuf bytes
        """
        pb = to_protobuf(message)
        try:
            return pb.SerializeToString()
        except ProtobufEncodeError as exc:
            raise EncodeError(str(exc)) from exc

    def decode(self, data: bytes, message_type: type[M]) -> M:
        """Decode protobuf bytes to a schema instance.

        Args:
            data: Serialized protobuf bytes
            message_type: Schema class to produce

        Returns:
            The decoded structure
        """
        pb = message_class(message_type)()
        try:
            pb.ParseFromString(bytes(data))
        except ProtobufDecodeError as exc:
            logging.debug("Protobuf runtime rejected %d bytes as %s: %s", len(data), message_type.__qualname__, exc)
            raise DecodeError(f"while parsing protobuf as {message_type.__qualname__}: {exc}") from exc
        return from_protobuf(pb, message_type)
