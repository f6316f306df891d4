"""Field tables and the generic protobuf codec behind every USP structure.

Each schema class is a dataclass deriving from :class:`Message` that lists
its wire layout in a ``FIELDS`` tuple of :class:`Field` and :class:`Oneof`
entries, in ascending tag order. The attribute named by each entry holds:

- scalars: ``str``, ``bytes``, ``bool``, ``int`` or an ``IntEnum`` member
- sub-messages: an instance or ``None``
- repeated fields: a ``list``
- maps: a ``dict[str, str]``
- oneofs: the value of the selected variant, or ``None`` when unset

Encoding omits scalars equal to their default and empty lists and maps.
Sub-messages and oneof variants are written whenever present.
"""

from __future__ import annotations

import inspect
import sys
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, ClassVar

from .constants import U32_MAX, U64_MAX
from .errors import EncodeError
from .wire import (
    WIRETYPE_FIXED32,
    WIRETYPE_LENGTH_DELIMITED,
    WIRETYPE_VARINT,
    Reader,
    Writer,
    length_delimited_size,
    make_key,
    tag_size,
    varint_size,
)

# ----------------------------------------------------------------------------
# Field kinds
# ----------------------------------------------------------------------------


class FieldKind:
    """How one value of a field is represented on the wire."""

    wire_type = WIRETYPE_VARINT
    python_type: Any = object

    def default(self) -> Any:
        raise NotImplementedError

    def is_default(self, value: Any) -> bool:
        return value == self.default()

    def size(self, value: Any) -> int:
        """Encoded size of ``value`` without its tag."""
        raise NotImplementedError

    def write(self, writer: Writer, value: Any) -> None:
        raise NotImplementedError

    def read(self, reader: Reader) -> Any:
        raise NotImplementedError

    def check(self, value: Any) -> None:
        if not isinstance(value, self.python_type):
            raise EncodeError(f"Expected {self.python_type.__name__}, got {type(value).__name__}")


class _StringKind(FieldKind):
    wire_type = WIRETYPE_LENGTH_DELIMITED
    python_type = str

    def default(self) -> str:
        return ""

    def size(self, value: str) -> int:
        self.check(value)
        return length_delimited_size(len(value.encode("utf-8")))

    def write(self, writer: Writer, value: str) -> None:
        writer.write_bytes(value.encode("utf-8"))

    def read(self, reader: Reader) -> str:
        return reader.read_string()


class _BytesKind(FieldKind):
    wire_type = WIRETYPE_LENGTH_DELIMITED
    python_type = (bytes, bytearray, memoryview)

    def default(self) -> bytes:
        return b""

    def size(self, value: bytes) -> int:
        if not isinstance(value, self.python_type):
            raise EncodeError(f"Expected bytes, got {type(value).__name__}")
        return length_delimited_size(len(value))

    def write(self, writer: Writer, value: bytes) -> None:
        writer.write_bytes(bytes(value))

    def read(self, reader: Reader) -> bytes:
        return reader.read_bytes()


class _BoolKind(FieldKind):
    python_type = bool

    def default(self) -> bool:
        return False

    def size(self, value: bool) -> int:
        self.check(value)
        return 1

    def write(self, writer: Writer, value: bool) -> None:
        writer.write_varint(1 if value else 0)

    def read(self, reader: Reader) -> bool:
        return reader.read_varint() != 0


class _UInt64Kind(FieldKind):
    python_type = int

    def default(self) -> int:
        return 0

    def size(self, value: int) -> int:
        self.check(value)
        if not 0 <= value <= U64_MAX:
            raise EncodeError(f"uint64 value out of range: {value}")
        return varint_size(value)

    def write(self, writer: Writer, value: int) -> None:
        writer.write_varint(value)

    def read(self, reader: Reader) -> int:
        return reader.read_varint()


class _Fixed32Kind(FieldKind):
    wire_type = WIRETYPE_FIXED32
    python_type = int

    def default(self) -> int:
        return 0

    def size(self, value: int) -> int:
        self.check(value)
        if not 0 <= value <= U32_MAX:
            raise EncodeError(f"fixed32 value out of range: {value}")
        return 4

    def write(self, writer: Writer, value: int) -> None:
        writer.write_fixed32(value)

    def read(self, reader: Reader) -> int:
        return reader.read_fixed32()


class EnumOf(FieldKind):
    """Enum field; unknown numbers decode to the zero member."""

    def __init__(self, enum_cls: type[IntEnum]) -> None:
        self.enum_cls = enum_cls
        self.python_type = int

    def default(self) -> IntEnum:
        return self.enum_cls(0)

    def size(self, value: int) -> int:
        self.check(value)
        return varint_size(int(value))

    def write(self, writer: Writer, value: int) -> None:
        writer.write_varint(int(value))

    def read(self, reader: Reader) -> IntEnum:
        number = reader.read_varint() & U32_MAX
        if number & 0x8000_0000:
            number -= 1 << 32
        try:
            return self.enum_cls(number)
        except ValueError:
            return self.enum_cls(0)


class MessageOf(FieldKind):
    """Length-delimited sub-message.

    ``ref`` is either a :class:`Message` subclass or the dotted qualified
    name of one, resolved lazily in the module of the class that declares
    the field. Names allow nested classes to refer to siblings of their
    enclosing class.
    """

    wire_type = WIRETYPE_LENGTH_DELIMITED

    def __init__(self, ref: type[Message] | str) -> None:
        self._ref = ref
        self._module: str | None = None
        self._cls: type[Message] | None = None if isinstance(ref, str) else ref

    def bind(self, module: str) -> None:
        if self._module is None:
            self._module = module

    @property
    def message_cls(self) -> type[Message]:
        if self._cls is None:
            target: Any = sys.modules[self._module]
            for part in str(self._ref).split("."):
                target = getattr(target, part)
            self._cls = target
        return self._cls

    @property
    def python_type(self) -> type[Message]:  # type: ignore[override]
        return self.message_cls

    def default(self) -> None:
        return None

    def is_default(self, value: Any) -> bool:
        return value is None

    def size(self, value: Message) -> int:
        self.check(value)
        return length_delimited_size(value.encoded_size())

    def write(self, writer: Writer, value: Message) -> None:
        writer.write_varint(value.encoded_size())
        value.write_to(writer)

    def read(self, reader: Reader) -> Message:
        return self.message_cls.read_from(Reader(reader.read_length_delimited()))


class _StringMapKind(FieldKind):
    """One ``map<string, string>`` entry, encoded as a key/value sub-message."""

    wire_type = WIRETYPE_LENGTH_DELIMITED
    _KEY = make_key(1, WIRETYPE_LENGTH_DELIMITED)
    _VALUE = make_key(2, WIRETYPE_LENGTH_DELIMITED)

    def default(self) -> dict[str, str]:
        return {}

    def is_default(self, value: Any) -> bool:
        return not value

    @staticmethod
    def _entry_size(key: str, value: str) -> int:
        return (
            2 + length_delimited_size(len(key.encode("utf-8"))) + length_delimited_size(len(value.encode("utf-8")))
        )

    def size(self, item: tuple[str, str]) -> int:
        key, value = item
        if not isinstance(key, str) or not isinstance(value, str):
            raise EncodeError(f"Map entries must be str to str, got {type(key).__name__}: {type(value).__name__}")
        return length_delimited_size(self._entry_size(key, value))

    def write(self, writer: Writer, item: tuple[str, str]) -> None:
        key, value = item
        writer.write_varint(self._entry_size(key, value))
        writer.write_key(self._KEY)
        writer.write_bytes(key.encode("utf-8"))
        writer.write_key(self._VALUE)
        writer.write_bytes(value.encode("utf-8"))

    def read(self, reader: Reader) -> tuple[str, str]:
        entry = Reader(reader.read_length_delimited())
        key = value = ""
        while not entry.at_end():
            tag = entry.read_key()
            if tag == self._KEY:
                key = entry.read_string()
            elif tag == self._VALUE:
                value = entry.read_string()
            else:
                entry.skip(tag)
        return key, value


STRING = _StringKind()
BYTES = _BytesKind()
BOOL = _BoolKind()
UINT64 = _UInt64Kind()
FIXED32 = _Fixed32Kind()
STRING_MAP = _StringMapKind()

# ----------------------------------------------------------------------------
# Field table entries
# ----------------------------------------------------------------------------


@dataclass(frozen=True)
class Field:
    """A single numbered field of a message."""

    number: int
    name: str
    kind: FieldKind
    repeated: bool = False

    @property
    def key(self) -> int:
        return make_key(self.number, self.kind.wire_type)

    @property
    def is_map(self) -> bool:
        return self.kind is STRING_MAP

    def default(self) -> Any:
        if self.repeated:
            return []
        return self.kind.default()

    def is_set(self, value: Any) -> bool:
        if self.repeated or self.is_map:
            return bool(value)
        return not self.kind.is_default(value)

    def size(self, value: Any) -> int:
        """Encoded size of the field including tags, zero when omitted."""
        tag = tag_size(self.number)
        if self.repeated:
            return sum(tag + self.kind.size(item) for item in value)
        if self.is_map:
            return sum(tag + self.kind.size(item) for item in value.items())
        return tag + self.kind.size(value)

    def write(self, writer: Writer, value: Any) -> None:
        if self.repeated:
            items = value
        elif self.is_map:
            items = value.items()
        else:
            items = (value,)
        for item in items:
            writer.write_key(self.key)
            self.kind.write(writer, item)


@dataclass(frozen=True)
class Oneof:
    """A group of fields of which at most one is set.

    The selected variant is identified by the type of the value stored in
    the attribute ``name``; variant types are distinct within a oneof.
    """

    name: str
    variants: tuple[Field, ...]

    def variant_for(self, value: Any) -> Field:
        for variant in self.variants:
            if isinstance(value, variant.kind.python_type):
                return variant
        raise EncodeError(f"{type(value).__name__} is not a variant of oneof '{self.name}'")

    def variant_named(self, name: str) -> Field:
        for variant in self.variants:
            if variant.name == name:
                return variant
        raise KeyError(f"Oneof '{self.name}' has no variant '{name}'")


# ----------------------------------------------------------------------------
# Message base class
# ----------------------------------------------------------------------------


class Message:
    """Base class for schema dataclasses.

    Subclasses declare ``FIELDS`` and matching dataclass attributes.
    Decoding dispatches on the full tag value, so a known field number
    arriving with an unexpected wire type is skipped like any unknown field.
    """

    FIELDS: ClassVar[tuple[Field | Oneof, ...]] = ()
    _DECODERS: ClassVar[dict[int, tuple[str, Field]]] = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        annotations = inspect.get_annotations(cls)
        decoders: dict[int, tuple[str, Field]] = {}
        for entry in cls.FIELDS:
            if entry.name not in annotations:
                raise TypeError(f"{cls.__qualname__}.FIELDS names undeclared attribute '{entry.name}'")
            members = entry.variants if isinstance(entry, Oneof) else (entry,)
            for member in members:
                if isinstance(member.kind, MessageOf):
                    member.kind.bind(cls.__module__)
                decoders[member.key] = (entry.name, member)
        cls._DECODERS = decoders

    # -- encoding --------------------------------------------------------

    def _present(self) -> list[tuple[Field, Any]]:
        """Fields that will be written, in tag order."""
        present = []
        for entry in self.FIELDS:
            value = getattr(self, entry.name)
            if isinstance(entry, Oneof):
                if value is not None:
                    present.append((entry.variant_for(value), value))
            elif entry.is_set(value):
                present.append((entry, value))
        return present

    def encoded_size(self) -> int:
        """Exact number of bytes :meth:`to_bytes` will produce."""
        return sum(field.size(value) for field, value in self._present())

    def write_to(self, writer: Writer) -> None:
        for field, value in self._present():
            field.write(writer, value)

    def to_bytes(self) -> bytes:
        """Serialize to protobuf binary.

        Returns:
            The encoded bytes

        Raises:
            EncodeError: If a field holds a value its wire type cannot carry
        """
        self.encoded_size()
        writer = Writer()
        self.write_to(writer)
        return writer.getvalue()

    # -- decoding --------------------------------------------------------

    @classmethod
    def read_from(cls, reader: Reader) -> Any:
        msg = cls()
        decoders = cls._DECODERS
        while not reader.at_end():
            key = reader.read_key()
            target = decoders.get(key)
            if target is None:
                reader.skip(key)
                continue
            name, field = target
            value = field.kind.read(reader)
            if field.repeated:
                getattr(msg, name).append(value)
            elif field.is_map:
                getattr(msg, name)[value[0]] = value[1]
            else:
                setattr(msg, name, value)
        return msg

    @classmethod
    def from_bytes(cls, data: bytes | bytearray | memoryview) -> Any:
        """Parse protobuf binary into a new instance.

        Args:
            data: Encoded bytes

        Returns:
            The decoded structure

        Raises:
            DecodeError: If the input is truncated or malformed
        """
        return cls.read_from(Reader(data))

    # -- oneof helpers ---------------------------------------------------

    @classmethod
    def oneof(cls, name: str) -> Oneof:
        for entry in cls.FIELDS:
            if isinstance(entry, Oneof) and entry.name == name:
                return entry
        raise KeyError(f"{cls.__qualname__} has no oneof '{name}'")

    def which(self, oneof_name: str) -> str | None:
        """Name of the selected variant of a oneof, or None when unset."""
        value = getattr(self, oneof_name)
        if value is None:
            return None
        return self.oneof(oneof_name).variant_for(value).name
