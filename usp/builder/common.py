"""Helpers shared by the operation builders."""

from collections.abc import Iterable, Mapping
from enum import IntEnum

from ..errors import BuilderError, get_err_msg
from ..msg import Body, Request, Response

StrPairs = Mapping[str, str] | Iterable[tuple[str, str]]


def err_msg_or_default(err_code: int, err_msg: str | None) -> str:
    """Use the canned text for ``err_code`` when no message was given."""
    if err_msg:
        return err_msg
    return get_err_msg(err_code)


def to_str_map(pairs: StrPairs) -> dict[str, str]:
    return dict(pairs)


def request_body(req_type: object) -> Body:
    return Body(msg_body=Request(req_type=req_type))


def response_body(resp_type: object) -> Body:
    return Body(msg_body=Response(resp_type=resp_type))


def coerce_enum(enum_cls: type[IntEnum], value: IntEnum | int | str, what: str) -> IntEnum:
    """Accept an enum member, its number or its name.

    Raises:
        BuilderError: If the value names no member of ``enum_cls``
    """
    try:
        if isinstance(value, str):
            return enum_cls[value]
        return enum_cls(value)
    except (KeyError, ValueError):
        choices = " or ".join(member.name for member in enum_cls)
        raise BuilderError(f"{what} version must be {choices}, got {value!r}") from None
