"""Top-level encode/decode helpers for USP Msgs and Records."""

import logging
from typing import BinaryIO

from .errors import DecodeError, EncodeError
from .fields import Message
from .msg import Msg
from .record import Record


def decode_msg(data: bytes) -> Msg:
    """Decode a protobuf encoded USP Msg.

    Args:
        data: Encoded Msg bytes

    Returns:
        The decoded Msg

    Raises:
        DecodeError: If the bytes are not a valid Msg encoding
    """
    try:
        return Msg.from_bytes(data)
    except DecodeError as exc:
        logging.debug("Failed to decode %d byte Msg: %s", len(data), exc)
        raise DecodeError(f"while parsing protobuf as USP Msg: {exc}") from exc


def decode_record(data: bytes) -> Record:
    """Decode a protobuf encoded USP Record.

    Args:
        data: Encoded Record bytes

    Returns:
        The decoded Record

    Raises:
        DecodeError: If the bytes are not a valid Record encoding
    """
    try:
        return Record.from_bytes(data)
    except DecodeError as exc:
        logging.debug("Failed to decode %d byte Record: %s", len(data), exc)
        raise DecodeError(f"while parsing protobuf as USP Record: {exc}") from exc


def encode_msg(msg: Msg) -> bytes:
    """Encode a USP Msg to protobuf bytes."""
    return msg.to_bytes()


def encode_record(record: Record) -> bytes:
    """Encode a USP Record to protobuf bytes."""
    return record.to_bytes()


def msg_from_record(record: Record) -> Msg:
    """Decode the Msg carried whole inside a Record.

    Raises:
        DecodeError: If the record carries no complete Msg or the payload
            does not decode
    """
    payload = record.get_msg_payload()
    if payload is None:
        raise DecodeError(f"Record of type {record.which('record_type')} carries no complete USP Msg")
    return decode_msg(payload)


def write_message(message: Message, stream: BinaryIO) -> int:
    """Write a message to a binary stream.

    Returns:
        Number of bytes written

    Raises:
        EncodeError: If the stream rejects the write
    """
    data = message.to_bytes()
    try:
        stream.write(data)
    except OSError as exc:
        raise EncodeError(f"Failed to write {len(data)} bytes: {exc}") from exc
    return len(data)
