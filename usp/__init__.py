# Copyright 2025 Maida.AI
# SPDX-License-Identifier: Apache-2.0
r"""USP (TR-369 User Services Platform) message and record codec.

This package models USP Msg 1.4 and Record 1.3 as plain Python dataclasses
and encodes them to and from the protobuf binary wire format.

It provides:
- Typed Msg and Record structures with oneof helpers
- A protobuf binary codec built on the field tables of those structures
- Segmentation and reassembly of session context payloads
- Fluent builders for every request, response and record type
- A protobuf runtime codec for cross-checking and interop
"""

# Import public API from modules
from .codec import (
    decode_msg,
    decode_record,
    encode_msg,
    encode_record,
    msg_from_record,
    write_message,
)
from .codecs import (
    Codec,
    NativeCodec,
    ProtobufCodec,
    get_codec,
    list_codecs,
    register_codec,
)
from .config import SessionConfig
from .constants import (
    DEFAULT_MAX_FRAGMENT_BYTES,
    DEFAULT_MAX_PAYLOAD_BYTES,
    DEFAULT_MAX_SESSIONS,
    DEFAULT_RECORD_VERSION,
    CmdType,
    CodecID,
    ErrorCode,
    MQTTVersion,
    MsgType,
    ObjAccessType,
    ParamAccessType,
    ParamValueType,
    PayloadSARState,
    PayloadSecurity,
    STOMPVersion,
    ValueChangeType,
)
from .errors import (
    BuilderError,
    DecodeError,
    EncodeError,
    ReassemblyError,
    UspError,
    get_err_msg,
)
from .fields import Message
from .msg import Body, Error, Header, Msg, Request, Response
from .record import (
    DisconnectRecord,
    MQTTConnectRecord,
    NoSessionContextRecord,
    Record,
    SessionContextRecord,
    STOMPConnectRecord,
    UDSConnectRecord,
    WebSocketConnectRecord,
)
from .session import SessionReassembler, fragment, reassemble

# Public API exports
__all__ = [
    # Core classes
    "Message",
    "Msg",
    "Header",
    "Body",
    "Request",
    "Response",
    "Error",
    "Record",
    "NoSessionContextRecord",
    "SessionContextRecord",
    "WebSocketConnectRecord",
    "MQTTConnectRecord",
    "STOMPConnectRecord",
    "DisconnectRecord",
    "UDSConnectRecord",
    "SessionConfig",
    "SessionReassembler",
    "Codec",
    "NativeCodec",
    "ProtobufCodec",
    # Constants and enums
    "MsgType",
    "ParamAccessType",
    "ObjAccessType",
    "ParamValueType",
    "ValueChangeType",
    "CmdType",
    "PayloadSecurity",
    "PayloadSARState",
    "MQTTVersion",
    "STOMPVersion",
    "CodecID",
    "ErrorCode",
    "DEFAULT_RECORD_VERSION",
    "DEFAULT_MAX_FRAGMENT_BYTES",
    "DEFAULT_MAX_PAYLOAD_BYTES",
    "DEFAULT_MAX_SESSIONS",
    # Errors
    "UspError",
    "DecodeError",
    "EncodeError",
    "BuilderError",
    "ReassemblyError",
    "get_err_msg",
    # Encode/decode utilities
    "decode_msg",
    "decode_record",
    "encode_msg",
    "encode_record",
    "msg_from_record",
    "write_message",
    # SAR utilities
    "fragment",
    "reassemble",
    # Codec utilities
    "get_codec",
    "list_codecs",
    "register_codec",
]
