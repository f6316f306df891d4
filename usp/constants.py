"""USP protocol constants and enums for Msg 1.4 and Record 1.3."""

from enum import IntEnum

# ----------------------------------------------------------------------------
# Package defaults
# ----------------------------------------------------------------------------

DEFAULT_RECORD_VERSION = "1.3"
DEFAULT_MAX_FRAGMENT_BYTES = 64 * 1024
DEFAULT_MAX_PAYLOAD_BYTES = 16 * 1024 * 1024
DEFAULT_MAX_SESSIONS = 1024

U32_MAX = 0xFFFF_FFFF
U64_MAX = 0xFFFF_FFFF_FFFF_FFFF

# ----------------------------------------------------------------------------
# Msg header
# ----------------------------------------------------------------------------


class MsgType(IntEnum):
    """Header.MsgType, mirrors the Body variant."""

    ERROR = 0
    GET = 1
    GET_RESP = 2
    NOTIFY = 3
    SET = 4
    SET_RESP = 5
    OPERATE = 6
    OPERATE_RESP = 7
    ADD = 8
    ADD_RESP = 9
    DELETE = 10
    DELETE_RESP = 11
    GET_SUPPORTED_DM = 12
    GET_SUPPORTED_DM_RESP = 13
    GET_INSTANCES = 14
    GET_INSTANCES_RESP = 15
    NOTIFY_RESP = 16
    GET_SUPPORTED_PROTO = 17
    GET_SUPPORTED_PROTO_RESP = 18
    REGISTER = 19
    REGISTER_RESP = 20
    DEREGISTER = 21
    DEREGISTER_RESP = 22


# ----------------------------------------------------------------------------
# GetSupportedDMResp enums
# ----------------------------------------------------------------------------


class ParamAccessType(IntEnum):
    PARAM_READ_ONLY = 0
    PARAM_READ_WRITE = 1
    PARAM_WRITE_ONLY = 2


class ObjAccessType(IntEnum):
    OBJ_READ_ONLY = 0
    OBJ_ADD_DELETE = 1
    OBJ_ADD_ONLY = 2
    OBJ_DELETE_ONLY = 3


class ParamValueType(IntEnum):
    PARAM_UNKNOWN = 0
    PARAM_BASE_64 = 1
    PARAM_BOOLEAN = 2
    PARAM_DATE_TIME = 3
    PARAM_DECIMAL = 4
    PARAM_HEX_BINARY = 5
    PARAM_INT = 6
    PARAM_LONG = 7
    PARAM_STRING = 8
    PARAM_UNSIGNED_INT = 9
    PARAM_UNSIGNED_LONG = 10


class ValueChangeType(IntEnum):
    VALUE_CHANGE_UNKNOWN = 0
    VALUE_CHANGE_ALLOWED = 1
    VALUE_CHANGE_WILL_IGNORE = 2


class CmdType(IntEnum):
    CMD_UNKNOWN = 0
    CMD_SYNC = 1
    CMD_ASYNC = 2


# ----------------------------------------------------------------------------
# Record enums
# ----------------------------------------------------------------------------


class PayloadSecurity(IntEnum):
    """Record.PayloadSecurity."""

    PLAINTEXT = 0
    TLS12 = 1


class PayloadSARState(IntEnum):
    """Segmentation and reassembly state of a session context payload."""

    NONE = 0  # Unfragmented
    BEGIN = 1  # First fragment
    INPROCESS = 2  # Middle fragment
    COMPLETE = 3  # Last fragment


class MQTTVersion(IntEnum):
    V3_1_1 = 0
    V5 = 1


class STOMPVersion(IntEnum):
    V1_2 = 0


# ----------------------------------------------------------------------------
# Codec identifiers
# ----------------------------------------------------------------------------


class CodecID(IntEnum):
    """Registered codec identifiers."""

    NATIVE = 0x01  # In-package field table codec
    PROTOBUF = 0x02  # google.protobuf runtime with generated descriptors


# ----------------------------------------------------------------------------
# Error codes
# ----------------------------------------------------------------------------


class ErrorCode(IntEnum):
    """USP error codes (TR-369 section 10.6)."""

    # Message errors
    MESSAGE_FAILED = 7000
    MESSAGE_NOT_SUPPORTED = 7001
    REQUEST_DENIED = 7002
    INTERNAL_ERROR = 7003
    INVALID_ARGUMENTS = 7004
    RESOURCES_EXCEEDED = 7005
    PERMISSION_DENIED = 7006
    INVALID_CONFIGURATION = 7007
    INVALID_PATH_SYNTAX = 7008
    PARAMETER_ACTION_FAILED = 7009
    UNSUPPORTED_PARAMETER = 7010
    INVALID_TYPE = 7011
    INVALID_VALUE = 7012
    PARAMETER_READ_ONLY = 7013
    VALUE_CONFLICT = 7014
    OPERATION_ERROR = 7015
    OBJECT_DOES_NOT_EXIST = 7016
    OBJECT_NOT_CREATED = 7017
    OBJECT_NOT_A_TABLE = 7018
    OBJECT_NOT_CREATABLE = 7019
    OBJECT_NOT_UPDATED = 7020
    REQUIRED_PARAMETER_FAILED = 7021
    COMMAND_FAILURE = 7022
    COMMAND_CANCELED = 7023
    DELETE_FAILURE = 7024
    OBJECT_EXISTS_DUPLICATE_KEY = 7025
    INVALID_PATH = 7026
    INVALID_COMMAND_ARGUMENTS = 7027
    REGISTER_FAILURE = 7028
    ALREADY_IN_USE = 7029
    DEREGISTER_FAILURE = 7030
    PATH_ALREADY_REGISTERED = 7031

    # Record errors
    RECORD_NOT_PARSED = 7100
    SECURE_SESSION_REQUIRED = 7101
    SECURE_SESSION_NOT_SUPPORTED = 7102
    SEGMENTATION_NOT_SUPPORTED = 7103
    INVALID_RECORD_VALUE = 7104
    SESSION_CONTEXT_TERMINATED = 7105
    SESSION_CONTEXT_NOT_ALLOWED = 7106

    # Vendor range
    VENDOR_SPECIFIC_FIRST = 7800
    VENDOR_SPECIFIC_LAST = 7999
