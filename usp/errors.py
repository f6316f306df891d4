"""Exception hierarchy and the USP error code text table."""

from types import MappingProxyType

from .constants import ErrorCode


class UspError(Exception):
    """Base class for every error raised by this package."""


class DecodeError(UspError, ValueError):
    """Input bytes are not a well formed encoding of the requested structure."""


class EncodeError(UspError, ValueError):
    """An in-memory value cannot be written to the wire."""


class BuilderError(UspError, ValueError):
    """A builder is missing a required field or oneof variant."""


class ReassemblyError(UspError, ValueError):
    """Session context fragments cannot be put back together."""


ERROR_MESSAGES = MappingProxyType(
    {
        ErrorCode.MESSAGE_FAILED: "Message failed",
        ErrorCode.MESSAGE_NOT_SUPPORTED: "Message not supported",
        ErrorCode.REQUEST_DENIED: "Request denied (no reason specified)",
        ErrorCode.INTERNAL_ERROR: "Internal error",
        ErrorCode.INVALID_ARGUMENTS: "Invalid arguments",
        ErrorCode.RESOURCES_EXCEEDED: "Resources exceeded",
        ErrorCode.PERMISSION_DENIED: "Permission denied",
        ErrorCode.INVALID_CONFIGURATION: "Invalid configuration",
        ErrorCode.INVALID_PATH_SYNTAX: "Invalid path syntax",
        ErrorCode.PARAMETER_ACTION_FAILED: "Parameter action failed",
        ErrorCode.UNSUPPORTED_PARAMETER: "Unsupported parameter",
        ErrorCode.INVALID_TYPE: "Invalid type",
        ErrorCode.INVALID_VALUE: "Invalid value",
        ErrorCode.PARAMETER_READ_ONLY: "Attempt to update non-writeable parameter",
        ErrorCode.VALUE_CONFLICT: "Value conflict",
        ErrorCode.OPERATION_ERROR: "Operation error",
        ErrorCode.OBJECT_DOES_NOT_EXIST: "Object does not exist",
        ErrorCode.OBJECT_NOT_CREATED: "Object could not be created",
        ErrorCode.OBJECT_NOT_A_TABLE: "Object is not a table",
        ErrorCode.OBJECT_NOT_CREATABLE: "Attempt to create non-creatable Object",
        ErrorCode.OBJECT_NOT_UPDATED: "Object could not be updated",
        ErrorCode.REQUIRED_PARAMETER_FAILED: "Required parameter failed",
        ErrorCode.COMMAND_FAILURE: "Command failure",
        ErrorCode.COMMAND_CANCELED: "Command canceled",
        ErrorCode.DELETE_FAILURE: "Delete failure",
        ErrorCode.OBJECT_EXISTS_DUPLICATE_KEY: "Object exists with duplicate key",
        ErrorCode.INVALID_PATH: "Invalid path",
        ErrorCode.INVALID_COMMAND_ARGUMENTS: "Invalid command arguments",
        ErrorCode.REGISTER_FAILURE: "Register failure",
        ErrorCode.ALREADY_IN_USE: "Already in use",
        ErrorCode.DEREGISTER_FAILURE: "Deregister failure",
        ErrorCode.PATH_ALREADY_REGISTERED: "Path already registered",
        ErrorCode.RECORD_NOT_PARSED: "Record could not be parsed",
        ErrorCode.SECURE_SESSION_REQUIRED: "Secure session required",
        ErrorCode.SECURE_SESSION_NOT_SUPPORTED: "Secure session not supported",
        ErrorCode.SEGMENTATION_NOT_SUPPORTED: "Segmentation and reassembly not supported",
        ErrorCode.INVALID_RECORD_VALUE: "Invalid Record value",
        ErrorCode.SESSION_CONTEXT_TERMINATED: "Session Context terminated",
        ErrorCode.SESSION_CONTEXT_NOT_ALLOWED: "Session Context not allowed",
    }
)


def get_err_msg(code: int) -> str:
    """Return the canned text for a USP error code.

    Args:
        code: Numeric USP error code

    Returns:
        The standard message, "Vendor specific" for 7800-7999, or an empty
        string for codes with no assigned meaning.
    """
    if ErrorCode.VENDOR_SPECIFIC_FIRST <= code <= ErrorCode.VENDOR_SPECIFIC_LAST:
        return "Vendor specific"
    return ERROR_MESSAGES.get(code, "")
