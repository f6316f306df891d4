"""USP 1.4 Msg schema.

Every protobuf message of ``usp-msg-1-4.proto`` is a dataclass here, with
sub-messages nested the same way as in the ``.proto`` file, e.g.
``AddResp.CreatedObjectResult.OperationStatus``. Oneofs are a single
attribute holding the selected variant's value (or ``None``)::

    body = Body(msg_body=Request(req_type=Get(param_paths=["Device."])))
    body.which("msg_body")  # "request"
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .constants import (
    CmdType,
    MsgType,
    ObjAccessType,
    ParamAccessType,
    ParamValueType,
    ValueChangeType,
)
from .fields import BOOL, FIXED32, STRING, STRING_MAP, EnumOf, Field, Message, MessageOf, Oneof

# ----------------------------------------------------------------------------
# Envelope
# ----------------------------------------------------------------------------


@dataclass
class Header(Message):
    """Message id and type."""

    msg_id: str = ""
    msg_type: MsgType = MsgType.ERROR

    FIELDS = (
        Field(1, "msg_id", STRING),
        Field(2, "msg_type", EnumOf(MsgType)),
    )


@dataclass
class Body(Message):
    """Exactly one of Request, Response or Error."""

    msg_body: Request | Response | Error | None = None

    FIELDS = (
        Oneof(
            "msg_body",
            (
                Field(1, "request", MessageOf("Request")),
                Field(2, "response", MessageOf("Response")),
                Field(3, "error", MessageOf("Error")),
            ),
        ),
    )


@dataclass
class Msg(Message):
    """A complete USP message: header plus body."""

    header: Header | None = None
    body: Body | None = None

    FIELDS = (
        Field(1, "header", MessageOf(Header)),
        Field(2, "body", MessageOf(Body)),
    )

    @property
    def msg_id(self) -> str:
        return self.header.msg_id if self.header is not None else ""

    @property
    def msg_type(self) -> MsgType:
        return self.header.msg_type if self.header is not None else MsgType.ERROR

    def _body_value(self) -> Request | Response | Error | None:
        return self.body.msg_body if self.body is not None else None

    def is_request(self) -> bool:
        return isinstance(self._body_value(), Request)

    def is_response(self) -> bool:
        return isinstance(self._body_value(), Response)

    def is_error(self) -> bool:
        return isinstance(self._body_value(), Error)

    def get_error(self) -> Error | None:
        """Return the Error body, if this message carries one."""
        body = self._body_value()
        return body if isinstance(body, Error) else None

    def get_notify_request(self) -> Notify | None:
        """Return the Notify request, if this message is one."""
        body = self._body_value()
        if isinstance(body, Request) and isinstance(body.req_type, Notify):
            return body.req_type
        return None

    def is_notify_request(self) -> bool:
        return self.get_notify_request() is not None


@dataclass
class Request(Message):
    """Exactly one of the eleven request operations."""

    req_type: (
        Get
        | GetSupportedDM
        | GetInstances
        | Set
        | Add
        | Delete
        | Operate
        | Notify
        | GetSupportedProtocol
        | Register
        | Deregister
        | None
    ) = None

    FIELDS = (
        Oneof(
            "req_type",
            (
                Field(1, "get", MessageOf("Get")),
                Field(2, "get_supported_dm", MessageOf("GetSupportedDM")),
                Field(3, "get_instances", MessageOf("GetInstances")),
                Field(4, "set", MessageOf("Set")),
                Field(5, "add", MessageOf("Add")),
                Field(6, "delete", MessageOf("Delete")),
                Field(7, "operate", MessageOf("Operate")),
                Field(8, "notify", MessageOf("Notify")),
                Field(9, "get_supported_protocol", MessageOf("GetSupportedProtocol")),
                Field(10, "register", MessageOf("Register")),
                Field(11, "deregister", MessageOf("Deregister")),
            ),
        ),
    )


@dataclass
class Response(Message):
    """Exactly one of the eleven operation responses."""

    resp_type: (
        GetResp
        | GetSupportedDMResp
        | GetInstancesResp
        | SetResp
        | AddResp
        | DeleteResp
        | OperateResp
        | NotifyResp
        | GetSupportedProtocolResp
        | RegisterResp
        | DeregisterResp
        | None
    ) = None

    FIELDS = (
        Oneof(
            "resp_type",
            (
                Field(1, "get_resp", MessageOf("GetResp")),
                Field(2, "get_supported_dm_resp", MessageOf("GetSupportedDMResp")),
                Field(3, "get_instances_resp", MessageOf("GetInstancesResp")),
                Field(4, "set_resp", MessageOf("SetResp")),
                Field(5, "add_resp", MessageOf("AddResp")),
                Field(6, "delete_resp", MessageOf("DeleteResp")),
                Field(7, "operate_resp", MessageOf("OperateResp")),
                Field(8, "notify_resp", MessageOf("NotifyResp")),
                Field(9, "get_supported_protocol_resp", MessageOf("GetSupportedProtocolResp")),
                Field(10, "register_resp", MessageOf("RegisterResp")),
                Field(11, "deregister_resp", MessageOf("DeregisterResp")),
            ),
        ),
    )


# ----------------------------------------------------------------------------
# Error
# ----------------------------------------------------------------------------


@dataclass
class Error(Message):
    """Message-level failure with optional per-parameter details."""

    @dataclass
    class ParamError(Message):
        param_path: str = ""
        err_code: int = 0
        err_msg: str = ""

        FIELDS = (
            Field(1, "param_path", STRING),
            Field(2, "err_code", FIXED32),
            Field(3, "err_msg", STRING),
        )

    err_code: int = 0
    err_msg: str = ""
    param_errs: list[Error.ParamError] = field(default_factory=list)

    FIELDS = (
        Field(1, "err_code", FIXED32),
        Field(2, "err_msg", STRING),
        Field(3, "param_errs", MessageOf(ParamError), repeated=True),
    )


# ----------------------------------------------------------------------------
# Get
# ----------------------------------------------------------------------------


@dataclass
class Get(Message):
    param_paths: list[str] = field(default_factory=list)
    max_depth: int = 0

    FIELDS = (
        Field(1, "param_paths", STRING, repeated=True),
        Field(2, "max_depth", FIXED32),
    )


@dataclass
class GetResp(Message):
    @dataclass
    class ResolvedPathResult(Message):
        resolved_path: str = ""
        result_params: dict[str, str] = field(default_factory=dict)

        FIELDS = (
            Field(1, "resolved_path", STRING),
            Field(2, "result_params", STRING_MAP),
        )

    @dataclass
    class RequestedPathResult(Message):
        requested_path: str = ""
        err_code: int = 0
        err_msg: str = ""
        resolved_path_results: list[GetResp.ResolvedPathResult] = field(default_factory=list)

        FIELDS = (
            Field(1, "requested_path", STRING),
            Field(2, "err_code", FIXED32),
            Field(3, "err_msg", STRING),
            Field(4, "resolved_path_results", MessageOf("GetResp.ResolvedPathResult"), repeated=True),
        )

    req_path_results: list[GetResp.RequestedPathResult] = field(default_factory=list)

    FIELDS = (Field(1, "req_path_results", MessageOf(RequestedPathResult), repeated=True),)


# ----------------------------------------------------------------------------
# GetSupportedDM
# ----------------------------------------------------------------------------


@dataclass
class GetSupportedDM(Message):
    obj_paths: list[str] = field(default_factory=list)
    first_level_only: bool = False
    return_commands: bool = False
    return_events: bool = False
    return_params: bool = False
    return_unique_key_sets: bool = False

    FIELDS = (
        Field(1, "obj_paths", STRING, repeated=True),
        Field(2, "first_level_only", BOOL),
        Field(3, "return_commands", BOOL),
        Field(4, "return_events", BOOL),
        Field(5, "return_params", BOOL),
        Field(6, "return_unique_key_sets", BOOL),
    )


@dataclass
class GetSupportedDMResp(Message):
    @dataclass
    class SupportedParamResult(Message):
        param_name: str = ""
        access: ParamAccessType = ParamAccessType.PARAM_READ_ONLY
        value_type: ParamValueType = ParamValueType.PARAM_UNKNOWN
        value_change: ValueChangeType = ValueChangeType.VALUE_CHANGE_UNKNOWN

        FIELDS = (
            Field(1, "param_name", STRING),
            Field(2, "access", EnumOf(ParamAccessType)),
            Field(3, "value_type", EnumOf(ParamValueType)),
            Field(4, "value_change", EnumOf(ValueChangeType)),
        )

    @dataclass
    class SupportedCommandResult(Message):
        command_name: str = ""
        input_arg_names: list[str] = field(default_factory=list)
        output_arg_names: list[str] = field(default_factory=list)
        command_type: CmdType = CmdType.CMD_UNKNOWN

        FIELDS = (
            Field(1, "command_name", STRING),
            Field(2, "input_arg_names", STRING, repeated=True),
            Field(3, "output_arg_names", STRING, repeated=True),
            Field(4, "command_type", EnumOf(CmdType)),
        )

    @dataclass
    class SupportedEventResult(Message):
        event_name: str = ""
        arg_names: list[str] = field(default_factory=list)

        FIELDS = (
            Field(1, "event_name", STRING),
            Field(2, "arg_names", STRING, repeated=True),
        )

    @dataclass
    class SupportedUniqueKeySet(Message):
        key_names: list[str] = field(default_factory=list)

        FIELDS = (Field(1, "key_names", STRING, repeated=True),)

    @dataclass
    class SupportedObjectResult(Message):
        supported_obj_path: str = ""
        access: ObjAccessType = ObjAccessType.OBJ_READ_ONLY
        is_multi_instance: bool = False
        supported_commands: list[GetSupportedDMResp.SupportedCommandResult] = field(default_factory=list)
        supported_events: list[GetSupportedDMResp.SupportedEventResult] = field(default_factory=list)
        supported_params: list[GetSupportedDMResp.SupportedParamResult] = field(default_factory=list)
        divergent_paths: list[str] = field(default_factory=list)
        unique_key_sets: list[GetSupportedDMResp.SupportedUniqueKeySet] = field(default_factory=list)

        FIELDS = (
            Field(1, "supported_obj_path", STRING),
            Field(2, "access", EnumOf(ObjAccessType)),
            Field(3, "is_multi_instance", BOOL),
            Field(4, "supported_commands", MessageOf("GetSupportedDMResp.SupportedCommandResult"), repeated=True),
            Field(5, "supported_events", MessageOf("GetSupportedDMResp.SupportedEventResult"), repeated=True),
            Field(6, "supported_params", MessageOf("GetSupportedDMResp.SupportedParamResult"), repeated=True),
            Field(7, "divergent_paths", STRING, repeated=True),
            Field(8, "unique_key_sets", MessageOf("GetSupportedDMResp.SupportedUniqueKeySet"), repeated=True),
        )

    @dataclass
    class RequestedObjectResult(Message):
        req_obj_path: str = ""
        err_code: int = 0
        err_msg: str = ""
        data_model_inst_uri: str = ""
        supported_objs: list[GetSupportedDMResp.SupportedObjectResult] = field(default_factory=list)

        FIELDS = (
            Field(1, "req_obj_path", STRING),
            Field(2, "err_code", FIXED32),
            Field(3, "err_msg", STRING),
            Field(4, "data_model_inst_uri", STRING),
            Field(5, "supported_objs", MessageOf("GetSupportedDMResp.SupportedObjectResult"), repeated=True),
        )

    req_obj_results: list[GetSupportedDMResp.RequestedObjectResult] = field(default_factory=list)

    FIELDS = (Field(1, "req_obj_results", MessageOf(RequestedObjectResult), repeated=True),)


# ----------------------------------------------------------------------------
# GetInstances
# ----------------------------------------------------------------------------


@dataclass
class GetInstances(Message):
    obj_paths: list[str] = field(default_factory=list)
    first_level_only: bool = False

    FIELDS = (
        Field(1, "obj_paths", STRING, repeated=True),
        Field(2, "first_level_only", BOOL),
    )


@dataclass
class GetInstancesResp(Message):
    @dataclass
    class CurrInstance(Message):
        instantiated_obj_path: str = ""
        unique_keys: dict[str, str] = field(default_factory=dict)

        FIELDS = (
            Field(1, "instantiated_obj_path", STRING),
            Field(2, "unique_keys", STRING_MAP),
        )

    @dataclass
    class RequestedPathResult(Message):
        requested_path: str = ""
        err_code: int = 0
        err_msg: str = ""
        curr_insts: list[GetInstancesResp.CurrInstance] = field(default_factory=list)

        FIELDS = (
            Field(1, "requested_path", STRING),
            Field(2, "err_code", FIXED32),
            Field(3, "err_msg", STRING),
            Field(4, "curr_insts", MessageOf("GetInstancesResp.CurrInstance"), repeated=True),
        )

    req_path_results: list[GetInstancesResp.RequestedPathResult] = field(default_factory=list)

    FIELDS = (Field(1, "req_path_results", MessageOf(RequestedPathResult), repeated=True),)


# ----------------------------------------------------------------------------
# GetSupportedProtocol
# ----------------------------------------------------------------------------


@dataclass
class GetSupportedProtocol(Message):
    controller_supported_protocol_versions: str = ""

    FIELDS = (Field(1, "controller_supported_protocol_versions", STRING),)


@dataclass
class GetSupportedProtocolResp(Message):
    agent_supported_protocol_versions: str = ""

    FIELDS = (Field(1, "agent_supported_protocol_versions", STRING),)


# ----------------------------------------------------------------------------
# Add
# ----------------------------------------------------------------------------


@dataclass
class Add(Message):
    @dataclass
    class CreateParamSetting(Message):
        param: str = ""
        value: str = ""
        required: bool = False

        FIELDS = (
            Field(1, "param", STRING),
            Field(2, "value", STRING),
            Field(3, "required", BOOL),
        )

    @dataclass
    class CreateObject(Message):
        obj_path: str = ""
        param_settings: list[Add.CreateParamSetting] = field(default_factory=list)

        FIELDS = (
            Field(1, "obj_path", STRING),
            Field(2, "param_settings", MessageOf("Add.CreateParamSetting"), repeated=True),
        )

    allow_partial: bool = False
    create_objs: list[Add.CreateObject] = field(default_factory=list)

    FIELDS = (
        Field(1, "allow_partial", BOOL),
        Field(2, "create_objs", MessageOf(CreateObject), repeated=True),
    )


@dataclass
class AddResp(Message):
    @dataclass
    class ParameterError(Message):
        param: str = ""
        err_code: int = 0
        err_msg: str = ""

        FIELDS = (
            Field(1, "param", STRING),
            Field(2, "err_code", FIXED32),
            Field(3, "err_msg", STRING),
        )

    @dataclass
    class CreatedObjectResult(Message):
        @dataclass
        class OperationStatus(Message):
            @dataclass
            class OperationFailure(Message):
                err_code: int = 0
                err_msg: str = ""

                FIELDS = (
                    Field(1, "err_code", FIXED32),
                    Field(2, "err_msg", STRING),
                )

            @dataclass
            class OperationSuccess(Message):
                instantiated_path: str = ""
                param_errs: list[AddResp.ParameterError] = field(default_factory=list)
                unique_keys: dict[str, str] = field(default_factory=dict)

                FIELDS = (
                    Field(1, "instantiated_path", STRING),
                    Field(2, "param_errs", MessageOf("AddResp.ParameterError"), repeated=True),
                    Field(3, "unique_keys", STRING_MAP),
                )

            oper_status: OperationFailure | OperationSuccess | None = None

            FIELDS = (
                Oneof(
                    "oper_status",
                    (
                        Field(1, "oper_failure", MessageOf(OperationFailure)),
                        Field(2, "oper_success", MessageOf(OperationSuccess)),
                    ),
                ),
            )

        requested_path: str = ""
        oper_status: AddResp.CreatedObjectResult.OperationStatus | None = None

        FIELDS = (
            Field(1, "requested_path", STRING),
            Field(2, "oper_status", MessageOf(OperationStatus)),
        )

    created_obj_results: list[AddResp.CreatedObjectResult] = field(default_factory=list)

    FIELDS = (Field(1, "created_obj_results", MessageOf(CreatedObjectResult), repeated=True),)


# ----------------------------------------------------------------------------
# Delete
# ----------------------------------------------------------------------------


@dataclass
class Delete(Message):
    allow_partial: bool = False
    obj_paths: list[str] = field(default_factory=list)

    FIELDS = (
        Field(1, "allow_partial", BOOL),
        Field(2, "obj_paths", STRING, repeated=True),
    )


@dataclass
class DeleteResp(Message):
    @dataclass
    class UnaffectedPathError(Message):
        unaffected_path: str = ""
        err_code: int = 0
        err_msg: str = ""

        FIELDS = (
            Field(1, "unaffected_path", STRING),
            Field(2, "err_code", FIXED32),
            Field(3, "err_msg", STRING),
        )

    @dataclass
    class DeletedObjectResult(Message):
        @dataclass
        class OperationStatus(Message):
            @dataclass
            class OperationFailure(Message):
                err_code: int = 0
                err_msg: str = ""

                FIELDS = (
                    Field(1, "err_code", FIXED32),
                    Field(2, "err_msg", STRING),
                )

            @dataclass
            class OperationSuccess(Message):
                affected_paths: list[str] = field(default_factory=list)
                unaffected_path_errs: list[DeleteResp.UnaffectedPathError] = field(default_factory=list)

                FIELDS = (
                    Field(1, "affected_paths", STRING, repeated=True),
                    Field(2, "unaffected_path_errs", MessageOf("DeleteResp.UnaffectedPathError"), repeated=True),
                )

            oper_status: OperationFailure | OperationSuccess | None = None

            FIELDS = (
                Oneof(
                    "oper_status",
                    (
                        Field(1, "oper_failure", MessageOf(OperationFailure)),
                        Field(2, "oper_success", MessageOf(OperationSuccess)),
                    ),
                ),
            )

        requested_path: str = ""
        oper_status: DeleteResp.DeletedObjectResult.OperationStatus | None = None

        FIELDS = (
            Field(1, "requested_path", STRING),
            Field(2, "oper_status", MessageOf(OperationStatus)),
        )

    deleted_obj_results: list[DeleteResp.DeletedObjectResult] = field(default_factory=list)

    FIELDS = (Field(1, "deleted_obj_results", MessageOf(DeletedObjectResult), repeated=True),)


# ----------------------------------------------------------------------------
# Set
# ----------------------------------------------------------------------------


@dataclass
class Set(Message):
    @dataclass
    class UpdateParamSetting(Message):
        param: str = ""
        value: str = ""
        required: bool = False

        FIELDS = (
            Field(1, "param", STRING),
            Field(2, "value", STRING),
            Field(3, "required", BOOL),
        )

    @dataclass
    class UpdateObject(Message):
        obj_path: str = ""
        param_settings: list[Set.UpdateParamSetting] = field(default_factory=list)

        FIELDS = (
            Field(1, "obj_path", STRING),
            Field(2, "param_settings", MessageOf("Set.UpdateParamSetting"), repeated=True),
        )

    allow_partial: bool = False
    update_objs: list[Set.UpdateObject] = field(default_factory=list)

    FIELDS = (
        Field(1, "allow_partial", BOOL),
        Field(2, "update_objs", MessageOf(UpdateObject), repeated=True),
    )


@dataclass
class SetResp(Message):
    @dataclass
    class ParameterError(Message):
        param: str = ""
        err_code: int = 0
        err_msg: str = ""

        FIELDS = (
            Field(1, "param", STRING),
            Field(2, "err_code", FIXED32),
            Field(3, "err_msg", STRING),
        )

    @dataclass
    class UpdatedInstanceFailure(Message):
        affected_path: str = ""
        param_errs: list[SetResp.ParameterError] = field(default_factory=list)

        FIELDS = (
            Field(1, "affected_path", STRING),
            Field(2, "param_errs", MessageOf("SetResp.ParameterError"), repeated=True),
        )

    @dataclass
    class UpdatedInstanceResult(Message):
        affected_path: str = ""
        param_errs: list[SetResp.ParameterError] = field(default_factory=list)
        updated_params: dict[str, str] = field(default_factory=dict)

        FIELDS = (
            Field(1, "affected_path", STRING),
            Field(2, "param_errs", MessageOf("SetResp.ParameterError"), repeated=True),
            Field(3, "updated_params", STRING_MAP),
        )

    @dataclass
    class UpdatedObjectResult(Message):
        @dataclass
        class OperationStatus(Message):
            @dataclass
            class OperationFailure(Message):
                err_code: int = 0
                err_msg: str = ""
                updated_inst_failures: list[SetResp.UpdatedInstanceFailure] = field(default_factory=list)

                FIELDS = (
                    Field(1, "err_code", FIXED32),
                    Field(2, "err_msg", STRING),
                    Field(3, "updated_inst_failures", MessageOf("SetResp.UpdatedInstanceFailure"), repeated=True),
                )

            @dataclass
            class OperationSuccess(Message):
                updated_inst_results: list[SetResp.UpdatedInstanceResult] = field(default_factory=list)

                FIELDS = (
                    Field(1, "updated_inst_results", MessageOf("SetResp.UpdatedInstanceResult"), repeated=True),
                )

            oper_status: OperationFailure | OperationSuccess | None = None

            FIELDS = (
                Oneof(
                    "oper_status",
                    (
                        Field(1, "oper_failure", MessageOf(OperationFailure)),
                        Field(2, "oper_success", MessageOf(OperationSuccess)),
                    ),
                ),
            )

        requested_path: str = ""
        oper_status: SetResp.UpdatedObjectResult.OperationStatus | None = None

        FIELDS = (
            Field(1, "requested_path", STRING),
            Field(2, "oper_status", MessageOf(OperationStatus)),
        )

    updated_obj_results: list[SetResp.UpdatedObjectResult] = field(default_factory=list)

    FIELDS = (Field(1, "updated_obj_results", MessageOf(UpdatedObjectResult), repeated=True),)


# ----------------------------------------------------------------------------
# Operate
# ----------------------------------------------------------------------------


@dataclass
class Operate(Message):
    command: str = ""
    command_key: str = ""
    send_resp: bool = False
    input_args: dict[str, str] = field(default_factory=dict)

    FIELDS = (
        Field(1, "command", STRING),
        Field(2, "command_key", STRING),
        Field(3, "send_resp", BOOL),
        Field(4, "input_args", STRING_MAP),
    )


@dataclass
class OperateResp(Message):
    @dataclass
    class OperationResult(Message):
        """Result of one executed command.

        ``operation_resp`` is a ``str`` (``req_obj_path``) for asynchronous
        commands, ``OutputArgs`` or ``CommandFailure`` otherwise.
        """

        @dataclass
        class OutputArgs(Message):
            output_args: dict[str, str] = field(default_factory=dict)

            FIELDS = (Field(1, "output_args", STRING_MAP),)

        @dataclass
        class CommandFailure(Message):
            err_code: int = 0
            err_msg: str = ""

            FIELDS = (
                Field(1, "err_code", FIXED32),
                Field(2, "err_msg", STRING),
            )

        executed_command: str = ""
        operation_resp: str | OutputArgs | CommandFailure | None = None

        FIELDS = (
            Field(1, "executed_command", STRING),
            Oneof(
                "operation_resp",
                (
                    Field(2, "req_obj_path", STRING),
                    Field(3, "req_output_args", MessageOf(OutputArgs)),
                    Field(4, "cmd_failure", MessageOf(CommandFailure)),
                ),
            ),
        )

    operation_results: list[OperateResp.OperationResult] = field(default_factory=list)

    FIELDS = (Field(1, "operation_results", MessageOf(OperationResult), repeated=True),)


# ----------------------------------------------------------------------------
# Notify
# ----------------------------------------------------------------------------


@dataclass
class Notify(Message):
    """Notification from an Agent; exactly one notification kind is set."""

    @dataclass
    class Event(Message):
        obj_path: str = ""
        event_name: str = ""
        params: dict[str, str] = field(default_factory=dict)

        FIELDS = (
            Field(1, "obj_path", STRING),
            Field(2, "event_name", STRING),
            Field(3, "params", STRING_MAP),
        )

    @dataclass
    class ValueChange(Message):
        param_path: str = ""
        param_value: str = ""

        FIELDS = (
            Field(1, "param_path", STRING),
            Field(2, "param_value", STRING),
        )

    @dataclass
    class ObjectCreation(Message):
        obj_path: str = ""
        unique_keys: dict[str, str] = field(default_factory=dict)

        FIELDS = (
            Field(1, "obj_path", STRING),
            Field(2, "unique_keys", STRING_MAP),
        )

    @dataclass
    class ObjectDeletion(Message):
        obj_path: str = ""

        FIELDS = (Field(1, "obj_path", STRING),)

    @dataclass
    class OperationComplete(Message):
        @dataclass
        class OutputArgs(Message):
            output_args: dict[str, str] = field(default_factory=dict)

            FIELDS = (Field(1, "output_args", STRING_MAP),)

        @dataclass
        class CommandFailure(Message):
            err_code: int = 0
            err_msg: str = ""

            FIELDS = (
                Field(1, "err_code", FIXED32),
                Field(2, "err_msg", STRING),
            )

        obj_path: str = ""
        command_name: str = ""
        command_key: str = ""
        operation_resp: OutputArgs | CommandFailure | None = None

        FIELDS = (
            Field(1, "obj_path", STRING),
            Field(2, "command_name", STRING),
            Field(3, "command_key", STRING),
            Oneof(
                "operation_resp",
                (
                    Field(4, "req_output_args", MessageOf(OutputArgs)),
                    Field(5, "cmd_failure", MessageOf(CommandFailure)),
                ),
            ),
        )

    @dataclass
    class OnBoardRequest(Message):
        oui: str = ""
        product_class: str = ""
        serial_number: str = ""
        agent_supported_protocol_versions: str = ""

        FIELDS = (
            Field(1, "oui", STRING),
            Field(2, "product_class", STRING),
            Field(3, "serial_number", STRING),
            Field(4, "agent_supported_protocol_versions", STRING),
        )

    subscription_id: str = ""
    send_resp: bool = False
    notification: Event | ValueChange | ObjectCreation | ObjectDeletion | OperationComplete | OnBoardRequest | None = (
        None
    )

    FIELDS = (
        Field(1, "subscription_id", STRING),
        Field(2, "send_resp", BOOL),
        Oneof(
            "notification",
            (
                Field(3, "event", MessageOf(Event)),
                Field(4, "value_change", MessageOf(ValueChange)),
                Field(5, "obj_creation", MessageOf(ObjectCreation)),
                Field(6, "obj_deletion", MessageOf(ObjectDeletion)),
                Field(7, "oper_complete", MessageOf(OperationComplete)),
                Field(8, "on_board_req", MessageOf(OnBoardRequest)),
            ),
        ),
    )


@dataclass
class NotifyResp(Message):
    subscription_id: str = ""

    FIELDS = (Field(1, "subscription_id", STRING),)


# ----------------------------------------------------------------------------
# Register / Deregister
# ----------------------------------------------------------------------------


@dataclass
class Register(Message):
    @dataclass
    class RegistrationPath(Message):
        path: str = ""

        FIELDS = (Field(1, "path", STRING),)

    allow_partial: bool = False
    reg_paths: list[Register.RegistrationPath] = field(default_factory=list)

    FIELDS = (
        Field(1, "allow_partial", BOOL),
        Field(2, "reg_paths", MessageOf(RegistrationPath), repeated=True),
    )


@dataclass
class RegisterResp(Message):
    @dataclass
    class RegisteredPathResult(Message):
        @dataclass
        class OperationStatus(Message):
            @dataclass
            class OperationFailure(Message):
                err_code: int = 0
                err_msg: str = ""

                FIELDS = (
                    Field(1, "err_code", FIXED32),
                    Field(2, "err_msg", STRING),
                )

            @dataclass
            class OperationSuccess(Message):
                registered_path: str = ""

                FIELDS = (Field(1, "registered_path", STRING),)

            oper_status: OperationFailure | OperationSuccess | None = None

            FIELDS = (
                Oneof(
                    "oper_status",
                    (
                        Field(1, "oper_failure", MessageOf(OperationFailure)),
                        Field(2, "oper_success", MessageOf(OperationSuccess)),
                    ),
                ),
            )

        requested_path: str = ""
        oper_status: RegisterResp.RegisteredPathResult.OperationStatus | None = None

        FIELDS = (
            Field(1, "requested_path", STRING),
            Field(2, "oper_status", MessageOf(OperationStatus)),
        )

    registered_path_results: list[RegisterResp.RegisteredPathResult] = field(default_factory=list)

    FIELDS = (Field(1, "registered_path_results", MessageOf(RegisteredPathResult), repeated=True),)


@dataclass
class Deregister(Message):
    paths: list[str] = field(default_factory=list)

    FIELDS = (Field(1, "paths", STRING, repeated=True),)


@dataclass
class DeregisterResp(Message):
    @dataclass
    class DeregisteredPathResult(Message):
        @dataclass
        class OperationStatus(Message):
            @dataclass
            class OperationFailure(Message):
                err_code: int = 0
                err_msg: str = ""

                FIELDS = (
                    Field(1, "err_code", FIXED32),
                    Field(2, "err_msg", STRING),
                )

            @dataclass
            class OperationSuccess(Message):
                deregistered_path: list[str] = field(default_factory=list)

                FIELDS = (Field(1, "deregistered_path", STRING, repeated=True),)

            oper_status: OperationFailure | OperationSuccess | None = None

            FIELDS = (
                Oneof(
                    "oper_status",
                    (
                        Field(1, "oper_failure", MessageOf(OperationFailure)),
                        Field(2, "oper_success", MessageOf(OperationSuccess)),
                    ),
                ),
            )

        requested_path: str = ""
        oper_status: DeregisterResp.DeregisteredPathResult.OperationStatus | None = None

        FIELDS = (
            Field(1, "requested_path", STRING),
            Field(2, "oper_status", MessageOf(OperationStatus)),
        )

    deregistered_path_results: list[DeregisterResp.DeregisteredPathResult] = field(default_factory=list)

    FIELDS = (Field(1, "deregistered_path_results", MessageOf(DeregisteredPathResult), repeated=True),)
