"""Builders for GetSupportedDM requests and GetSupportedDMResp responses.

The ``GSDM*`` builders describe the supported data model one object at a
time: commands, events and parameters are attached to a
:class:`GSDMSupportedObjectResultBuilder`, which in turn belongs to the
result for one requested object path.
"""

from collections.abc import Iterable

from ..constants import CmdType, ObjAccessType, ParamAccessType, ParamValueType, ValueChangeType
from ..errors import BuilderError
from ..msg import Body, GetSupportedDM, GetSupportedDMResp
from .common import err_msg_or_default, request_body, response_body


class GetSupportedDMBuilder:
    def __init__(self) -> None:
        self._obj_paths: list[str] = []
        self._first_level_only = False
        self._return_commands = True
        self._return_events = True
        self._return_params = True
        self._return_unique_key_sets = True

    def with_obj_paths(self, obj_paths: Iterable[str]) -> "GetSupportedDMBuilder":
        self._obj_paths = list(obj_paths)
        return self

    def with_first_level_only(self, first_level_only: bool) -> "GetSupportedDMBuilder":
        self._first_level_only = first_level_only
        return self

    def with_return_commands(self, return_commands: bool) -> "GetSupportedDMBuilder":
        self._return_commands = return_commands
        return self

    def with_return_events(self, return_events: bool) -> "GetSupportedDMBuilder":
        self._return_events = return_events
        return self

    def with_return_params(self, return_params: bool) -> "GetSupportedDMBuilder":
        self._return_params = return_params
        return self

    def with_return_unique_key_sets(self, return_unique_key_sets: bool) -> "GetSupportedDMBuilder":
        self._return_unique_key_sets = return_unique_key_sets
        return self

    def build(self) -> Body:
        return request_body(
            GetSupportedDM(
                obj_paths=list(self._obj_paths),
                first_level_only=self._first_level_only,
                return_commands=self._return_commands,
                return_events=self._return_events,
                return_params=self._return_params,
                return_unique_key_sets=self._return_unique_key_sets,
            )
        )


# ----------------------------------------------------------------------------
# Supported data model elements
# ----------------------------------------------------------------------------


class GSDMCommandResult:
    def __init__(self, command_name: str) -> None:
        self.command_name = command_name
        self.input_arg_names: list[str] = []
        self.output_arg_names: list[str] = []
        self.command_type = CmdType.CMD_UNKNOWN

    def with_input_arg_names(self, input_arg_names: Iterable[str]) -> "GSDMCommandResult":
        self.input_arg_names = list(input_arg_names)
        return self

    def with_output_arg_names(self, output_arg_names: Iterable[str]) -> "GSDMCommandResult":
        self.output_arg_names = list(output_arg_names)
        return self

    def set_sync(self) -> "GSDMCommandResult":
        self.command_type = CmdType.CMD_SYNC
        return self

    def set_async(self) -> "GSDMCommandResult":
        self.command_type = CmdType.CMD_ASYNC
        return self

    def build(self) -> GetSupportedDMResp.SupportedCommandResult:
        if self.command_type == CmdType.CMD_UNKNOWN:
            raise BuilderError("Cannot build a Supported Command Result without a specified command type")
        return GetSupportedDMResp.SupportedCommandResult(
            command_name=self.command_name,
            input_arg_names=list(self.input_arg_names),
            output_arg_names=list(self.output_arg_names),
            command_type=self.command_type,
        )


class GSDMEventResult:
    def __init__(self, event_name: str) -> None:
        self.event_name = event_name
        self.arg_names: list[str] = []

    def with_arg_names(self, arg_names: Iterable[str]) -> "GSDMEventResult":
        self.arg_names = list(arg_names)
        return self

    def build(self) -> GetSupportedDMResp.SupportedEventResult:
        return GetSupportedDMResp.SupportedEventResult(event_name=self.event_name, arg_names=list(self.arg_names))


class GSDMParamResult:
    """Supported parameter description.

    Access defaults to read-only. A value type and a value change
    behaviour must be chosen before :meth:`build`.
    """

    def __init__(self, param_name: str) -> None:
        self.param_name = param_name
        self.access = ParamAccessType.PARAM_READ_ONLY
        self.value_type = ParamValueType.PARAM_UNKNOWN
        self.value_change = ValueChangeType.VALUE_CHANGE_UNKNOWN

    def set_access_read_only(self) -> "GSDMParamResult":
        self.access = ParamAccessType.PARAM_READ_ONLY
        return self

    def set_access_write_only(self) -> "GSDMParamResult":
        self.access = ParamAccessType.PARAM_WRITE_ONLY
        return self

    def set_access_read_write(self) -> "GSDMParamResult":
        self.access = ParamAccessType.PARAM_READ_WRITE
        return self

    def _set_type(self, value_type: ParamValueType) -> "GSDMParamResult":
        self.value_type = value_type
        return self

    def set_type_int(self) -> "GSDMParamResult":
        return self._set_type(ParamValueType.PARAM_INT)

    def set_type_unsigned_int(self) -> "GSDMParamResult":
        return self._set_type(ParamValueType.PARAM_UNSIGNED_INT)

    def set_type_long(self) -> "GSDMParamResult":
        return self._set_type(ParamValueType.PARAM_LONG)

    def set_type_unsigned_long(self) -> "GSDMParamResult":
        return self._set_type(ParamValueType.PARAM_UNSIGNED_LONG)

    def set_type_string(self) -> "GSDMParamResult":
        return self._set_type(ParamValueType.PARAM_STRING)

    def set_type_base64(self) -> "GSDMParamResult":
        return self._set_type(ParamValueType.PARAM_BASE_64)

    def set_type_hexbinary(self) -> "GSDMParamResult":
        return self._set_type(ParamValueType.PARAM_HEX_BINARY)

    def set_type_datetime(self) -> "GSDMParamResult":
        return self._set_type(ParamValueType.PARAM_DATE_TIME)

    def set_type_decimal(self) -> "GSDMParamResult":
        return self._set_type(ParamValueType.PARAM_DECIMAL)

    def set_type_boolean(self) -> "GSDMParamResult":
        return self._set_type(ParamValueType.PARAM_BOOLEAN)

    def set_value_change_allowed(self) -> "GSDMParamResult":
        self.value_change = ValueChangeType.VALUE_CHANGE_ALLOWED
        return self

    def set_value_change_will_ignore(self) -> "GSDMParamResult":
        self.value_change = ValueChangeType.VALUE_CHANGE_WILL_IGNORE
        return self

    def build(self) -> GetSupportedDMResp.SupportedParamResult:
        """Create the parameter result.

        Raises:
            BuilderError: If the value type or the value change behaviour
                is still unknown
        """
        if self.value_type == ParamValueType.PARAM_UNKNOWN:
            raise BuilderError("Cannot build a Supported Param Result without a specified value type")
        if self.value_change == ValueChangeType.VALUE_CHANGE_UNKNOWN:
            raise BuilderError("Cannot build a Supported Param Result without a specified value change behaviour")
        return GetSupportedDMResp.SupportedParamResult(
            param_name=self.param_name,
            access=self.access,
            value_type=self.value_type,
            value_change=self.value_change,
        )


class GSDMSupportedObjectResultBuilder:
    def __init__(self, supported_obj_path: str) -> None:
        self.supported_obj_path = supported_obj_path
        self.access = ObjAccessType.OBJ_ADD_ONLY
        self.is_multi_instance = False
        self.supported_commands: list[GSDMCommandResult] = []
        self.supported_events: list[GSDMEventResult] = []
        self.supported_params: list[GSDMParamResult] = []
        self.divergent_paths: list[str] = []
        self.unique_key_sets: list[list[str]] = []

    def set_access_read_only(self) -> "GSDMSupportedObjectResultBuilder":
        self.access = ObjAccessType.OBJ_READ_ONLY
        return self

    def set_access_add_delete(self) -> "GSDMSupportedObjectResultBuilder":
        self.access = ObjAccessType.OBJ_ADD_DELETE
        return self

    def set_access_add_only(self) -> "GSDMSupportedObjectResultBuilder":
        self.access = ObjAccessType.OBJ_ADD_ONLY
        return self

    def set_access_delete_only(self) -> "GSDMSupportedObjectResultBuilder":
        self.access = ObjAccessType.OBJ_DELETE_ONLY
        return self

    def with_is_multi_instance(self, is_multi_instance: bool) -> "GSDMSupportedObjectResultBuilder":
        self.is_multi_instance = is_multi_instance
        return self

    def with_supported_commands(self, commands: Iterable[GSDMCommandResult]) -> "GSDMSupportedObjectResultBuilder":
        self.supported_commands = list(commands)
        return self

    def with_supported_events(self, events: Iterable[GSDMEventResult]) -> "GSDMSupportedObjectResultBuilder":
        self.supported_events = list(events)
        return self

    def with_supported_params(self, params: Iterable[GSDMParamResult]) -> "GSDMSupportedObjectResultBuilder":
        self.supported_params = list(params)
        return self

    def with_divergent_paths(self, divergent_paths: Iterable[str]) -> "GSDMSupportedObjectResultBuilder":
        self.divergent_paths = list(divergent_paths)
        return self

    def with_unique_key_sets(self, unique_key_sets: Iterable[Iterable[str]]) -> "GSDMSupportedObjectResultBuilder":
        self.unique_key_sets = [list(key_names) for key_names in unique_key_sets]
        return self

    def build(self) -> GetSupportedDMResp.SupportedObjectResult:
        """Create the object result, building every attached element.

        Raises:
            BuilderError: If any command or parameter result fails to build
        """
        return GetSupportedDMResp.SupportedObjectResult(
            supported_obj_path=self.supported_obj_path,
            access=self.access,
            is_multi_instance=self.is_multi_instance,
            supported_commands=[command.build() for command in self.supported_commands],
            supported_events=[event.build() for event in self.supported_events],
            supported_params=[param.build() for param in self.supported_params],
            divergent_paths=list(self.divergent_paths),
            unique_key_sets=[
                GetSupportedDMResp.SupportedUniqueKeySet(key_names=list(key_names))
                for key_names in self.unique_key_sets
            ],
        )


# ----------------------------------------------------------------------------
# Response
# ----------------------------------------------------------------------------


class GSDMReqObjectResultBuilder:
    def __init__(self, req_obj_path: str) -> None:
        self.req_obj_path = req_obj_path
        self.err_code = 0
        self.err_msg: str | None = None
        self.data_model_inst_uri = ""
        self.supported_objs: list[GSDMSupportedObjectResultBuilder] = []

    def set_err(self, err_code: int, err_msg: str | None = None) -> "GSDMReqObjectResultBuilder":
        self.err_code = err_code
        self.err_msg = err_msg_or_default(err_code, err_msg)
        return self

    def with_data_model_inst_uri(self, data_model_inst_uri: str) -> "GSDMReqObjectResultBuilder":
        self.data_model_inst_uri = data_model_inst_uri
        return self

    def with_supported_objs(
        self, supported_objs: Iterable[GSDMSupportedObjectResultBuilder]
    ) -> "GSDMReqObjectResultBuilder":
        self.supported_objs = list(supported_objs)
        return self

    def build(self) -> GetSupportedDMResp.RequestedObjectResult:
        return GetSupportedDMResp.RequestedObjectResult(
            req_obj_path=self.req_obj_path,
            err_code=self.err_code,
            err_msg=self.err_msg or "",
            data_model_inst_uri=self.data_model_inst_uri,
            supported_objs=[obj.build() for obj in self.supported_objs],
        )


class GetSupportedDMRespBuilder:
    def __init__(self) -> None:
        self._req_obj_results: list[GSDMReqObjectResultBuilder] = []

    def with_req_obj_results(self, results: Iterable[GSDMReqObjectResultBuilder]) -> "GetSupportedDMRespBuilder":
        self._req_obj_results = list(results)
        return self

    def build(self) -> Body:
        return response_body(GetSupportedDMResp(req_obj_results=[result.build() for result in self._req_obj_results]))
