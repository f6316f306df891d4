"""Builders for Add requests and AddResp responses."""

from collections.abc import Iterable

from pydantic import BaseModel, Field

from ..constants import U32_MAX
from ..errors import BuilderError
from ..msg import Add, AddResp, Body
from .common import StrPairs, err_msg_or_default, request_body, response_body, to_str_map

OperationStatus = AddResp.CreatedObjectResult.OperationStatus


class CreateObjectBuilder:
    def __init__(self, obj_path: str) -> None:
        self.obj_path = obj_path
        self.param_settings: list[tuple[str, str, bool]] = []

    def with_param_settings(self, param_settings: Iterable[tuple[str, str, bool]]) -> "CreateObjectBuilder":
        """Set ``(param, value, required)`` triples."""
        self.param_settings = list(param_settings)
        return self

    def build(self) -> Add.CreateObject:
        return Add.CreateObject(
            obj_path=self.obj_path,
            param_settings=[
                Add.CreateParamSetting(param=param, value=value, required=required)
                for param, value, required in self.param_settings
            ],
        )


class AddBuilder:
    def __init__(self) -> None:
        self._allow_partial = False
        self._create_objs: list[CreateObjectBuilder] = []

    def with_allow_partial(self, allow_partial: bool) -> "AddBuilder":
        self._allow_partial = allow_partial
        return self

    def with_create_objs(self, create_objs: Iterable[CreateObjectBuilder]) -> "AddBuilder":
        self._create_objs = list(create_objs)
        return self

    def build(self) -> Body:
        return request_body(
            Add(allow_partial=self._allow_partial, create_objs=[obj.build() for obj in self._create_objs])
        )


class AddRespParameterError(BaseModel):
    """A parameter of a created object that could not be set."""

    param: str = Field(..., description="Parameter path")
    err_code: int = Field(..., ge=0, le=U32_MAX, description="USP error code")
    err_msg: str = Field("", description="Error text, empty for the standard text of err_code")

    def build(self) -> AddResp.ParameterError:
        return AddResp.ParameterError(
            param=self.param, err_code=self.err_code, err_msg=err_msg_or_default(self.err_code, self.err_msg)
        )


class AddOperationStatus:
    """Outcome of one CreateObject; exactly one of failure or success."""

    def __init__(self) -> None:
        self._status: OperationStatus.OperationFailure | OperationStatus.OperationSuccess | None = None

    def set_failure(self, err_code: int, err_msg: str | None = None) -> "AddOperationStatus":
        self._status = OperationStatus.OperationFailure(
            err_code=err_code, err_msg=err_msg_or_default(err_code, err_msg)
        )
        return self

    def set_success(
        self,
        instantiated_path: str,
        param_errs: Iterable[AddRespParameterError] = (),
        unique_keys: StrPairs = (),
    ) -> "AddOperationStatus":
        self._status = OperationStatus.OperationSuccess(
            instantiated_path=instantiated_path,
            param_errs=[err.build() for err in param_errs],
            unique_keys=to_str_map(unique_keys),
        )
        return self

    def build(self) -> OperationStatus:
        """Create the OperationStatus.

        Raises:
            BuilderError: If neither set_failure nor set_success was called
        """
        if self._status is None:
            raise BuilderError("Cannot produce AddResp OperationStatus without failure or success")
        return OperationStatus(oper_status=self._status)


class CreatedObjectResultsBuilder:
    def __init__(self, requested_path: str, oper_status: AddOperationStatus) -> None:
        self.requested_path = requested_path
        self.oper_status = oper_status

    def build(self) -> AddResp.CreatedObjectResult:
        return AddResp.CreatedObjectResult(requested_path=self.requested_path, oper_status=self.oper_status.build())


class AddRespBuilder:
    def __init__(self) -> None:
        self._created_obj_results: list[CreatedObjectResultsBuilder] = []

    def with_created_obj_results(self, results: Iterable[CreatedObjectResultsBuilder]) -> "AddRespBuilder":
        self._created_obj_results = list(results)
        return self

    def build(self) -> Body:
        return response_body(AddResp(created_obj_results=[result.build() for result in self._created_obj_results]))
