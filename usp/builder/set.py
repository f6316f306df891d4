"""Builders for Set requests and SetResp responses."""

from collections.abc import Iterable

from pydantic import BaseModel, Field

from ..constants import U32_MAX
from ..errors import BuilderError
from ..msg import Body, Set, SetResp
from .common import StrPairs, err_msg_or_default, request_body, response_body, to_str_map

OperationStatus = SetResp.UpdatedObjectResult.OperationStatus


class UpdateObjectBuilder:
    def __init__(self, obj_path: str) -> None:
        self.obj_path = obj_path
        self.param_settings: list[tuple[str, str, bool]] = []

    def with_param_settings(self, param_settings: Iterable[tuple[str, str, bool]]) -> "UpdateObjectBuilder":
        """Set ``(param, value, required)`` triples."""
        self.param_settings = list(param_settings)
        return self

    def build(self) -> Set.UpdateObject:
        return Set.UpdateObject(
            obj_path=self.obj_path,
            param_settings=[
                Set.UpdateParamSetting(param=param, value=value, required=required)
                for param, value, required in self.param_settings
            ],
        )


class SetBuilder:
    def __init__(self) -> None:
        self._allow_partial = False
        self._update_objs: list[UpdateObjectBuilder] = []

    def with_allow_partial(self, allow_partial: bool) -> "SetBuilder":
        self._allow_partial = allow_partial
        return self

    def with_update_objs(self, update_objs: Iterable[UpdateObjectBuilder]) -> "SetBuilder":
        self._update_objs = list(update_objs)
        return self

    def build(self) -> Body:
        return request_body(
            Set(allow_partial=self._allow_partial, update_objs=[obj.build() for obj in self._update_objs])
        )


class SetRespParameterError(BaseModel):
    """A parameter that could not be set."""

    param: str = Field(..., description="Parameter path")
    err_code: int = Field(..., ge=0, le=U32_MAX, description="USP error code")
    err_msg: str = Field("", description="Error text, empty for the standard text of err_code")

    def build(self) -> SetResp.ParameterError:
        return SetResp.ParameterError(
            param=self.param, err_code=self.err_code, err_msg=err_msg_or_default(self.err_code, self.err_msg)
        )


class SetOperationSuccessBuilder:
    def __init__(self, affected_path: str) -> None:
        self.affected_path = affected_path
        self.param_errs: list[SetRespParameterError] = []
        self.updated_params: dict[str, str] = {}

    def with_param_errs(self, param_errs: Iterable[SetRespParameterError]) -> "SetOperationSuccessBuilder":
        self.param_errs = list(param_errs)
        return self

    def with_updated_params(self, updated_params: StrPairs) -> "SetOperationSuccessBuilder":
        self.updated_params = to_str_map(updated_params)
        return self

    def build(self) -> SetResp.UpdatedInstanceResult:
        return SetResp.UpdatedInstanceResult(
            affected_path=self.affected_path,
            param_errs=[err.build() for err in self.param_errs],
            updated_params=dict(self.updated_params),
        )


class UpdatedInstanceFailureBuilder:
    def __init__(self, affected_path: str) -> None:
        self.affected_path = affected_path
        self.param_errs: list[SetRespParameterError] = []

    def with_param_errs(self, param_errs: Iterable[SetRespParameterError]) -> "UpdatedInstanceFailureBuilder":
        self.param_errs = list(param_errs)
        return self

    def build(self) -> SetResp.UpdatedInstanceFailure:
        return SetResp.UpdatedInstanceFailure(
            affected_path=self.affected_path, param_errs=[err.build() for err in self.param_errs]
        )


class SetOperationStatus:
    """Outcome of one UpdateObject; exactly one of failure or success."""

    def __init__(self) -> None:
        self._failure: tuple[int, str, list[UpdatedInstanceFailureBuilder]] | None = None
        self._success: list[SetOperationSuccessBuilder] | None = None

    def set_failure(
        self,
        err_code: int,
        err_msg: str | None = None,
        updated_inst_failures: Iterable[UpdatedInstanceFailureBuilder] = (),
    ) -> "SetOperationStatus":
        self._failure = (err_code, err_msg_or_default(err_code, err_msg), list(updated_inst_failures))
        self._success = None
        return self

    def set_success(self, updated_inst_results: Iterable[SetOperationSuccessBuilder]) -> "SetOperationStatus":
        self._success = list(updated_inst_results)
        self._failure = None
        return self

    def build(self) -> OperationStatus:
        """Create the OperationStatus.

        Raises:
            BuilderError: If neither set_failure nor set_success was called
        """
        if self._failure is not None:
            err_code, err_msg, failures = self._failure
            return OperationStatus(
                oper_status=OperationStatus.OperationFailure(
                    err_code=err_code,
                    err_msg=err_msg,
                    updated_inst_failures=[failure.build() for failure in failures],
                )
            )
        if self._success is not None:
            return OperationStatus(
                oper_status=OperationStatus.OperationSuccess(
                    updated_inst_results=[result.build() for result in self._success]
                )
            )
        raise BuilderError("Cannot produce SetResp OperationStatus without failure or success")


class UpdatedObjectResultsBuilder:
    def __init__(self, requested_path: str, oper_status: SetOperationStatus) -> None:
        self.requested_path = requested_path
        self.oper_status = oper_status

    def build(self) -> SetResp.UpdatedObjectResult:
        return SetResp.UpdatedObjectResult(requested_path=self.requested_path, oper_status=self.oper_status.build())


class SetRespBuilder:
    def __init__(self) -> None:
        self._updated_obj_results: list[UpdatedObjectResultsBuilder] = []

    def with_updated_obj_results(self, results: Iterable[UpdatedObjectResultsBuilder]) -> "SetRespBuilder":
        self._updated_obj_results = list(results)
        return self

    def build(self) -> Body:
        return response_body(SetResp(updated_obj_results=[result.build() for result in self._updated_obj_results]))
