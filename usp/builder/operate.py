"""Builders for Operate requests and OperateResp responses."""

from collections.abc import Iterable

from ..errors import BuilderError
from ..msg import Body, Operate, OperateResp
from .common import StrPairs, err_msg_or_default, request_body, response_body, to_str_map

OperationResult = OperateResp.OperationResult


class OperateBuilder:
    def __init__(self, command: str) -> None:
        self.command = command
        self.command_key = ""
        self.send_resp = False
        self.input_args: dict[str, str] = {}

    def with_command_key(self, command_key: str) -> "OperateBuilder":
        self.command_key = command_key
        return self

    def with_send_resp(self, send_resp: bool) -> "OperateBuilder":
        self.send_resp = send_resp
        return self

    def with_input_args(self, input_args: StrPairs) -> "OperateBuilder":
        self.input_args = to_str_map(input_args)
        return self

    def build(self) -> Body:
        return request_body(
            Operate(
                command=self.command,
                command_key=self.command_key,
                send_resp=self.send_resp,
                input_args=dict(self.input_args),
            )
        )


class OperateRespResultBuilder:
    """Result of one executed command.

    Exactly one of ``set_failure``, ``set_path`` (asynchronous command
    started) or ``set_output_args`` must be called; the last call wins.
    """

    def __init__(self, executed_command: str) -> None:
        self.executed_command = executed_command
        self._operation_resp: str | OperationResult.OutputArgs | OperationResult.CommandFailure | None = None

    def set_failure(self, err_code: int, err_msg: str | None = None) -> "OperateRespResultBuilder":
        self._operation_resp = OperationResult.CommandFailure(
            err_code=err_code, err_msg=err_msg_or_default(err_code, err_msg)
        )
        return self

    def set_path(self, req_obj_path: str) -> "OperateRespResultBuilder":
        self._operation_resp = req_obj_path
        return self

    def set_output_args(self, output_args: StrPairs) -> "OperateRespResultBuilder":
        self._operation_resp = OperationResult.OutputArgs(output_args=to_str_map(output_args))
        return self

    def build(self) -> OperationResult:
        if self._operation_resp is None:
            raise BuilderError("Need to have either OutputArgs or Path or Failure")
        return OperationResult(executed_command=self.executed_command, operation_resp=self._operation_resp)


class OperateRespBuilder:
    def __init__(self) -> None:
        self._operation_results: list[OperateRespResultBuilder] = []

    def with_operation_results(self, results: Iterable[OperateRespResultBuilder]) -> "OperateRespBuilder":
        self._operation_results = list(results)
        return self

    def build(self) -> Body:
        return response_body(OperateResp(operation_results=[result.build() for result in self._operation_results]))
