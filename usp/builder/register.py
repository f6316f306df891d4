"""Builders for Register requests and RegisterResp responses."""

from collections.abc import Iterable

from ..errors import BuilderError
from ..msg import Body, Register, RegisterResp
from .common import err_msg_or_default, request_body, response_body

OperationStatus = RegisterResp.RegisteredPathResult.OperationStatus


class RegisterBuilder:
    def __init__(self) -> None:
        self._allow_partial = False
        self._reg_paths: list[str] = []

    def with_allow_partial(self, allow_partial: bool) -> "RegisterBuilder":
        self._allow_partial = allow_partial
        return self

    def with_reg_paths(self, reg_paths: Iterable[str]) -> "RegisterBuilder":
        self._reg_paths = list(reg_paths)
        return self

    def build(self) -> Body:
        return request_body(
            Register(
                allow_partial=self._allow_partial,
                reg_paths=[Register.RegistrationPath(path=path) for path in self._reg_paths],
            )
        )


class RegisteredPathResultBuilder:
    def __init__(self, requested_path: str) -> None:
        self.requested_path = requested_path
        self._status: OperationStatus.OperationFailure | OperationStatus.OperationSuccess | None = None

    def set_failure(self, err_code: int, err_msg: str | None = None) -> "RegisteredPathResultBuilder":
        self._status = OperationStatus.OperationFailure(
            err_code=err_code, err_msg=err_msg_or_default(err_code, err_msg)
        )
        return self

    def set_success(self, registered_path: str) -> "RegisteredPathResultBuilder":
        self._status = OperationStatus.OperationSuccess(registered_path=registered_path)
        return self

    def build(self) -> RegisterResp.RegisteredPathResult:
        if self._status is None:
            raise BuilderError(f"Cannot produce RegisteredPathResult for {self.requested_path} without failure or success")
        return RegisterResp.RegisteredPathResult(
            requested_path=self.requested_path, oper_status=OperationStatus(oper_status=self._status)
        )


class RegisterRespBuilder:
    def __init__(self) -> None:
        self._registered_path_results: list[RegisteredPathResultBuilder] = []

    def with_registered_path_results(self, results: Iterable[RegisteredPathResultBuilder]) -> "RegisterRespBuilder":
        self._registered_path_results = list(results)
        return self

    def build(self) -> Body:
        return response_body(
            RegisterResp(registered_path_results=[result.build() for result in self._registered_path_results])
        )
