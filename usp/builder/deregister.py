"""Builders for Deregister requests and DeregisterResp responses."""

from collections.abc import Iterable

from ..errors import BuilderError
from ..msg import Body, Deregister, DeregisterResp
from .common import err_msg_or_default, request_body, response_body

OperationStatus = DeregisterResp.DeregisteredPathResult.OperationStatus


class DeregisterBuilder:
    def __init__(self) -> None:
        self._paths: list[str] = []

    def with_paths(self, paths: Iterable[str]) -> "DeregisterBuilder":
        self._paths = list(paths)
        return self

    def build(self) -> Body:
        return request_body(Deregister(paths=list(self._paths)))


class DeregisteredPathResultBuilder:
    def __init__(self, requested_path: str) -> None:
        self.requested_path = requested_path
        self._status: OperationStatus.OperationFailure | OperationStatus.OperationSuccess | None = None

    def set_failure(self, err_code: int, err_msg: str | None = None) -> "DeregisteredPathResultBuilder":
        self._status = OperationStatus.OperationFailure(
            err_code=err_code, err_msg=err_msg_or_default(err_code, err_msg)
        )
        return self

    def set_success(self, deregistered_path: Iterable[str]) -> "DeregisteredPathResultBuilder":
        self._status = OperationStatus.OperationSuccess(deregistered_path=list(deregistered_path))
        return self

    def build(self) -> DeregisterResp.DeregisteredPathResult:
        if self._status is None:
            raise BuilderError(
                f"Cannot produce DeregisteredPathResult for {self.requested_path} without failure or success"
            )
        return DeregisterResp.DeregisteredPathResult(
            requested_path=self.requested_path, oper_status=OperationStatus(oper_status=self._status)
        )


class DeregisterRespBuilder:
    def __init__(self) -> None:
        self._deregistered_path_results: list[DeregisteredPathResultBuilder] = []

    def with_deregistered_path_results(
        self, results: Iterable[DeregisteredPathResultBuilder]
    ) -> "DeregisterRespBuilder":
        self._deregistered_path_results = list(results)
        return self

    def build(self) -> Body:
        return response_body(
            DeregisterResp(deregistered_path_results=[result.build() for result in self._deregistered_path_results])
        )
