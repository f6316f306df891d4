"""Builders for Delete requests and DeleteResp responses."""

from collections.abc import Iterable

from pydantic import BaseModel, Field

from ..constants import U32_MAX
from ..errors import BuilderError
from ..msg import Body, Delete, DeleteResp
from .common import err_msg_or_default, request_body, response_body

OperationStatus = DeleteResp.DeletedObjectResult.OperationStatus


class DeleteBuilder:
    def __init__(self) -> None:
        self._allow_partial = False
        self._obj_paths: list[str] = []

    def with_allow_partial(self, allow_partial: bool) -> "DeleteBuilder":
        self._allow_partial = allow_partial
        return self

    def with_obj_paths(self, obj_paths: Iterable[str]) -> "DeleteBuilder":
        self._obj_paths = list(obj_paths)
        return self

    def build(self) -> Body:
        return request_body(Delete(allow_partial=self._allow_partial, obj_paths=list(self._obj_paths)))


class DeleteRespUnaffectedPathError(BaseModel):
    """An instance that matched the request but was not deleted."""

    unaffected_path: str = Field(..., description="Instance path that was left in place")
    err_code: int = Field(..., ge=0, le=U32_MAX, description="USP error code")
    err_msg: str = Field("", description="Error text, empty for the standard text of err_code")

    def build(self) -> DeleteResp.UnaffectedPathError:
        return DeleteResp.UnaffectedPathError(
            unaffected_path=self.unaffected_path,
            err_code=self.err_code,
            err_msg=err_msg_or_default(self.err_code, self.err_msg),
        )


class DeletedObjectResultsBuilder:
    """Result for one requested path; exactly one of failure or success."""

    def __init__(self, requested_path: str) -> None:
        self.requested_path = requested_path
        self._status: OperationStatus.OperationFailure | OperationStatus.OperationSuccess | None = None

    def set_failure(self, err_code: int, err_msg: str | None = None) -> "DeletedObjectResultsBuilder":
        self._status = OperationStatus.OperationFailure(
            err_code=err_code, err_msg=err_msg_or_default(err_code, err_msg)
        )
        return self

    def set_success(
        self,
        affected_paths: Iterable[str],
        unaffected_path_errs: Iterable[DeleteRespUnaffectedPathError] = (),
    ) -> "DeletedObjectResultsBuilder":
        self._status = OperationStatus.OperationSuccess(
            affected_paths=list(affected_paths),
            unaffected_path_errs=[err.build() for err in unaffected_path_errs],
        )
        return self

    def build(self) -> DeleteResp.DeletedObjectResult:
        """Create the DeletedObjectResult.

        Raises:
            BuilderError: If neither set_failure nor set_success was called
        """
        if self._status is None:
            raise BuilderError(f"Cannot produce DeletedObjectResult for {self.requested_path} without failure or success")
        return DeleteResp.DeletedObjectResult(
            requested_path=self.requested_path, oper_status=OperationStatus(oper_status=self._status)
        )


class DeleteRespBuilder:
    def __init__(self) -> None:
        self._deleted_obj_results: list[DeletedObjectResultsBuilder] = []

    def with_deleted_obj_results(self, results: Iterable[DeletedObjectResultsBuilder]) -> "DeleteRespBuilder":
        self._deleted_obj_results = list(results)
        return self

    def build(self) -> Body:
        return response_body(DeleteResp(deleted_obj_results=[result.build() for result in self._deleted_obj_results]))
