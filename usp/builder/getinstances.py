"""Builders for GetInstances requests and GetInstancesResp responses."""

from collections.abc import Iterable

from ..msg import Body, GetInstances, GetInstancesResp
from .common import StrPairs, err_msg_or_default, request_body, response_body, to_str_map


class GetInstancesBuilder:
    def __init__(self) -> None:
        self._first_level_only = False
        self._obj_paths: list[str] = []

    def with_first_level_only(self, first_level_only: bool) -> "GetInstancesBuilder":
        self._first_level_only = first_level_only
        return self

    def with_obj_paths(self, obj_paths: Iterable[str]) -> "GetInstancesBuilder":
        self._obj_paths = list(obj_paths)
        return self

    def build(self) -> Body:
        return request_body(GetInstances(obj_paths=list(self._obj_paths), first_level_only=self._first_level_only))


class CurrInstanceBuilder:
    def __init__(self, instantiated_obj_path: str) -> None:
        self.instantiated_obj_path = instantiated_obj_path
        self.unique_keys: dict[str, str] = {}

    def with_unique_keys(self, unique_keys: StrPairs) -> "CurrInstanceBuilder":
        self.unique_keys = to_str_map(unique_keys)
        return self

    def build(self) -> GetInstancesResp.CurrInstance:
        return GetInstancesResp.CurrInstance(
            instantiated_obj_path=self.instantiated_obj_path, unique_keys=dict(self.unique_keys)
        )


class GetInstancesRespReqPathResultBuilder:
    def __init__(self, requested_path: str) -> None:
        self.requested_path = requested_path
        self.err_code = 0
        self.err_msg: str | None = None
        self.curr_insts: list[CurrInstanceBuilder] = []

    def set_err(self, err_code: int, err_msg: str | None = None) -> "GetInstancesRespReqPathResultBuilder":
        self.err_code = err_code
        self.err_msg = err_msg
        return self

    def with_curr_insts(self, curr_insts: Iterable[CurrInstanceBuilder]) -> "GetInstancesRespReqPathResultBuilder":
        self.curr_insts = list(curr_insts)
        return self

    def build(self) -> GetInstancesResp.RequestedPathResult:
        return GetInstancesResp.RequestedPathResult(
            requested_path=self.requested_path,
            err_code=self.err_code,
            err_msg=err_msg_or_default(self.err_code, self.err_msg),
            curr_insts=[inst.build() for inst in self.curr_insts],
        )


class GetInstancesRespBuilder:
    def __init__(self) -> None:
        self._req_path_results: list[GetInstancesRespReqPathResultBuilder] = []

    def with_req_path_results(
        self, results: Iterable[GetInstancesRespReqPathResultBuilder]
    ) -> "GetInstancesRespBuilder":
        self._req_path_results = list(results)
        return self

    def build(self) -> Body:
        return response_body(GetInstancesResp(req_path_results=[result.build() for result in self._req_path_results]))
