"""Builders for Get requests and GetResp responses."""

from collections.abc import Iterable

from ..msg import Body, Get, GetResp
from .common import StrPairs, err_msg_or_default, request_body, response_body, to_str_map


class GetBuilder:
    def __init__(self) -> None:
        self._max_depth = 0
        self._params: list[str] = []

    def with_max_depth(self, max_depth: int) -> "GetBuilder":
        self._max_depth = max_depth
        return self

    def with_params(self, params: Iterable[str]) -> "GetBuilder":
        self._params = list(params)
        return self

    def build(self) -> Body:
        return request_body(Get(param_paths=list(self._params), max_depth=self._max_depth))


class ResolvedPathResultBuilder:
    def __init__(self, resolved_path: str) -> None:
        self.resolved_path = resolved_path
        self.result_params: dict[str, str] = {}

    def with_result_params(self, result_params: StrPairs) -> "ResolvedPathResultBuilder":
        self.result_params = to_str_map(result_params)
        return self

    def build(self) -> GetResp.ResolvedPathResult:
        return GetResp.ResolvedPathResult(resolved_path=self.resolved_path, result_params=dict(self.result_params))


class GetReqPathResultBuilder:
    """Result for one requested path; an error code without text gets the canned text."""

    def __init__(self, requested_path: str) -> None:
        self.requested_path = requested_path
        self.err_code = 0
        self.err_msg: str | None = None
        self.resolved_path_results: list[ResolvedPathResultBuilder] = []

    def set_err(self, err_code: int, err_msg: str | None = None) -> "GetReqPathResultBuilder":
        self.err_code = err_code
        self.err_msg = err_msg
        return self

    def with_res_path_results(self, results: Iterable[ResolvedPathResultBuilder]) -> "GetReqPathResultBuilder":
        self.resolved_path_results = list(results)
        return self

    def build(self) -> GetResp.RequestedPathResult:
        return GetResp.RequestedPathResult(
            requested_path=self.requested_path,
            err_code=self.err_code,
            err_msg=err_msg_or_default(self.err_code, self.err_msg),
            resolved_path_results=[result.build() for result in self.resolved_path_results],
        )


class GetRespBuilder:
    def __init__(self) -> None:
        self._req_path_results: list[GetReqPathResultBuilder] = []

    def with_req_path_results(self, results: Iterable[GetReqPathResultBuilder]) -> "GetRespBuilder":
        self._req_path_results = list(results)
        return self

    def build(self) -> Body:
        return response_body(GetResp(req_path_results=[result.build() for result in self._req_path_results]))
