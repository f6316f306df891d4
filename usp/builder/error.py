"""Builder for Error bodies."""

from collections.abc import Iterable

from ..msg import Body, Error
from .common import err_msg_or_default


class ErrorBuilder:
    """Assemble an Error body.

    Parameter errors are ``(param_path, err_code, err_msg)`` tuples and are
    kept as given.
    """

    def __init__(self) -> None:
        self._code = 0
        self._message: str | None = None
        self._param_errs: list[tuple[str, int, str]] = []

    def set_err(self, err_code: int, err_msg: str | None = None) -> "ErrorBuilder":
        self._code = err_code
        self._message = err_msg
        return self

    def with_param_errs(self, param_errs: Iterable[tuple[str, int, str]]) -> "ErrorBuilder":
        self._param_errs = list(param_errs)
        return self

    def build(self) -> Body:
        return Body(
            msg_body=Error(
                err_code=self._code,
                err_msg=err_msg_or_default(self._code, self._message),
                param_errs=[
                    Error.ParamError(param_path=path, err_code=code, err_msg=msg)
                    for path, code, msg in self._param_errs
                ],
            )
        )
