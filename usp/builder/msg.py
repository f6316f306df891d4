"""Builder for complete USP Msgs."""

from ..constants import MsgType
from ..errors import BuilderError
from ..msg import (
    Add,
    AddResp,
    Body,
    Delete,
    DeleteResp,
    Deregister,
    DeregisterResp,
    Get,
    GetInstances,
    GetInstancesResp,
    GetResp,
    GetSupportedDM,
    GetSupportedDMResp,
    GetSupportedProtocol,
    GetSupportedProtocolResp,
    Header,
    Msg,
    Notify,
    NotifyResp,
    Operate,
    OperateResp,
    Register,
    RegisterResp,
    Request,
    Response,
    Set,
    SetResp,
)

_REQUEST_TYPES: dict[type, MsgType] = {
    Get: MsgType.GET,
    GetSupportedDM: MsgType.GET_SUPPORTED_DM,
    GetInstances: MsgType.GET_INSTANCES,
    Set: MsgType.SET,
    Add: MsgType.ADD,
    Delete: MsgType.DELETE,
    Operate: MsgType.OPERATE,
    Notify: MsgType.NOTIFY,
    GetSupportedProtocol: MsgType.GET_SUPPORTED_PROTO,
    Register: MsgType.REGISTER,
    Deregister: MsgType.DEREGISTER,
}

_RESPONSE_TYPES: dict[type, MsgType] = {
    GetResp: MsgType.GET_RESP,
    GetSupportedDMResp: MsgType.GET_SUPPORTED_DM_RESP,
    GetInstancesResp: MsgType.GET_INSTANCES_RESP,
    SetResp: MsgType.SET_RESP,
    AddResp: MsgType.ADD_RESP,
    DeleteResp: MsgType.DELETE_RESP,
    OperateResp: MsgType.OPERATE_RESP,
    NotifyResp: MsgType.NOTIFY_RESP,
    GetSupportedProtocolResp: MsgType.GET_SUPPORTED_PROTO_RESP,
    RegisterResp: MsgType.REGISTER_RESP,
    DeregisterResp: MsgType.DEREGISTER_RESP,
}


def msg_type_for(body: Body) -> MsgType:
    """Header type matching the body's selected operation.

    Error bodies and bodies without an operation map to ``MsgType.ERROR``.
    """
    value = body.msg_body
    if isinstance(value, Request):
        return _REQUEST_TYPES.get(type(value.req_type), MsgType.ERROR)
    if isinstance(value, Response):
        return _RESPONSE_TYPES.get(type(value.resp_type), MsgType.ERROR)
    return MsgType.ERROR


class MsgBuilder:
    """Assemble a Msg from an id and a body built by an operation builder."""

    def __init__(self) -> None:
        self._msg_id: str | None = None
        self._body: Body | None = None

    def with_msg_id(self, msg_id: str) -> "MsgBuilder":
        self._msg_id = msg_id
        return self

    def with_body(self, body: Body) -> "MsgBuilder":
        self._body = body
        return self

    def build(self) -> Msg:
        """Create the Msg.

        Raises:
            BuilderError: If the msg_id or the body was never set
        """
        if self._msg_id is None:
            raise BuilderError("Cannot produce USP Msg without msg_id")
        if self._body is None:
            raise BuilderError("Cannot produce USP Msg without msg_body")
        return Msg(
            header=Header(msg_id=self._msg_id, msg_type=msg_type_for(self._body)),
            body=self._body,
        )
