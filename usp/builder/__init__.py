"""Fluent builders for USP Msgs and Records.

Operation builders produce a :class:`~usp.msg.Body`; wrap it with
:class:`MsgBuilder` to get a complete Msg and hand that to
:class:`RecordBuilder` for transport.
"""

from .add import (
    AddBuilder,
    AddOperationStatus,
    AddRespBuilder,
    AddRespParameterError,
    CreatedObjectResultsBuilder,
    CreateObjectBuilder,
)
from .delete import (
    DeleteBuilder,
    DeletedObjectResultsBuilder,
    DeleteRespBuilder,
    DeleteRespUnaffectedPathError,
)
from .deregister import (
    DeregisterBuilder,
    DeregisteredPathResultBuilder,
    DeregisterRespBuilder,
)
from .error import ErrorBuilder
from .get import (
    GetBuilder,
    GetReqPathResultBuilder,
    GetRespBuilder,
    ResolvedPathResultBuilder,
)
from .getinstances import (
    CurrInstanceBuilder,
    GetInstancesBuilder,
    GetInstancesRespBuilder,
    GetInstancesRespReqPathResultBuilder,
)
from .getsupporteddm import (
    GetSupportedDMBuilder,
    GetSupportedDMRespBuilder,
    GSDMCommandResult,
    GSDMEventResult,
    GSDMParamResult,
    GSDMReqObjectResultBuilder,
    GSDMSupportedObjectResultBuilder,
)
from .getsupportedprotocol import (
    GetSupportedProtocolBuilder,
    GetSupportedProtocolRespBuilder,
)
from .msg import MsgBuilder, msg_type_for
from .notify import NotifyBuilder, NotifyRespBuilder
from .operate import (
    OperateBuilder,
    OperateRespBuilder,
    OperateRespResultBuilder,
)
from .record import RecordBuilder, SessionContextBuilder
from .register import (
    RegisterBuilder,
    RegisteredPathResultBuilder,
    RegisterRespBuilder,
)
from .set import (
    SetBuilder,
    SetOperationStatus,
    SetOperationSuccessBuilder,
    SetRespBuilder,
    SetRespParameterError,
    UpdatedInstanceFailureBuilder,
    UpdatedObjectResultsBuilder,
    UpdateObjectBuilder,
)

__all__ = [
    # Msg and Record
    "MsgBuilder",
    "msg_type_for",
    "RecordBuilder",
    "SessionContextBuilder",
    "ErrorBuilder",
    # Get
    "GetBuilder",
    "GetRespBuilder",
    "GetReqPathResultBuilder",
    "ResolvedPathResultBuilder",
    # GetInstances
    "GetInstancesBuilder",
    "GetInstancesRespBuilder",
    "GetInstancesRespReqPathResultBuilder",
    "CurrInstanceBuilder",
    # GetSupportedDM
    "GetSupportedDMBuilder",
    "GetSupportedDMRespBuilder",
    "GSDMCommandResult",
    "GSDMEventResult",
    "GSDMParamResult",
    "GSDMReqObjectResultBuilder",
    "GSDMSupportedObjectResultBuilder",
    # GetSupportedProtocol
    "GetSupportedProtocolBuilder",
    "GetSupportedProtocolRespBuilder",
    # Add
    "AddBuilder",
    "CreateObjectBuilder",
    "AddRespBuilder",
    "AddRespParameterError",
    "AddOperationStatus",
    "CreatedObjectResultsBuilder",
    # Delete
    "DeleteBuilder",
    "DeleteRespBuilder",
    "DeleteRespUnaffectedPathError",
    "DeletedObjectResultsBuilder",
    # Set
    "SetBuilder",
    "UpdateObjectBuilder",
    "SetRespBuilder",
    "SetRespParameterError",
    "SetOperationStatus",
    "SetOperationSuccessBuilder",
    "UpdatedInstanceFailureBuilder",
    "UpdatedObjectResultsBuilder",
    # Operate
    "OperateBuilder",
    "OperateRespBuilder",
    "OperateRespResultBuilder",
    # Notify
    "NotifyBuilder",
    "NotifyRespBuilder",
    # Register and Deregister
    "RegisterBuilder",
    "RegisterRespBuilder",
    "RegisteredPathResultBuilder",
    "DeregisterBuilder",
    "DeregisterRespBuilder",
    "DeregisteredPathResultBuilder",
]
