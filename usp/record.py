"""USP Record 1.3 schema: the transport envelope around encoded Msgs."""

from __future__ import annotations

from dataclasses import dataclass, field

from .constants import MQTTVersion, PayloadSARState, PayloadSecurity, STOMPVersion
from .fields import BYTES, FIXED32, STRING, UINT64, EnumOf, Field, Message, MessageOf, Oneof

# ----------------------------------------------------------------------------
# Record types
# ----------------------------------------------------------------------------


@dataclass
class NoSessionContextRecord(Message):
    """A whole encoded Msg, sent without session context."""

    payload: bytes = b""

    FIELDS = (Field(2, "payload", BYTES),)


@dataclass
class SessionContextRecord(Message):
    """One payload segment of a session context exchange."""

    session_id: int = 0
    sequence_id: int = 0
    expected_id: int = 0
    retransmit_id: int = 0
    payload_sar_state: PayloadSARState = PayloadSARState.NONE
    payloadrec_sar_state: PayloadSARState = PayloadSARState.NONE
    payload: list[bytes] = field(default_factory=list)

    FIELDS = (
        Field(1, "session_id", UINT64),
        Field(2, "sequence_id", UINT64),
        Field(3, "expected_id", UINT64),
        Field(4, "retransmit_id", UINT64),
        Field(5, "payload_sar_state", EnumOf(PayloadSARState)),
        Field(6, "payloadrec_sar_state", EnumOf(PayloadSARState)),
        Field(7, "payload", BYTES, repeated=True),
    )

    @classmethod
    def new_unfragmented(
        cls,
        session_id: int,
        sequence_id: int,
        expected_id: int,
        retransmit_id: int,
        payload: bytes,
    ) -> SessionContextRecord:
        """Create a record carrying a whole payload in a single segment.

        Both SAR states are NONE and the payload becomes the only item.
        """
        return cls(
            session_id=session_id,
            sequence_id=sequence_id,
            expected_id=expected_id,
            retransmit_id=retransmit_id,
            payload_sar_state=PayloadSARState.NONE,
            payloadrec_sar_state=PayloadSARState.NONE,
            payload=[payload],
        )

    @property
    def is_unfragmented(self) -> bool:
        return self.payload_sar_state == PayloadSARState.NONE and self.payloadrec_sar_state == PayloadSARState.NONE

    def joined_payload(self) -> bytes:
        return b"".join(self.payload)


@dataclass
class WebSocketConnectRecord(Message):
    """Connection notice for the WebSocket MTP."""


@dataclass
class MQTTConnectRecord(Message):
    version: MQTTVersion = MQTTVersion.V3_1_1
    subscribed_topic: str = ""

    FIELDS = (
        Field(1, "version", EnumOf(MQTTVersion)),
        Field(2, "subscribed_topic", STRING),
    )


@dataclass
class STOMPConnectRecord(Message):
    version: STOMPVersion = STOMPVersion.V1_2
    subscribed_destination: str = ""

    FIELDS = (
        Field(1, "version", EnumOf(STOMPVersion)),
        Field(2, "subscribed_destination", STRING),
    )


@dataclass
class UDSConnectRecord(Message):
    """Connection notice for the Unix domain socket MTP."""


@dataclass
class DisconnectRecord(Message):
    reason: str = ""
    reason_code: int = 0

    FIELDS = (
        Field(1, "reason", STRING),
        Field(2, "reason_code", FIXED32),
    )


# ----------------------------------------------------------------------------
# Record
# ----------------------------------------------------------------------------


@dataclass
class Record(Message):
    """Transport envelope with routing fields and one record type."""

    version: str = ""
    to_id: str = ""
    from_id: str = ""
    payload_security: PayloadSecurity = PayloadSecurity.PLAINTEXT
    mac_signature: bytes = b""
    sender_cert: bytes = b""
    record_type: (
        NoSessionContextRecord
        | SessionContextRecord
        | WebSocketConnectRecord
        | MQTTConnectRecord
        | STOMPConnectRecord
        | DisconnectRecord
        | UDSConnectRecord
        | None
    ) = None

    FIELDS = (
        Field(1, "version", STRING),
        Field(2, "to_id", STRING),
        Field(3, "from_id", STRING),
        Field(4, "payload_security", EnumOf(PayloadSecurity)),
        Field(5, "mac_signature", BYTES),
        Field(6, "sender_cert", BYTES),
        Oneof(
            "record_type",
            (
                Field(7, "no_session_context", MessageOf(NoSessionContextRecord)),
                Field(8, "session_context", MessageOf(SessionContextRecord)),
                Field(9, "websocket_connect", MessageOf(WebSocketConnectRecord)),
                Field(10, "mqtt_connect", MessageOf(MQTTConnectRecord)),
                Field(11, "stomp_connect", MessageOf(STOMPConnectRecord)),
                Field(12, "disconnect", MessageOf(DisconnectRecord)),
                Field(13, "uds_connect", MessageOf(UDSConnectRecord)),
            ),
        ),
    )

    def get_msg_payload(self) -> bytes | None:
        """Return the encoded Msg this record carries whole.

        Returns:
            The payload of a NoSessionContext record or of an unfragmented
            SessionContext record, otherwise None
        """
        record_type = self.record_type
        if isinstance(record_type, NoSessionContextRecord):
            return record_type.payload
        if isinstance(record_type, SessionContextRecord) and record_type.is_unfragmented:
            return record_type.joined_payload()
        return None
