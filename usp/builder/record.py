"""Builders for USP Records and their session context payloads."""

from ..config import SessionConfig
from ..constants import MQTTVersion, PayloadSARState, PayloadSecurity, STOMPVersion
from ..errors import BuilderError
from ..fields import Message
from ..msg import Msg
from ..record import (
    DisconnectRecord,
    MQTTConnectRecord,
    NoSessionContextRecord,
    Record,
    SessionContextRecord,
    STOMPConnectRecord,
    UDSConnectRecord,
    WebSocketConnectRecord,
)
from .common import coerce_enum


class SessionContextBuilder:
    """Assemble a SessionContextRecord.

    ``expected_id`` defaults to the sequence id following this record.
    """

    def __init__(self) -> None:
        self._session_id: int | None = None
        self._sequence_id: int | None = None
        self._expected_id: int | None = None
        self._retransmit_id = 0
        self._payload_sar_state = PayloadSARState.NONE
        self._payloadrec_sar_state = PayloadSARState.NONE
        self._payload: list[bytes] = []

    def with_session_id(self, session_id: int) -> "SessionContextBuilder":
        self._session_id = session_id
        return self

    def with_sequence_id(self, sequence_id: int) -> "SessionContextBuilder":
        self._sequence_id = sequence_id
        return self

    def with_expected_id(self, expected_id: int) -> "SessionContextBuilder":
        self._expected_id = expected_id
        return self

    def with_retransmit_id(self, retransmit_id: int) -> "SessionContextBuilder":
        self._retransmit_id = retransmit_id
        return self

    def with_payload_sar_state(self, state: PayloadSARState) -> "SessionContextBuilder":
        self._payload_sar_state = PayloadSARState(state)
        return self

    def with_payloadrec_sar_state(self, state: PayloadSARState) -> "SessionContextBuilder":
        self._payloadrec_sar_state = PayloadSARState(state)
        return self

    def with_payload(self, payload: bytes) -> "SessionContextBuilder":
        """Append one payload item."""
        self._payload.append(bytes(payload))
        return self

    def with_msg(self, msg: Msg) -> "SessionContextBuilder":
        return self.with_payload(msg.to_bytes())

    def build(self) -> SessionContextRecord:
        """Create the record.

        Raises:
            BuilderError: If the session id, the sequence id or the payload
                is missing
        """
        if self._session_id is None:
            raise BuilderError("Cannot produce USP SessionContextRecord without session_id")
        if self._sequence_id is None:
            raise BuilderError("Cannot produce USP SessionContextRecord without sequence_id")
        if not self._payload:
            raise BuilderError("Cannot produce USP SessionContextRecord without payload")
        expected_id = self._expected_id if self._expected_id is not None else self._sequence_id + 1
        return SessionContextRecord(
            session_id=self._session_id,
            sequence_id=self._sequence_id,
            expected_id=expected_id,
            retransmit_id=self._retransmit_id,
            payload_sar_state=self._payload_sar_state,
            payloadrec_sar_state=self._payloadrec_sar_state,
            payload=list(self._payload),
        )


class RecordBuilder:
    """Assemble a Record around a Msg payload or a connection notice.

    Exactly one record type is kept; selecting another replaces it.
    """

    def __init__(self, config: SessionConfig | None = None) -> None:
        self._config = config or SessionConfig()
        self._version = ""
        self._to_id: str | None = None
        self._from_id: str | None = None
        self._sender_cert = b""
        self._mac_signature = b""
        self._payload_security = PayloadSecurity.PLAINTEXT
        self._record_type: Message | SessionContextBuilder | None = None

    def with_version(self, version: str) -> "RecordBuilder":
        self._version = version
        return self

    def with_to_id(self, to_id: str) -> "RecordBuilder":
        self._to_id = to_id
        return self

    def with_from_id(self, from_id: str) -> "RecordBuilder":
        self._from_id = from_id
        return self

    def with_sender_cert(self, sender_cert: bytes) -> "RecordBuilder":
        self._sender_cert = bytes(sender_cert)
        return self

    def with_mac_signature(self, mac_signature: bytes) -> "RecordBuilder":
        self._mac_signature = bytes(mac_signature)
        return self

    def with_payload_security(self, payload_security: PayloadSecurity) -> "RecordBuilder":
        self._payload_security = PayloadSecurity(payload_security)
        return self

    def with_no_session_context_payload(self, msg: Msg) -> "RecordBuilder":
        """Carry ``msg`` encoded, without session context."""
        return self.with_no_session_context_payload_bytes(msg.to_bytes())

    def with_no_session_context_payload_bytes(self, payload: bytes) -> "RecordBuilder":
        self._record_type = NoSessionContextRecord(payload=bytes(payload))
        return self

    def with_session_context_builder(self, builder: SessionContextBuilder) -> "RecordBuilder":
        self._record_type = builder
        return self

    def as_websocket_connect_record(self) -> "RecordBuilder":
        self._record_type = WebSocketConnectRecord()
        return self

    def as_mqtt_connect_record(self, version: MQTTVersion | str, subscribed_topic: str) -> "RecordBuilder":
        self._record_type = MQTTConnectRecord(
            version=coerce_enum(MQTTVersion, version, "MQTT"), subscribed_topic=subscribed_topic
        )
        return self

    def as_stomp_connect_record(self, version: STOMPVersion | str, subscribed_destination: str) -> "RecordBuilder":
        self._record_type = STOMPConnectRecord(
            version=coerce_enum(STOMPVersion, version, "STOMP"), subscribed_destination=subscribed_destination
        )
        return self

    def as_disconnect_record(self, reason: str, reason_code: int) -> "RecordBuilder":
        self._record_type = DisconnectRecord(reason=reason, reason_code=reason_code)
        return self

    def as_uds_connect_record(self) -> "RecordBuilder":
        self._record_type = UDSConnectRecord()
        return self

    def build(self) -> Record:
        """Create the Record.

        Raises:
            BuilderError: If to_id, from_id or the record type is missing,
                or the session context builder fails
        """
        if self._to_id is None:
            raise BuilderError("Cannot produce USP Record without to_id")
        if self._from_id is None:
            raise BuilderError("Cannot produce USP Record without from_id")
        if self._record_type is None:
            raise BuilderError("Cannot produce a USP Record without type")

        record_type = self._record_type
        if isinstance(record_type, SessionContextBuilder):
            record_type = record_type.build()

        return Record(
            version=self._version or self._config.record_version,
            to_id=self._to_id,
            from_id=self._from_id,
            payload_security=self._payload_security,
            mac_signature=self._mac_signature,
            sender_cert=self._sender_cert,
            record_type=record_type,
        )
