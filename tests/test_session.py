"""Tests for session context segmentation and reassembly."""

import logging
import threading

import pytest
from pydantic import ValidationError

from usp import (
    DEFAULT_MAX_FRAGMENT_BYTES,
    DEFAULT_MAX_PAYLOAD_BYTES,
    DEFAULT_MAX_SESSIONS,
    DEFAULT_RECORD_VERSION,
    PayloadSARState,
    ReassemblyError,
    SessionConfig,
    SessionReassembler,
    decode_record,
    encode_msg,
    encode_record,
    fragment,
    reassemble,
)
from usp.builder import GetBuilder, MsgBuilder
from usp.record import Record, SessionContextRecord, WebSocketConnectRecord

PAYLOAD = b"abcdefghij"


def test_fragment_states_and_ids() -> None:
    """Test BEGIN/INPROCESS/COMPLETE tagging and sequence ids."""
    records = fragment(PAYLOAD, session_id=9, sequence_id=5, max_fragment_bytes=4)

    assert [record.payload for record in records] == [[b"abcd"], [b"efgh"], [b"ij"]]
    assert [record.sequence_id for record in records] == [5, 6, 7]
    assert [record.payload_sar_state for record in records] == [
        PayloadSARState.BEGIN,
        PayloadSARState.INPROCESS,
        PayloadSARState.COMPLETE,
    ]
    assert all(record.payloadrec_sar_state == record.payload_sar_state for record in records)
    assert all(record.session_id == 9 for record in records)
    assert all(record.expected_id == 8 for record in records)


def test_fragment_small_payloads() -> None:
    """Test payloads that fit in a single record."""
    (record,) = fragment(PAYLOAD, session_id=1, sequence_id=1)
    assert record.payload_sar_state == PayloadSARState.NONE
    assert record.payload == [PAYLOAD]
    assert record.expected_id == 2

    (record,) = fragment(b"", session_id=1, sequence_id=1, expected_id=10, retransmit_id=3)
    assert record.is_unfragmented
    assert record.joined_payload() == b""
    assert record.expected_id == 10
    assert record.retransmit_id == 3

    records = fragment(b"abcd", session_id=1, sequence_id=1, max_fragment_bytes=2)
    assert [record.payload_sar_state for record in records] == [PayloadSARState.BEGIN, PayloadSARState.COMPLETE]

    with pytest.raises(ValueError):
        fragment(PAYLOAD, session_id=1, sequence_id=1, max_fragment_bytes=0)


def test_fragment_size_from_config() -> None:
    """Test that the fragment size comes from SessionConfig unless given."""
    config = SessionConfig(max_fragment_bytes=4)
    assert len(fragment(PAYLOAD, session_id=1, sequence_id=1, config=config)) == 3
    assert len(fragment(PAYLOAD, session_id=1, sequence_id=1, config=config, max_fragment_bytes=5)) == 2
    assert len(fragment(PAYLOAD, session_id=1, sequence_id=1)) == 1


def test_reassemble_any_order() -> None:
    """Test reassembly regardless of arrival order."""
    records = fragment(PAYLOAD, session_id=1, sequence_id=1, max_fragment_bytes=3)
    assert reassemble(reversed(records)) == PAYLOAD
    assert reassemble(fragment(PAYLOAD, session_id=1, sequence_id=1)) == PAYLOAD


def test_reassemble_errors() -> None:
    """Test every invalid fragment set."""
    first, middle, last = fragment(PAYLOAD, session_id=1, sequence_id=1, max_fragment_bytes=4)

    with pytest.raises(ReassemblyError, match="No fragments"):
        reassemble([])
    with pytest.raises(ReassemblyError, match="several sessions"):
        other = SessionContextRecord(
            session_id=2, sequence_id=2, payload_sar_state=PayloadSARState.INPROCESS, payload=[b"x"]
        )
        reassemble([first, other, last])
    with pytest.raises(ReassemblyError, match="Duplicate"):
        reassemble([first, middle, middle, last])
    with pytest.raises(ReassemblyError, match="Missing fragments"):
        reassemble([first, last])
    with pytest.raises(ReassemblyError, match="Invalid SAR state sequence"):
        reassemble([middle, last])
    with pytest.raises(ReassemblyError, match="Invalid SAR state sequence"):
        reassemble([first])


def test_reassembler_out_of_order() -> None:
    """Test buffering until the whole payload has arrived."""
    reassembler = SessionReassembler()
    first, middle, last = fragment(PAYLOAD, session_id=1, sequence_id=5, max_fragment_bytes=4)

    assert reassembler.add(last) is None
    assert reassembler.add(first) is None
    assert reassembler.next_expected(1) == 6
    assert reassembler.pending_sessions() == [1]
    assert len(reassembler) == 1

    assert reassembler.add(middle) == PAYLOAD
    assert len(reassembler) == 0
    assert reassembler.next_expected(1) is None

    # Late copies of delivered fragments are dropped
    assert reassembler.add(middle) is None
    assert len(reassembler) == 0


def test_reassembler_duplicates_and_consecutive_payloads() -> None:
    """Test duplicate fragments and back-to-back payloads in one session."""
    reassembler = SessionReassembler()
    first_payload = fragment(b"first payload", session_id=3, sequence_id=1, max_fragment_bytes=5)
    second_payload = fragment(b"second", session_id=3, sequence_id=4, max_fragment_bytes=4)

    assert reassembler.add(first_payload[0]) is None
    assert reassembler.add(first_payload[0]) is None
    assert reassembler.add(first_payload[1]) is None
    assert reassembler.add(first_payload[2]) == b"first payload"

    assert reassembler.add(second_payload[0]) is None
    assert reassembler.add(second_payload[1]) == b"second"


def test_reassembler_releases_payloads_in_sequence_order() -> None:
    """Test a later payload completing before an earlier one."""
    first_payload = fragment(b"A" * 8, session_id=1, sequence_id=1, max_fragment_bytes=4)
    second_payload = fragment(b"B" * 8, session_id=1, sequence_id=3, max_fragment_bytes=4)

    reassembler = SessionReassembler()
    assert reassembler.add_all(first_payload[0]) == []
    assert reassembler.add_all(second_payload[0]) == []
    assert reassembler.add_all(second_payload[1]) == []
    assert reassembler.next_expected(1) == 2
    assert reassembler.add_all(first_payload[1]) == [b"A" * 8, b"B" * 8]
    assert reassembler.pending_sessions() == []

    # add() hands out one payload per call and queues the rest
    reassembler = SessionReassembler()
    (third_payload,) = fragment(b"C", session_id=1, sequence_id=5)
    for record in (first_payload[0], second_payload[0], second_payload[1]):
        assert reassembler.add(record) is None
    assert reassembler.add(first_payload[1]) == b"A" * 8
    assert reassembler.pending_sessions() == [1]
    assert reassembler.add(third_payload) == b"B" * 8
    assert reassembler.pop_ready(1) == [b"C"]
    assert reassembler.pop_ready(1) == []
    assert len(reassembler) == 0


def test_reassembler_keeps_late_earlier_payload() -> None:
    """Test an earlier payload whose fragments all arrive after a later one."""
    first_payload = fragment(b"A" * 8, session_id=1, sequence_id=1, max_fragment_bytes=4)
    second_payload = fragment(b"B" * 8, session_id=1, sequence_id=3, max_fragment_bytes=4)

    reassembler = SessionReassembler()
    assert reassembler.add(second_payload[0]) is None
    assert reassembler.add(second_payload[1]) == b"B" * 8
    assert reassembler.add(first_payload[0]) is None
    assert reassembler.add(first_payload[1]) == b"A" * 8

    assert reassembler.add(first_payload[0]) is None
    assert reassembler.add(second_payload[1]) is None
    assert len(reassembler) == 0


def test_reassembler_unfragmented_after_partial_payload() -> None:
    """Test a NONE record waiting behind an unfinished payload."""
    first, middle, last = fragment(PAYLOAD, session_id=1, sequence_id=1, max_fragment_bytes=4)
    (whole,) = fragment(b"xyz", session_id=1, sequence_id=4)

    reassembler = SessionReassembler()
    assert reassembler.add(first) is None
    assert reassembler.add(whole) is None
    assert reassembler.pending_sessions() == [1]
    assert reassembler.next_expected(1) == 2

    assert reassembler.add(middle) is None
    assert reassembler.add_all(last) == [PAYLOAD, b"xyz"]
    assert reassembler.pending_sessions() == []
    assert reassembler.next_expected(1) is None
    assert reassembler.add(whole) is None


def test_reassembler_rejects_interrupted_payload() -> None:
    """Test a BEGIN fragment arriving inside an unfinished payload."""
    first = fragment(PAYLOAD, session_id=1, sequence_id=1, max_fragment_bytes=4)[0]
    restart = fragment(PAYLOAD, session_id=1, sequence_id=2, max_fragment_bytes=4)[0]

    reassembler = SessionReassembler()
    assert reassembler.add(first) is None
    with pytest.raises(ReassemblyError, match="inside a payload that began at 1"):
        reassembler.add(restart)
    assert reassembler.pending_sessions() == []


def test_reassembler_unfragmented_and_records() -> None:
    """Test whole payloads and Record wrappers."""
    reassembler = SessionReassembler()
    (record,) = fragment(PAYLOAD, session_id=4, sequence_id=1)
    assert reassembler.add(Record(record_type=record)) == PAYLOAD

    with pytest.raises(ReassemblyError, match="websocket_connect"):
        reassembler.add(Record(record_type=WebSocketConnectRecord()))


def test_reassembler_decodes_msgs() -> None:
    """Test a fragmented Msg travelling as encoded Records."""
    body = GetBuilder().with_params([f"Device.Interface.{i}." for i in range(50)]).build()
    msg = MsgBuilder().with_msg_id("big").with_body(body).build()

    records = [
        Record(version="1.3", to_id="agent", from_id="controller", record_type=context)
        for context in fragment(encode_msg(msg), session_id=7, sequence_id=1, max_fragment_bytes=64)
    ]
    assert len(records) > 2

    reassembler = SessionReassembler()
    results = [reassembler.add_msg(decode_record(encode_record(record))) for record in records]
    assert results[:-1] == [None] * (len(records) - 1)
    assert results[-1] == msg


def test_reassembler_payload_limit() -> None:
    """Test that oversized payloads are discarded."""
    reassembler = SessionReassembler(SessionConfig(max_payload_bytes=5))
    first, middle, _ = fragment(PAYLOAD, session_id=1, sequence_id=1, max_fragment_bytes=4)

    assert reassembler.add(first) is None
    with pytest.raises(ReassemblyError, match="exceeds 5 bytes"):
        reassembler.add(middle)
    assert reassembler.pending_sessions() == []


def test_reassembler_evicts_oldest_session(caplog: pytest.LogCaptureFixture) -> None:
    """Test the session limit."""
    reassembler = SessionReassembler(SessionConfig(max_sessions=2))
    with caplog.at_level(logging.WARNING):
        for session_id in (1, 2, 3):
            reassembler.add(fragment(PAYLOAD, session_id=session_id, sequence_id=1, max_fragment_bytes=4)[0])

    assert reassembler.pending_sessions() == [2, 3]
    assert "Evicting session 1" in caplog.text


def test_reassembler_discard() -> None:
    """Test dropping a session explicitly."""
    reassembler = SessionReassembler()
    reassembler.add(fragment(PAYLOAD, session_id=1, sequence_id=1, max_fragment_bytes=4)[0])
    assert reassembler.discard(1) is True
    assert reassembler.discard(1) is False
    assert len(reassembler) == 0


def test_reassembler_concurrent_sessions() -> None:
    """Test many sessions fed from separate threads."""
    reassembler = SessionReassembler()
    results: dict[int, bytes] = {}
    lock = threading.Lock()

    def feed(session_id: int) -> None:
        payload = bytes([session_id]) * 1000
        for record in fragment(payload, session_id=session_id, sequence_id=1, max_fragment_bytes=64):
            data = reassembler.add(record)
            if data is not None:
                with lock:
                    results[session_id] = data

    threads = [threading.Thread(target=feed, args=(session_id,)) for session_id in range(1, 9)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert results == {session_id: bytes([session_id]) * 1000 for session_id in range(1, 9)}
    assert len(reassembler) == 0


def test_session_config() -> None:
    """Test configuration defaults and validation."""
    config = SessionConfig()
    assert config.max_fragment_bytes == DEFAULT_MAX_FRAGMENT_BYTES
    assert config.max_payload_bytes == DEFAULT_MAX_PAYLOAD_BYTES
    assert config.max_sessions == DEFAULT_MAX_SESSIONS
    assert config.record_version == DEFAULT_RECORD_VERSION

    with pytest.raises(ValidationError):
        SessionConfig(max_sessions=0)
    with pytest.raises(ValidationError):
        SessionConfig(max_fragment_bytes=0)
    with pytest.raises(ValidationError):
        SessionConfig(record_version="")
