"""Segmentation and reassembly (SAR) of session context payloads.

A sender splits an encoded Msg over several SessionContextRecords tagged
BEGIN, INPROCESS... and COMPLETE with consecutive sequence ids. The
receiver buffers fragments per session until the COMPLETE fragment and
every fragment back to BEGIN have arrived, then concatenates them.
"""

import logging
import threading
from collections import OrderedDict, deque
from collections.abc import Iterable
from dataclasses import dataclass, field

from .codec import decode_msg
from .config import SessionConfig
from .constants import PayloadSARState
from .errors import ReassemblyError
from .msg import Msg
from .record import Record, SessionContextRecord

# ----------------------------------------------------------------------------
# Sender side
# ----------------------------------------------------------------------------


def fragment(
    payload: bytes,
    session_id: int,
    sequence_id: int,
    *,
    config: SessionConfig | None = None,
    max_fragment_bytes: int | None = None,
    expected_id: int | None = None,
    retransmit_id: int = 0,
) -> list[SessionContextRecord]:
    """Split a payload into session context records.

    Args:
        payload: Encoded Msg to send
        session_id: Session the records belong to
        sequence_id: Sequence id of the first record
        config: Session limits; ``max_fragment_bytes`` is taken from here
            unless given explicitly
        max_fragment_bytes: Largest payload segment per record
        expected_id: Sequence id expected from the peer next; defaults to
            the id following the last record
        retransmit_id: Sequence id the peer is asked to resend, 0 for none

    Returns:
        A single unfragmented record when the payload fits, otherwise
        BEGIN, INPROCESS... COMPLETE records with consecutive sequence ids

    Raises:
        ValueError: If max_fragment_bytes is smaller than 1
    """
    if max_fragment_bytes is None:
        max_fragment_bytes = (config or SessionConfig()).max_fragment_bytes
    if max_fragment_bytes < 1:
        raise ValueError(f"max_fragment_bytes must be positive, got {max_fragment_bytes}")

    chunks = [bytes(payload[i : i + max_fragment_bytes]) for i in range(0, len(payload), max_fragment_bytes)]
    if not chunks:
        chunks = [b""]
    if expected_id is None:
        expected_id = sequence_id + len(chunks)

    if len(chunks) == 1:
        return [SessionContextRecord.new_unfragmented(session_id, sequence_id, expected_id, retransmit_id, chunks[0])]

    records = []
    last = len(chunks) - 1
    for index, chunk in enumerate(chunks):
        if index == 0:
            state = PayloadSARState.BEGIN
        elif index == last:
            state = PayloadSARState.COMPLETE
        else:
            state = PayloadSARState.INPROCESS
        records.append(
            SessionContextRecord(
                session_id=session_id,
                sequence_id=sequence_id + index,
                expected_id=expected_id,
                retransmit_id=retransmit_id,
                payload_sar_state=state,
                payloadrec_sar_state=state,
                payload=[chunk],
            )
        )
    return records


# ----------------------------------------------------------------------------
# Receiver side
# ----------------------------------------------------------------------------


def reassemble(records: Iterable[SessionContextRecord]) -> bytes:
    """Concatenate the fragments of one payload in sequence order.

    Args:
        records: Either a single NONE record, or a BEGIN, INPROCESS...,
            COMPLETE run of one session in any order

    Returns:
        The reassembled payload

    Raises:
        ReassemblyError: If the records are empty, belong to different
            sessions, have gaps or duplicates, or are not a valid SAR run
    """
    ordered = sorted(records, key=lambda record: record.sequence_id)
    if not ordered:
        raise ReassemblyError("No fragments to reassemble")

    session_ids = {record.session_id for record in ordered}
    if len(session_ids) > 1:
        raise ReassemblyError(f"Fragments belong to several sessions: {sorted(session_ids)}")

    if len(ordered) == 1 and ordered[0].payload_sar_state == PayloadSARState.NONE:
        return ordered[0].joined_payload()

    for previous, current in zip(ordered, ordered[1:]):
        if current.sequence_id == previous.sequence_id:
            raise ReassemblyError(f"Duplicate fragment with sequence id {current.sequence_id}")
        if current.sequence_id != previous.sequence_id + 1:
            raise ReassemblyError(f"Missing fragments between sequence ids {previous.sequence_id} and {current.sequence_id}")

    states = [record.payload_sar_state for record in ordered]
    if (
        len(states) < 2
        or states[0] != PayloadSARState.BEGIN
        or states[-1] != PayloadSARState.COMPLETE
        or any(state != PayloadSARState.INPROCESS for state in states[1:-1])
    ):
        names = ", ".join(state.name for state in states)
        raise ReassemblyError(f"Invalid SAR state sequence: {names}")

    return b"".join(record.joined_payload() for record in ordered)


def _payload_size(record: SessionContextRecord) -> int:
    return sum(len(item) for item in record.payload)


@dataclass
class _SessionState:
    fragments: dict[int, SessionContextRecord] = field(default_factory=dict)
    buffered_bytes: int = 0
    # Sorted, non-adjacent (first, last) sequence id ranges already delivered
    delivered: list[tuple[int, int]] = field(default_factory=list)
    ready: deque[bytes] = field(default_factory=deque)

    @property
    def pending(self) -> bool:
        return bool(self.fragments or self.ready)

    def was_delivered(self, sequence_id: int) -> bool:
        return any(first <= sequence_id <= last for first, last in self.delivered)

    def mark_delivered(self, first: int, last: int) -> None:
        merged: list[tuple[int, int]] = []
        for low, high in sorted([*self.delivered, (first, last)]):
            if merged and low <= merged[-1][1] + 1:
                merged[-1] = (merged[-1][0], max(merged[-1][1], high))
            else:
                merged.append((low, high))
        self.delivered = merged

    def drop_fragments(self) -> None:
        self.fragments.clear()
        self.buffered_bytes = 0


class SessionReassembler:
    """Thread-safe reassembly buffer keyed by session id.

    Fragments may arrive out of order. Payloads of one session are released
    in sequence order: a complete payload is held while any fragment with a
    lower sequence id is still buffered. Duplicates and fragments of
    payloads that were already delivered are dropped.
    """

    def __init__(self, config: SessionConfig | None = None) -> None:
        self.config = config or SessionConfig()
        self._sessions: OrderedDict[int, _SessionState] = OrderedDict()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return sum(1 for state in self._sessions.values() if state.pending)

    def add(self, record: SessionContextRecord | Record) -> bytes | None:
        """Buffer one fragment.

        When a fragment completes several payloads at once, the earliest is
        returned and the rest stay queued. Later calls to :meth:`add` for the
        session return them first; :meth:`pop_ready` drains them directly.

        Args:
            record: A SessionContextRecord, or a Record carrying one

        Returns:
            The next payload in sequence order, otherwise None

        Raises:
            ReassemblyError: If the record has no session context, the
                session exceeds the configured payload size, or a BEGIN or
                NONE fragment interrupts an unfinished payload
        """
        record = _session_context(record)
        with self._lock:
            state = self._offer(record)
            return state.ready.popleft() if state.ready else None

    def add_all(self, record: SessionContextRecord | Record) -> list[bytes]:
        """Buffer one fragment and return every payload ready for its session."""
        record = _session_context(record)
        with self._lock:
            state = self._offer(record)
            payloads = list(state.ready)
            state.ready.clear()
            return payloads

    def add_msg(self, record: SessionContextRecord | Record) -> Msg | None:
        """Buffer one fragment and decode the payload once complete."""
        payload = self.add(record)
        if payload is None:
            return None
        return decode_msg(payload)

    def pop_ready(self, session_id: int) -> list[bytes]:
        """Take the payloads completed for a session but not yet returned."""
        with self._lock:
            state = self._sessions.get(session_id)
            if state is None:
                return []
            payloads = list(state.ready)
            state.ready.clear()
            return payloads

    def next_expected(self, session_id: int) -> int | None:
        """Lowest sequence id missing from a partially received payload."""
        with self._lock:
            state = self._sessions.get(session_id)
            if state is None or not state.fragments:
                return None
            sequence_id = min(state.fragments)
            while sequence_id in state.fragments:
                sequence_id += 1
            return sequence_id

    def pending_sessions(self) -> list[int]:
        with self._lock:
            return [session_id for session_id, state in self._sessions.items() if state.pending]

    def discard(self, session_id: int) -> bool:
        """Forget everything buffered for a session."""
        with self._lock:
            return self._sessions.pop(session_id, None) is not None

    def _state_for(self, session_id: int) -> _SessionState:
        state = self._sessions.get(session_id)
        if state is not None:
            self._sessions.move_to_end(session_id)
            return state
        if len(self._sessions) >= self.config.max_sessions:
            evicted, old = self._sessions.popitem(last=False)
            if old.pending:
                logging.warning(
                    "Evicting session %d with %d buffered fragments and %d undelivered payloads",
                    evicted,
                    len(old.fragments),
                    len(old.ready),
                )
        state = self._sessions[session_id] = _SessionState()
        return state

    def _offer(self, record: SessionContextRecord) -> _SessionState:
        session_id = record.session_id
        sequence_id = record.sequence_id
        state = self._state_for(session_id)

        if state.was_delivered(sequence_id):
            logging.debug("Session %d: dropping stale fragment %d", session_id, sequence_id)
            return state
        if sequence_id in state.fragments:
            logging.debug("Session %d: dropping duplicate fragment %d", session_id, sequence_id)
            return state

        size = _payload_size(record)
        if state.buffered_bytes + size > self.config.max_payload_bytes:
            state.drop_fragments()
            logging.warning("Session %d: payload exceeds %d bytes, discarding", session_id, self.config.max_payload_bytes)
            raise ReassemblyError(f"Session {session_id} payload exceeds {self.config.max_payload_bytes} bytes")

        state.fragments[sequence_id] = record
        state.buffered_bytes += size
        self._release(session_id, state)
        return state

    def _release(self, session_id: int, state: _SessionState) -> None:
        while state.fragments:
            chain = self._leading_chain(session_id, state)
            if chain is None:
                return
            payload = reassemble(chain)
            for record in chain:
                del state.fragments[record.sequence_id]
                state.buffered_bytes -= _payload_size(record)
            state.mark_delivered(chain[0].sequence_id, chain[-1].sequence_id)
            state.ready.append(payload)
            logging.debug("Session %d: reassembled %d bytes from %d fragments", session_id, len(payload), len(chain))

    def _leading_chain(self, session_id: int, state: _SessionState) -> list[SessionContextRecord] | None:
        """The payload starting at the lowest buffered sequence id, if complete."""
        first = min(state.fragments)
        head = state.fragments[first]
        if head.payload_sar_state == PayloadSARState.NONE:
            return [head]
        if head.payload_sar_state != PayloadSARState.BEGIN:
            return None

        chain = [head]
        sequence_id = first + 1
        while sequence_id in state.fragments:
            record = state.fragments[sequence_id]
            chain.append(record)
            if record.payload_sar_state == PayloadSARState.COMPLETE:
                return chain
            if record.payload_sar_state != PayloadSARState.INPROCESS:
                state.drop_fragments()
                logging.warning(
                    "Session %d: %s fragment %d interrupts a payload, discarding",
                    session_id,
                    record.payload_sar_state.name,
                    sequence_id,
                )
                raise ReassemblyError(
                    f"Session {session_id}: {record.payload_sar_state.name} fragment {sequence_id} "
                    f"inside a payload that began at {first}"
                )
            sequence_id += 1
        return None


def _session_context(record: SessionContextRecord | Record) -> SessionContextRecord:
    if isinstance(record, Record):
        if not isinstance(record.record_type, SessionContextRecord):
            raise ReassemblyError(f"Record of type {record.which('record_type')} has no session context")
        return record.record_type
    return record
