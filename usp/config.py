"""Configuration models for session context handling."""

from pydantic import BaseModel, Field

from .constants import (
    DEFAULT_MAX_FRAGMENT_BYTES,
    DEFAULT_MAX_PAYLOAD_BYTES,
    DEFAULT_MAX_SESSIONS,
    DEFAULT_RECORD_VERSION,
)


class SessionConfig(BaseModel):
    """Limits for segmentation and reassembly of session context payloads."""

    max_fragment_bytes: int = Field(
        DEFAULT_MAX_FRAGMENT_BYTES, ge=1, description="Largest payload segment placed in one Record"
    )
    max_payload_bytes: int = Field(
        DEFAULT_MAX_PAYLOAD_BYTES, ge=1, description="Largest payload accepted for reassembly"
    )
    max_sessions: int = Field(
        DEFAULT_MAX_SESSIONS, ge=1, description="Partially reassembled sessions kept before evicting the oldest"
    )
    record_version: str = Field(
        DEFAULT_RECORD_VERSION, min_length=1, description="Record version written by RecordBuilder"
    )
