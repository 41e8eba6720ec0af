"""Containers for decoded video and audio payloads handed to renderers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class H264DecodeData:
    """A chunk of H.264 NAL units together with its presentation timestamp."""

    nal_count: int
    data: bytes
    pts: int

    @property
    def data_len(self) -> int:
        return len(self.data)


@dataclass
class AudioDecodeData:
    """An audio payload with its NTP and RTP timing information."""

    data: bytes
    ntp_time: int
    rtp_time: int
    have_synced: bool = False

    @property
    def data_len(self) -> int:
        return len(self.data)