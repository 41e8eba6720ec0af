"""Decryption of the AES-CTR encrypted screen mirroring video stream."""

from __future__ import annotations

from typing import Optional

from airmirror.crypto import AES_128_BLOCK_SIZE, AesCtr, Sha512
from airmirror.logger import Logger

AESKEY_LEN = 16

_U64 = 0xFFFFFFFFFFFFFFFF


class MirrorBuffer:
    """Decrypts mirroring payloads that arrive in arbitrarily sized pieces."""

    def __init__(self, aeskey: bytes, logger: Optional[Logger] = None) -> None:
        if aeskey is None or len(aeskey) < AESKEY_LEN:
            raise ValueError(f"audio AES key must be at least {AESKEY_LEN} bytes")
        self.logger = logger
        self._aeskey_audio = bytes(aeskey[:AESKEY_LEN])
        self._aes: Optional[AesCtr] = None
        self._next_decrypt_count = 0
        self._og = bytes(AES_128_BLOCK_SIZE)

    def _hash(self, prefix: str, stream_connection_id: int) -> bytes:
        digest = Sha512()
        digest.update(f"{prefix}{stream_connection_id & _U64}".encode("ascii"))
        digest.update(self._aeskey_audio)
        return digest.final()[:AES_128_BLOCK_SIZE]

    def init_aes(self, stream_connection_id: int) -> None:
        """Derive the video key and IV for a stream connection."""
        key = self._hash("AirPlayStreamKey", stream_connection_id)
        iv = self._hash("AirPlayStreamIV", stream_connection_id)
        self._aes = AesCtr(key, iv)
        self._next_decrypt_count = 0

    def decrypt(self, data: bytes) -> bytes:
        """Decrypt the next piece of the stream and return the plaintext."""
        if self._aes is None:
            raise RuntimeError("init_aes() must be called before decrypt()")
        data = bytes(data)
        length = len(data)
        pending = self._next_decrypt_count
        out = bytearray(length)

        head = min(pending, length)
        leftover = self._og[AES_128_BLOCK_SIZE - pending:]
        out[:head] = bytes(a ^ b for a, b in zip(data[:head], leftover))

        self._next_decrypt_count = 0
        if length < pending:
            return bytes(out)

        encrypt_len = ((length - pending) // AES_128_BLOCK_SIZE) * AES_128_BLOCK_SIZE
        self._aes.start_fresh_block()
        out[pending:pending + encrypt_len] = self._aes.decrypt(
            data[pending:pending + encrypt_len]
        )

        rest_len = (length - pending) % AES_128_BLOCK_SIZE
        if rest_len:
            rest_start = length - rest_len
            block = data[rest_start:].ljust(AES_128_BLOCK_SIZE, b"\x00")
            self._og = self._aes.decrypt(block)
            out[rest_start:] = self._og[:rest_len]
            self._next_decrypt_count = AES_128_BLOCK_SIZE - rest_len
        return bytes(out)