"""Pair-verify handshake: X25519 key agreement with Ed25519 signatures."""

from __future__ import annotations

from enum import Enum, auto
from typing import Optional

from airmirror.crypto import (
    AES_128_BLOCK_SIZE,
    X25519_KEY_SIZE,
    AesCtr,
    Ed25519Key,
    Sha512,
    X25519Key,
)

PAIRING_SIG_SIZE = 2 * X25519_KEY_SIZE

_SALT_KEY = b"Pair-Verify-AES-Key"
_SALT_IV = b"Pair-Verify-AES-IV"


class PairingError(Exception):
    """Raised when a pairing step is out of order or verification fails."""


class _Status(Enum):
    INITIAL = auto()
    SETUP = auto()
    HANDSHAKE = auto()
    FINISHED = auto()


class Pairing:
    """The long-lived Ed25519 identity of this server."""

    def __init__(self) -> None:
        self._ed = Ed25519Key.generate()

    def public_key(self) -> bytes:
        """Return the raw 32-byte Ed25519 public key."""
        return self._ed.raw()

    def new_session(self) -> "PairingSession":
        return PairingSession(self)


class PairingSession:
    """One pair-verify exchange with a client."""

    def __init__(self, pairing: Pairing) -> None:
        if pairing is None:
            raise PairingError("a pairing identity is required")
        self._status = _Status.INITIAL
        self._ed_ours = pairing._ed.copy()
        self._ed_theirs: Optional[Ed25519Key] = None
        self._ecdh_ours: Optional[X25519Key] = None
        self._ecdh_theirs: Optional[X25519Key] = None
        self._ecdh_secret = bytes(X25519_KEY_SIZE)

    def set_setup_status(self) -> None:
        self._status = _Status.SETUP

    def check_handshake_status(self) -> bool:
        """Whether the session is in a state that allows a handshake."""
        return self._status in (_Status.SETUP, _Status.HANDSHAKE)

    def handshake(self, ecdh_key: bytes, ed_key: bytes) -> None:
        """Take the client's public keys and derive the shared secret."""
        if self._status is _Status.FINISHED:
            raise PairingError("pairing session already finished")
        self._ecdh_theirs = X25519Key.from_raw(ecdh_key)
        self._ed_theirs = Ed25519Key.from_raw(ed_key)
        self._ecdh_ours = X25519Key.generate()
        self._ecdh_secret = self._ecdh_ours.derive_secret(self._ecdh_theirs)
        self._status = _Status.HANDSHAKE

    def _require_handshake(self) -> None:
        if self._status is not _Status.HANDSHAKE:
            raise PairingError("handshake has not been performed")

    def get_public_key(self) -> bytes:
        """Return our ephemeral X25519 public key."""
        self._require_handshake()
        return self._ecdh_ours.raw()

    def _derive_key(self, salt: bytes) -> bytes:
        digest = Sha512()
        digest.update(salt)
        digest.update(self._ecdh_secret)
        return digest.final()[:AES_128_BLOCK_SIZE]

    def _new_cipher(self) -> AesCtr:
        return AesCtr(self._derive_key(_SALT_KEY), self._derive_key(_SALT_IV))

    def get_signature(self) -> bytes:
        """Sign both public ECDH keys and encrypt the signature."""
        self._require_handshake()
        message = self._ecdh_ours.raw() + self._ecdh_theirs.raw()
        signature = self._ed_ours.sign(message)
        return self._new_cipher().encrypt(signature)

    def finish(self, signature: bytes) -> None:
        """Decrypt and verify the client's signature, completing the pairing."""
        self._require_handshake()
        if len(signature) != PAIRING_SIG_SIZE:
            raise PairingError(f"signature must be {PAIRING_SIG_SIZE} bytes")
        cipher = self._new_cipher()
        # The first keystream round belongs to our own signature.
        cipher.encrypt(bytes(PAIRING_SIG_SIZE))
        decrypted = cipher.encrypt(signature)
        message = self._ecdh_theirs.raw() + self._ecdh_ours.raw()
        if not self._ed_theirs.verify(decrypted, message):
            raise PairingError("signature verification failed")
        self._status = _Status.FINISHED

    def ecdh_secret(self) -> bytes:
        """Return the shared X25519 secret (all zeros before the handshake)."""
        return self._ecdh_secret