"""AES-128 (CTR and CBC), X25519, Ed25519 and SHA-512 helpers."""

from __future__ import annotations

import hashlib
from enum import Enum
from typing import Optional, Union

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ed25519, x25519
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

AES_128_BLOCK_SIZE = 16
X25519_KEY_SIZE = 32
ED25519_KEY_SIZE = 32

_RAW = serialization.Encoding.Raw
_RAW_PUBLIC = serialization.PublicFormat.Raw


class CryptoError(Exception):
    """Raised when a cryptographic operation cannot be carried out."""


class AesDirection(Enum):
    DECRYPT = 0
    ENCRYPT = 1


def _check_aes_params(key: bytes, iv: bytes) -> tuple[bytes, bytes]:
    key, iv = bytes(key), bytes(iv)
    if len(key) != AES_128_BLOCK_SIZE or len(iv) != AES_128_BLOCK_SIZE:
        raise CryptoError("AES-128 needs a 16-byte key and a 16-byte IV")
    return key, iv


class AesCtr:
    """Streaming AES-128 in counter mode.

    ``block_offset`` tracks how far into the current keystream block the
    encryption side has advanced, so that ``start_fresh_block`` can skip to
    the next block boundary.
    """

    def __init__(self, key: bytes, iv: bytes) -> None:
        self.key, self.iv = _check_aes_params(key, iv)
        self.direction = AesDirection.ENCRYPT
        self.block_offset = 0
        self._ctx = self._new_context()

    def _new_context(self):
        return Cipher(algorithms.AES(self.key), modes.CTR(self.iv)).encryptor()

    def encrypt(self, data: bytes) -> bytes:
        out = self._ctx.update(bytes(data))
        self.block_offset = (self.block_offset + len(data)) % AES_128_BLOCK_SIZE
        return out

    def decrypt(self, data: bytes) -> bytes:
        """Apply the keystream without touching the block offset."""
        return self._ctx.update(bytes(data))

    def start_fresh_block(self) -> None:
        """Discard the rest of the current keystream block."""
        if self.block_offset == 0:
            return
        self.encrypt(bytes(AES_128_BLOCK_SIZE - self.block_offset))

    def reset(self) -> None:
        """Restart the keystream from the original key and IV."""
        self._ctx = self._new_context()


class AesCbc:
    """AES-128 in CBC mode without padding, for one direction."""

    def __init__(self, key: bytes, iv: bytes, direction: AesDirection) -> None:
        self.key, self.iv = _check_aes_params(key, iv)
        self.direction = AesDirection(direction)
        self._ctx = self._new_context()

    def _new_context(self):
        cipher = Cipher(algorithms.AES(self.key), modes.CBC(self.iv))
        if self.direction is AesDirection.ENCRYPT:
            return cipher.encryptor()
        return cipher.decryptor()

    def _process(self, data: bytes) -> bytes:
        if len(data) % AES_128_BLOCK_SIZE:
            raise CryptoError("CBC input must be a whole number of 16-byte blocks")
        return self._ctx.update(bytes(data))

    def encrypt(self, data: bytes) -> bytes:
        if self.direction is not AesDirection.ENCRYPT:
            raise CryptoError("context was created for decryption")
        return self._process(data)

    def decrypt(self, data: bytes) -> bytes:
        if self.direction is not AesDirection.DECRYPT:
            raise CryptoError("context was created for encryption")
        return self._process(data)

    def reset(self) -> None:
        """Restart the chain from the original key and IV."""
        self._ctx = self._new_context()


class X25519Key:
    """An X25519 key: a generated key pair or a peer's public key."""

    def __init__(
        self,
        public: x25519.X25519PublicKey,
        private: Optional[x25519.X25519PrivateKey] = None,
    ) -> None:
        self._public = public
        self._private = private

    @classmethod
    def generate(cls) -> "X25519Key":
        private = x25519.X25519PrivateKey.generate()
        return cls(private.public_key(), private)

    @classmethod
    def from_raw(cls, data: bytes) -> "X25519Key":
        try:
            return cls(x25519.X25519PublicKey.from_public_bytes(bytes(data)))
        except ValueError as exc:
            raise CryptoError(f"invalid X25519 public key: {exc}") from exc

    def raw(self) -> bytes:
        return self._public.public_bytes(_RAW, _RAW_PUBLIC)

    def derive_secret(self, theirs: "X25519Key") -> bytes:
        """Compute the shared secret between this key pair and a peer key."""
        if self._private is None:
            raise CryptoError("deriving a secret needs a private key")
        try:
            return self._private.exchange(theirs._public)
        except ValueError as exc:
            raise CryptoError(f"key exchange failed: {exc}") from exc


class Ed25519Key:
    """An Ed25519 key: a generated signing key or a peer's public key."""

    def __init__(
        self,
        public: ed25519.Ed25519PublicKey,
        private: Optional[ed25519.Ed25519PrivateKey] = None,
    ) -> None:
        self._public = public
        self._private = private

    @classmethod
    def generate(cls) -> "Ed25519Key":
        private = ed25519.Ed25519PrivateKey.generate()
        return cls(private.public_key(), private)

    @classmethod
    def from_raw(cls, data: bytes) -> "Ed25519Key":
        try:
            return cls(ed25519.Ed25519PublicKey.from_public_bytes(bytes(data)))
        except ValueError as exc:
            raise CryptoError(f"invalid Ed25519 public key: {exc}") from exc

    def raw(self) -> bytes:
        return self._public.public_bytes(_RAW, _RAW_PUBLIC)

    def copy(self) -> "Ed25519Key":
        """Return a new wrapper sharing the same underlying key."""
        return Ed25519Key(self._public, self._private)

    def sign(self, data: bytes) -> bytes:
        if self._private is None:
            raise CryptoError("signing needs a private key")
        return self._private.sign(bytes(data))

    def verify(self, signature: bytes, data: bytes) -> bool:
        try:
            self._public.verify(bytes(signature), bytes(data))
        except InvalidSignature:
            return False
        return True


class Sha512:
    """Incremental SHA-512 digest that can be reset and reused."""

    def __init__(self) -> None:
        self._hash = hashlib.sha512()
        self._finished = False

    def update(self, data: Union[bytes, bytearray, memoryview]) -> None:
        if self._finished:
            raise CryptoError("digest already finalised; call reset() first")
        self._hash.update(data)

    def final(self) -> bytes:
        if self._finished:
            raise CryptoError("digest already finalised; call reset() first")
        self._finished = True
        return self._hash.digest()

    def reset(self) -> None:
        self._hash = hashlib.sha512()
        self._finished = False