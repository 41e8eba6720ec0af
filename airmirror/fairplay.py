"""FairPlay setup and handshake replies."""

from __future__ import annotations

from typing import Optional

from airmirror.logger import Logger

_SETUP_REQUEST_LEN = 16
_HANDSHAKE_REQUEST_LEN = 164
_SUPPORTED_VERSION = 0x03

_REPLY_MESSAGES = (
    bytes.fromhex(
        "46504c59030102000000"
        "0082020 00f9f3f9e0a25".replace(" ", "")
        + "21dbdf312ab2bfb29e8d"
        "232b6376a8c818701d22"
        "ae93d82737feaf9db4fd"
        "f41c2dba9d1f49caaabf"
        "6591ac1f7bc6f7e0663d"
        "21afe01565953eab81f4"
        "18ceed095adb7c3d0e25"
        "4909a79831d49c398297"
        "3434facb42c63a1cd911"
        "a6fe941a8a6d4a743b46"
        "c3a7649e44c78955e49d"
        "8155009549c4e2f7a3f6"
        "d5ba"
    ),
    bytes.fromhex(
        "46504c59030102000000"
        "00820201cf32a25714b2"
        "524f8aa0ad7af164e37b"
        "cf4424e200047efc0ad6"
        "7afcd95ded1c2730bb59"
        "1b962ed63a9c4ded88ba"
        "8fc78de64d91ccfd5c7b"
        "56da88e31f5cceafc743"
        "1995a01665a54e1939d2"
        "5b94db64b9e45d8d063e"
        "1e6af07e9656162b0efa"
        "404275ea5a44d9591c72"
        "56b9fbe6513898b80227"
        "72198857165094 2ad946".replace(" ", "")
        + "688a"
    ),
    bytes.fromhex(
        "46504c59030102000000"
        "00820202c169a352eeed"
        "35b18cdd9c58d64f16c1"
        "519a89eb5317bd0d4336"
        "cd68f638ff9d016a5b52"
        "b7fa9216b2b65482c784"
        "44118121a2c7fed83db7"
        "119e9182aad7d18c7063"
        "e2a457555910af9e0efc"
        "76347d164043807f581e"
        "e4fbe42ca9dedc1b5eb2"
        "a3aa3d2ecd59e7eee70b"
        "3629f22afd161d877353"
        "ddb99adc8e07006e56f8"
        "50ce"
    ),
    bytes.fromhex(
        "46504c59030102000000"
        "00820203 9001e1727e0f".replace(" ", "")
        + "57f9f5880db104a6257a"
        "23f5cfff1abbe1e93045"
        "251afb97eb9fc0011ebe"
        "0f3a81df5b691d76acb2"
        "f7a5c708e3d328f56bb3"
        "9dbde5f29c8a17f48148"
        "7e3ae863c678325422e6"
        "f78e166d18aa7fd63625"
        "8bce28726f661f738893"
        "ce44311e4be6c0535193"
        "e5ef72e8686233729c22"
        "7d820c999445d89246c8"
        "c359"
    ),
)

_HANDSHAKE_HEADER = bytes.fromhex("46504c590301040000000014")

REPLY_LEN = 142


class FairPlayError(Exception):
    """Raised for malformed or unsupported FairPlay requests."""


def _check_request(request: bytes, length: int) -> bytes:
    request = bytes(request)
    if len(request) < length:
        raise FairPlayError(f"request must be at least {length} bytes")
    if request[4] != _SUPPORTED_VERSION:
        raise FairPlayError(f"unsupported FairPlay version {request[4]}")
    return request


class FairPlay:
    """Answers the FairPlay setup and stores the key message of the handshake."""

    def __init__(self, logger: Optional[Logger] = None) -> None:
        self.logger = logger
        self.keymsg: Optional[bytes] = None

    def setup(self, request: bytes) -> bytes:
        """Answer a 16-byte setup request with the 142-byte reply for its mode."""
        request = _check_request(request, _SETUP_REQUEST_LEN)
        mode = request[14]
        if mode >= len(_REPLY_MESSAGES):
            raise FairPlayError(f"unknown FairPlay mode {mode}")
        self.keymsg = None
        return _REPLY_MESSAGES[mode]

    def handshake(self, request: bytes) -> bytes:
        """Store the 164-byte key message and return the 32-byte reply."""
        request = _check_request(request, _HANDSHAKE_REQUEST_LEN)
        self.keymsg = request[:_HANDSHAKE_REQUEST_LEN]
        return _HANDSHAKE_HEADER + request[144:164]