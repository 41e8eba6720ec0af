"""Building blocks for a screen-mirroring receiver: pairing, stream decryption, FairPlay replies, response building and helpers."""

__version__ = "0.1.0"

__all__ = [
    "byteutils",
    "crypto",
    "fairplay",
    "http_response",
    "logger",
    "mirror_buffer",
    "netutils",
    "pairing",
    "stream",
]