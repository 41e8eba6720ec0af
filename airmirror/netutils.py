"""Socket setup and address conversion helpers."""

from __future__ import annotations

import socket
from typing import Optional

_IPV4_MAPPED_PREFIX = bytes(10) + b"\xff\xff"


def init_socket(port: int, use_ipv6: bool, use_udp: bool) -> tuple[socket.socket, int]:
    """Create a socket bound to the wildcard address.

    Returns the socket and the port it was actually bound to, which differs
    from ``port`` when ``port`` is 0. Raises ``OSError`` on failure.
    """
    family = socket.AF_INET6 if use_ipv6 else socket.AF_INET
    sock_type = socket.SOCK_DGRAM if use_udp else socket.SOCK_STREAM
    proto = socket.IPPROTO_UDP if use_udp else socket.IPPROTO_TCP

    sock = socket.socket(family, sock_type, proto)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        if use_ipv6:
            try:
                sock.setsockopt(socket.IPPROTO_IPV6, socket.IPV6_V6ONLY, 1)
            except (OSError, AttributeError):
                pass
            sock.bind(("::", port, 0, 0))
        else:
            sock.bind(("0.0.0.0", port))
        bound_port = sock.getsockname()[1]
    except OSError:
        sock.close()
        raise
    return sock, bound_port


def get_address(sockaddr: tuple, family: int) -> Optional[bytes]:
    """Return the packed IP of a socket address.

    IPv4-mapped IPv6 addresses come back as their four IPv4 bytes. Families
    other than IPv4 and IPv6 give None.
    """
    host = sockaddr[0]
    if family == socket.AF_INET:
        return socket.inet_pton(socket.AF_INET, host)
    if family == socket.AF_INET6:
        packed = socket.inet_pton(socket.AF_INET6, host.split("%", 1)[0])
        if packed.startswith(_IPV4_MAPPED_PREFIX):
            return packed[len(_IPV4_MAPPED_PREFIX):]
        return packed
    return None


def parse_address(family: int, src: str) -> tuple:
    """Parse a numeric IP string into a socket address tuple of ``family``."""
    if family not in (socket.AF_INET, socket.AF_INET6):
        raise ValueError(f"unsupported address family: {family}")
    if not src:
        raise ValueError("no address given")
    try:
        infos = socket.getaddrinfo(
            src, None, family, 0, 0, socket.AI_PASSIVE | socket.AI_NUMERICHOST
        )
    except socket.gaierror as exc:
        raise ValueError(f"cannot parse address {src!r}: {exc}") from exc
    for info_family, _type, _proto, _canon, addr in infos:
        if info_family == family:
            return addr
    raise ValueError(f"no {family!r} address for {src!r}")