import socket

import pytest

from airmirror.netutils import get_address, init_socket, parse_address


def test_init_socket_tcp_picks_port():
    sock, port = init_socket(0, False, False)
    try:
        assert port > 0
        assert sock.getsockname()[1] == port
        assert sock.type == socket.SOCK_STREAM
        assert sock.getsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR) != 0
    finally:
        sock.close()


def test_init_socket_udp():
    sock, port = init_socket(0, False, True)
    try:
        assert sock.type == socket.SOCK_DGRAM
        assert sock.getsockname()[1] == port
    finally:
        sock.close()


def test_init_socket_port_in_use_raises():
    holder = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        holder.bind(("0.0.0.0", 0))
        holder.listen(1)
        taken = holder.getsockname()[1]
        with pytest.raises(OSError):
            init_socket(taken, False, False)
    finally:
        holder.close()


def test_get_address_ipv4():
    assert get_address(("127.0.0.1", 80), socket.AF_INET) == bytes([127, 0, 0, 1])


def test_get_address_ipv4_mapped_ipv6():
    result = get_address(("::ffff:10.0.0.1", 80, 0, 0), socket.AF_INET6)
    assert result == bytes([10, 0, 0, 1])


def test_get_address_plain_ipv6():
    result = get_address(("::1", 80, 0, 0), socket.AF_INET6)
    assert len(result) == 16
    assert result == bytes(15) + b"\x01"


def test_get_address_unknown_family():
    assert get_address(("x", 0), socket.AF_UNIX) is None


def test_parse_address_ipv4():
    addr = parse_address(socket.AF_INET, "192.168.1.2")
    assert addr[0] == "192.168.1.2"


def test_parse_address_ipv6():
    addr = parse_address(socket.AF_INET6, "::1")
    assert addr[0] == "::1"


def test_parse_address_rejects_hostname():
    with pytest.raises(ValueError):
        parse_address(socket.AF_INET, "not-an-ip")


def test_parse_address_rejects_family():
    with pytest.raises(ValueError):
        parse_address(socket.AF_UNIX, "127.0.0.1")


def test_parse_address_rejects_empty():
    with pytest.raises(ValueError):
        parse_address(socket.AF_INET, "")