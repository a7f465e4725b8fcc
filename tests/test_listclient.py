import io
from collections import deque

import pytest

from syslabs.listclient import MENU, read_command, run_client


class FakeSock:
    def __init__(self, replies):
        self.replies = deque(replies)
        self.sent = []
        self.closed = False

    def sendall(self, data):
        self.sent.append(data)

    def recv(self, size):
        return self.replies.popleft() if self.replies else b""

    def close(self):
        self.closed = True


def test_read_command_skips_blank_lines():
    stream = io.StringIO("\n\nprint\nget 0\n")
    assert read_command(stream) == "print"
    assert read_command(stream) == "get 0"


def test_read_command_without_trailing_newline():
    assert read_command(io.StringIO("exit")) == "exit"


def test_read_command_eof():
    with pytest.raises(EOFError):
        read_command(io.StringIO("\n\n"))


def test_run_client_sends_and_prints_reply():
    sock = FakeSock([b"ACK 3\0"])
    out = io.StringIO()
    run_client(sock, io.StringIO("add_back 3\nexit\n"), out)
    assert sock.sent == [b"add_back 3", b"exit"]
    assert "\nSERVER RESPONSE: ACK 3\n" in out.getvalue()
    assert out.getvalue().endswith("Exiting client...\n")
    assert sock.closed


def test_run_client_menu_shows_commands():
    sock = FakeSock([b"Unknown command\0"])
    out = io.StringIO()
    run_client(sock, io.StringIO("menu\nexit\n"), out)
    assert MENU in out.getvalue()
    assert sock.sent == [b"menu", b"exit"]


def test_run_client_stops_at_end_of_input():
    sock = FakeSock([])
    out = io.StringIO()
    run_client(sock, io.StringIO(""), out)
    assert sock.sent == []
    assert sock.closed


def test_run_client_stops_when_server_hangs_up():
    sock = FakeSock([])
    out = io.StringIO()
    run_client(sock, io.StringIO("print\nprint\n"), out)
    assert sock.sent == [b"print"]
    assert "SERVER RESPONSE" not in out.getvalue()