"""Interactive client for the integer list server."""

from __future__ import annotations

import argparse
import socket
import sys
from collections.abc import Sequence
from typing import TextIO

DEFAULT_PORT = 9001
BUFFER_SIZE = 1024
PROMPT = "Enter Command (or menu): "
MENU = (
    "COMMANDS:\n---------\n1. print\n2. get_length\n3. add_back <value>\n"
    "4. add_front <value>\n5. add_position <index> <value>\n6. remove_back\n"
    "7. remove_front\n8. remove_position <index>\n9. get <index>\n10. exit\n"
)


def read_command(stream: TextIO) -> str:
    """Return the next non-empty line without its newline; EOFError at the end."""
    for line in stream:
        if line.startswith("\n"):
            continue
        return line.removesuffix("\n")
    raise EOFError("no more commands")


def run_client(sock, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
    """Send commands read from ``stdin`` and print the server's replies."""
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    try:
        while True:
            stdout.write(PROMPT)
            stdout.flush()
            try:
                command = read_command(stdin)
            except EOFError:
                return
            sock.sendall(command.encode())
            if command == "exit":
                stdout.write("Exiting client...\n")
                return
            if command == "menu":
                stdout.write(MENU)
            data = sock.recv(BUFFER_SIZE)
            if not data:
                return
            response = data.split(b"\0", 1)[0].decode(errors="replace")
            stdout.write(f"\nSERVER RESPONSE: {response}\n")
    finally:
        sock.close()


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Integer list client.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)
    try:
        sock = socket.create_connection((args.host, args.port))
    except OSError as exc:
        print(f"Connection to server failed: {exc}", file=sys.stderr)
        return 1
    print("Connected to server!")
    run_client(sock)
    return 0


if __name__ == "__main__":
    sys.exit(main())