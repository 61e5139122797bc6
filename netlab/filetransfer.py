"""A minimal file server and client over TCP.

The client sends a file name terminated by a NUL byte. The server answers
``OK <length>\\n`` followed by the file's bytes, or ``404\\n`` when the file
cannot be read. The name ``q`` ends the session.
"""

from __future__ import annotations

import argparse
import socket
import sys
from pathlib import Path
from typing import BinaryIO, Sequence

DEFAULT_PORT = 65535
QUIT = "q"
NOT_FOUND = b"404"


def _read_name(stream: BinaryIO) -> str | None:
    """Read one NUL-terminated name, or return None at end of stream."""
    data = bytearray()
    while True:
        byte = stream.read(1)
        if not byte:
            return None
        if byte == b"\0":
            return data.decode("utf-8", "surrogateescape")
        data += byte


def serve_connection(conn: socket.socket) -> None:
    """Answer file requests on ``conn`` until the client quits or disconnects."""
    with conn.makefile("rb") as stream:
        while (name := _read_name(stream)) is not None and name != QUIT:
            try:
                content = Path(name).read_bytes()
            except OSError:
                conn.sendall(NOT_FOUND + b"\n")
                continue
            conn.sendall(b"OK %d\n" % len(content) + content)


def serve(host: str = "", port: int = DEFAULT_PORT) -> None:
    """Accept a single client and serve it until it quits."""
    with socket.create_server((host, port), backlog=1) as server:
        conn, _ = server.accept()
        with conn:
            serve_connection(conn)


class FileClient:
    """Client side of the file service; usable as a context manager."""

    def __init__(self, host: str = "127.0.0.1", port: int = DEFAULT_PORT) -> None:
        self._sock = socket.create_connection((host, port))
        self._stream = self._sock.makefile("rb")
        self._closed = False

    def request(self, name: str) -> bytes:
        """Fetch the contents of ``name``; raise FileNotFoundError if the server has none."""
        if name == QUIT or "\0" in name:
            raise ValueError(f"invalid file name: {name!r}")
        self._sock.sendall(name.encode("utf-8", "surrogateescape") + b"\0")
        header = self._stream.readline()
        if not header.endswith(b"\n"):
            raise ConnectionError("server closed the connection")
        header = header[:-1]
        if header == NOT_FOUND:
            raise FileNotFoundError(name)
        status, _, length = header.partition(b" ")
        if status != b"OK" or not length.isdigit():
            raise ConnectionError(f"unexpected reply: {header!r}")
        size = int(length)
        body = self._stream.read(size)
        if len(body) != size:
            raise ConnectionError("server closed the connection mid-reply")
        return body

    def close(self) -> None:
        """Tell the server the session is over and release the socket."""
        if self._closed:
            return
        self._closed = True
        try:
            self._sock.sendall(QUIT.encode() + b"\0")
        except OSError:
            pass
        finally:
            self._stream.close()
            self._sock.close()

    def __enter__(self) -> FileClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


def server_main(argv: Sequence[str] | None = None) -> int:
    """Run the file server for one client."""
    parser = argparse.ArgumentParser(prog="netlab-file-server", description="Serve files over TCP.")
    parser.add_argument("--host", default="", help="address to bind (default: all)")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)

    print("Server Running......", flush=True)
    try:
        serve(args.host, args.port)
    except KeyboardInterrupt:
        return 130
    except OSError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


def client_main(argv: Sequence[str] | None = None) -> int:
    """Prompt for file names and print what the server returns; ``q`` quits."""
    parser = argparse.ArgumentParser(prog="netlab-file-client", description="Fetch files over TCP.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)

    print("Enter File name: ")
    try:
        client = FileClient(args.host, args.port)
    except OSError as exc:
        print(exc, file=sys.stderr)
        return 1

    with client:
        while True:
            try:
                name = input(">").strip()
            except EOFError:
                break
            if name == QUIT:
                break
            if not name:
                continue
            try:
                sys.stdout.write(client.request(name).decode("utf-8", "replace"))
            except FileNotFoundError:
                sys.stdout.write(NOT_FOUND.decode())
            except ValueError as exc:
                print(exc)
            except ConnectionError as exc:
                print(exc, file=sys.stderr)
                return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(server_main())