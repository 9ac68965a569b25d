"""HTTP server exposing the filtered output, with periodic re-parsing."""

from __future__ import annotations

import ipaddress
import re
import sys
import threading
from http import HTTPStatus
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from urllib.parse import unquote, urlsplit

from .files import PathLike, save_file
from .parser import ParseJob

NOT_FOUND_BODY = b"Fichier introuvable"


def read_output(filename: PathLike) -> tuple[HTTPStatus, bytes]:
    """Return the status and body to serve for *filename*.

    A readable UTF-8 file is served whole; anything else is a 404.
    """
    try:
        with open(filename, encoding="utf-8") as handle:
            content = handle.read()
    except (OSError, UnicodeDecodeError):
        return HTTPStatus.NOT_FOUND, NOT_FOUND_BODY
    return HTTPStatus.OK, content.encode("utf-8")


def make_handler(filename: str) -> type[BaseHTTPRequestHandler]:
    """Build a request handler serving *filename* at ``GET /<filename>``."""

    class _OutputHandler(BaseHTTPRequestHandler):
        def _send(self, status: HTTPStatus, body: bytes, content_type: str | None) -> None:
            self.send_response(status)
            if content_type is not None:
                self.send_header("Content-Type", content_type)
            self.send_header("Content-Length", str(len(body)))
            self.end_headers()
            if self.command != "HEAD":
                self.wfile.write(body)

        def _route_matches(self) -> bool:
            segments = urlsplit(self.path).path.split("/")
            return len(segments) >= 2 and unquote(segments[1]) == filename

        def do_GET(self) -> None:  # noqa: N802
            if not self._route_matches():
                self._send(HTTPStatus.NOT_FOUND, b"", None)
                return
            status, body = read_output(filename)
            if status is HTTPStatus.OK:
                self._send(status, body, "text/plain")
            else:
                self._send(status, body, "text/plain; charset=utf-8")

        def _method_not_allowed(self) -> None:
            if self._route_matches():
                self._send(HTTPStatus.METHOD_NOT_ALLOWED, b"", None)
            else:
                self._send(HTTPStatus.NOT_FOUND, b"", None)

        do_POST = do_PUT = do_DELETE = do_PATCH = _method_not_allowed  # noqa: N815

        def log_message(self, format: str, *args: object) -> None:  # noqa: A002
            pass

    return _OutputHandler


class _Reparser(threading.Thread):
    """Background thread re-running a parse job and saving its result."""

    def __init__(
        self,
        job: ParseJob,
        output: PathLike,
        erase: bool,
        interval: float,
        stop_event: threading.Event,
    ) -> None:
        super().__init__(name="logdrill-reparser", daemon=True)
        self._job = job
        self._output = output
        self._erase = erase
        self._interval = interval
        self._stop_event = stop_event
        self.error: Exception | None = None

    def run(self) -> None:
        # The first pass is done by the caller, so wait before each run.
        while not self._stop_event.wait(self._interval):
            try:
                entries = self._job.run()
                save_file(self._output, entries, self._erase, self._job.duplicate)
            except (OSError, re.error) as exc:
                self.error = exc
                print(f"Error ! Failed to save content in the file: {exc}", file=sys.stderr)
                self._stop_event.set()


def start_reparser(
    job: ParseJob,
    output: PathLike,
    erase: bool,
    interval: float,
    stop_event: threading.Event,
) -> _Reparser:
    """Start a daemon thread that re-parses every *interval* seconds.

    The thread stops when *stop_event* is set; on failure it records the
    exception in its ``error`` attribute and sets *stop_event* itself.
    """
    reparser = _Reparser(job, output, erase, interval, stop_event)
    reparser.start()
    return reparser


def launch_server(
    address: str,
    port: int,
    filename: str,
    job: ParseJob,
    interval: float,
    erase: bool,
) -> None:
    """Serve *filename* over HTTP while re-parsing the log periodically.

    Blocks until interrupted or until re-parsing fails, in which case the
    failure is raised.
    """
    host = str(ipaddress.IPv4Address(address))
    stop_event = threading.Event()
    with ThreadingHTTPServer((host, port), make_handler(filename)) as server:
        reparser = start_reparser(job, filename, erase, interval, stop_event)
        server_thread = threading.Thread(target=server.serve_forever, daemon=True)
        server_thread.start()
        print(f"Web server is running: http://{address}:{server.server_port}/{filename}")
        try:
            while not stop_event.wait(0.5):
                pass
        except KeyboardInterrupt:
            pass
        finally:
            stop_event.set()
            server.shutdown()
            server_thread.join()
            reparser.join()
    if reparser.error is not None:
        raise reparser.error