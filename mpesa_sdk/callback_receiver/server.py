import json
import threading
import time
from http.server import ThreadingHTTPServer, BaseHTTPRequestHandler
from typing import Self

ACCEPTED = {"ResultCode": 0, "ResultDesc": "Accepted"}


class _ConfirmationHandler(BaseHTTPRequestHandler):
    """HTTP request handler for receiving C2B confirmations."""

    def do_POST(self):
        content_length = int(self.headers.get("Content-Length", 0))
        body = self.rfile.read(content_length)

        server_config = self.server.config  # type: ignore[attr-defined]

        if server_config["response_delay"] > 0:
            time.sleep(server_config["response_delay"])

        try:
            payload = json.loads(body)
        except (json.JSONDecodeError, ValueError):
            self._respond(400, {"error": "invalid JSON"})
            return

        with server_config["lock"]:
            server_config["received"].append({
                "path": self.path,
                "payload": payload,
                "headers": dict(self.headers),
            })

        code = server_config["response_code"]
        response_body = server_config["response_body"]
        if response_body is None:
            self.send_response(code)
            self.send_header("Content-Length", "0")
            self.end_headers()
            return
        self._respond(code, response_body)

    def _respond(self, code: int, body) -> None:
        raw = body if isinstance(body, bytes) else json.dumps(body).encode()
        self.send_response(code)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(raw)))
        self.end_headers()
        self.wfile.write(raw)

    def log_message(self, format, *args):
        """Suppress default request logging."""
        pass


class CallbackReceiverServer:
    """Configurable HTTP server that stands in for a merchant confirmation URL."""

    def __init__(self, host: str = "127.0.0.1", port: int = 0):
        self._host = host
        self._port = port
        self._config = {
            "response_code": 200,
            "response_delay": 0,
            "response_body": dict(ACCEPTED),
            "received": [],
            "lock": threading.Lock(),
        }
        self._server: ThreadingHTTPServer | None = None
        self._thread: threading.Thread | None = None

    def set_response_code(self, code: int) -> Self:
        self._config["response_code"] = code
        return self

    def set_response_delay(self, seconds: float) -> Self:
        self._config["response_delay"] = seconds
        return self

    def set_response_body(self, body: dict | bytes | None) -> Self:
        """Set the reply body: a dict is sent as JSON, bytes verbatim, None sends no body."""
        self._config["response_body"] = body
        return self

    def start(self) -> None:
        self._server = ThreadingHTTPServer((self._host, self._port), _ConfirmationHandler)
        self._server.config = self._config  # type: ignore[attr-defined]
        self._port = self._server.server_address[1]
        self._thread = threading.Thread(target=self._server.serve_forever, daemon=True)
        self._thread.start()

    def stop(self) -> None:
        if self._server:
            self._server.shutdown()
            self._server.server_close()
            self._server = None
        if self._thread:
            self._thread.join(timeout=5)
            self._thread = None

    @property
    def url(self) -> str:
        return f"http://{self._host}:{self._port}/c2b/confirmation"

    @property
    def port(self) -> int:
        return self._port

    def get_received(self) -> list[dict]:
        with self._config["lock"]:
            return list(self._config["received"])

    def get_received_count(self) -> int:
        with self._config["lock"]:
            return len(self._config["received"])

    def clear(self) -> None:
        with self._config["lock"]:
            self._config["received"].clear()
