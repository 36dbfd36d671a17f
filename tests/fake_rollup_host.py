"""In-process fake of the rollup HTTP server used by the tests."""

import json
from collections import deque
from collections.abc import Callable
from typing import Any

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse

from course_dapp.infrastructure.rollup.codec import decode_json_payload, str_to_hex

ROLLUP_TEST_URL = "http://rollup.test"


class FakeRollupHost:
    """
    In-process stand-in for the rollup HTTP server.

    Queued requests are handed out one per /finish call; once the queue is
    empty /finish answers 202 and calls ``on_idle``. Every notice and report
    is decoded and kept in ``outputs`` in the order it arrived.
    """

    def __init__(self) -> None:
        self.pending: deque[dict[str, Any]] = deque()
        self.finish_statuses: list[str] = []
        self.outputs: list[tuple[str, Any]] = []
        self.notice_status_code = 200
        self.report_status_code = 200
        self.finish_status_code: int | None = None
        self.on_idle: Callable[[], None] | None = None
        self.app = self._build_app()

    @property
    def notices(self) -> list[Any]:
        return [payload for kind, payload in self.outputs if kind == "notice"]

    @property
    def reports(self) -> list[Any]:
        return [payload for kind, payload in self.outputs if kind == "report"]

    def queue_advance(
        self, action: str, data: dict[str, Any] | None = None, msg_sender: str = "0xsender"
    ) -> None:
        payload = json.dumps({"action": action, "data": data or {}})
        self.queue_raw(
            {
                "request_type": "advance_state",
                "data": {
                    "metadata": {
                        "msg_sender": msg_sender,
                        "epoch_index": 0,
                        "input_index": len(self.finish_statuses),
                        "block_number": 1,
                        "timestamp": 1700000000,
                    },
                    "payload": str_to_hex(payload),
                },
            }
        )

    def queue_inspect(self, path: str) -> None:
        self.queue_raw({"request_type": "inspect_state", "data": {"payload": str_to_hex(path)}})

    def queue_raw(self, request: dict[str, Any]) -> None:
        self.pending.append(request)

    def _build_app(self) -> FastAPI:
        app = FastAPI()

        @app.post("/finish")
        async def finish(request: Request) -> Response:
            body = await request.json()
            self.finish_statuses.append(body["status"])
            if self.finish_status_code is not None:
                return JSONResponse({"error": "unavailable"}, status_code=self.finish_status_code)
            if not self.pending:
                if self.on_idle is not None:
                    self.on_idle()
                return Response(status_code=202)
            return JSONResponse(self.pending.popleft())

        @app.post("/notice")
        async def notice(request: Request) -> Response:
            body = await request.json()
            self.outputs.append(("notice", decode_json_payload(body["payload"])))
            return JSONResponse(
                {"index": len(self.outputs) - 1}, status_code=self.notice_status_code
            )

        @app.post("/report")
        async def report(request: Request) -> Response:
            body = await request.json()
            self.outputs.append(("report", decode_json_payload(body["payload"])))
            return JSONResponse({}, status_code=self.report_status_code)

        return app
