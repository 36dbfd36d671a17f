"""HTTP client for the rollup server API."""

from typing import Any

import httpx
import structlog

from course_dapp.exceptions import InvalidRequestError, RollupTransportError
from course_dapp.infrastructure.rollup.codec import encode_payload
from course_dapp.infrastructure.rollup.schemas import FinishRequest, PayloadBody, Status

logger = structlog.get_logger(__name__)

NO_PENDING_REQUEST = 202


class RollupClient:
    """HTTP client for the rollup server.

    Wraps the three calls the dApp makes: the long-poll ``/finish``, and
    the ``/notice`` and ``/report`` outputs. No timeout is applied unless
    one is configured; a silent host stalls the caller.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
        )

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def finish(self, status: Status) -> dict[str, Any] | None:
        """
        Report the previous status and wait for the next request.

        Returns:
            The raw request object, or None when no request is pending

        Raises:
            RollupTransportError: If the host answers with an error status
            InvalidRequestError: If the host answers with a non-JSON body
            httpx.HTTPError: On connection problems
        """
        response = await self._client.post(
            "/finish", json=FinishRequest(status=status).model_dump(mode="json")
        )
        logger.debug("finish_answered", status_code=response.status_code)

        if response.status_code == NO_PENDING_REQUEST:
            return None
        if response.status_code >= 400:
            raise RollupTransportError(response.status_code, response.text)

        try:
            body = response.json()
        except ValueError as e:
            raise InvalidRequestError(f"finish response is not JSON ({e})") from e
        if not isinstance(body, dict):
            raise InvalidRequestError("finish response is not a JSON object")
        return body

    async def add_notice(self, data: Any) -> httpx.Response:
        """Emit a notice carrying ``data``."""
        return await self._post_payload("/notice", data)

    async def add_report(self, data: Any) -> httpx.Response:
        """Emit a report carrying ``data``."""
        return await self._post_payload("/report", data)

    async def _post_payload(self, path: str, data: Any) -> httpx.Response:
        body = PayloadBody(payload=encode_payload(data))
        return await self._client.post(path, json=body.model_dump())
