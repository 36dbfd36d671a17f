"""
Request-dispatch loop.

Long-polls the rollup host, decodes each request, runs the named action and
hands the resulting status back on the next poll. Requests are handled
strictly one at a time: the next poll is only made once the current
request's notice or report has been sent.
"""

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any

import httpx
import structlog
from pydantic import ValidationError

from course_dapp.exceptions import InvalidRequestError, RollupTransportError
from course_dapp.infrastructure.common.schemas.response_wrappers import ErrorResponse
from course_dapp.infrastructure.rollup.client import RollupClient
from course_dapp.infrastructure.rollup.codec import decode_json_payload, hex_to_str
from course_dapp.infrastructure.rollup.registry import ActionData, ActionRegistry
from course_dapp.infrastructure.rollup.schemas import (
    ActionCall,
    AdvanceData,
    InspectData,
    RequestType,
    RollupRequest,
    Status,
)
from course_dapp.infrastructure.rollup.state_handler import RollupStateHandler

logger = structlog.get_logger(__name__)


class RollupDispatcher:
    """Drives the poll → decode → dispatch → report cycle."""

    def __init__(
        self,
        client: RollupClient,
        state_handler: RollupStateHandler,
        registry: ActionRegistry,
        retry_delay: float = 1.0,
    ) -> None:
        self.client = client
        self.state_handler = state_handler
        self.registry = registry
        self.retry_delay = retry_delay
        self.status = Status.ACCEPT
        self._running = False
        self._request_handlers: dict[RequestType, Callable[[dict[str, Any]], Awaitable[Status]]] = {
            RequestType.ADVANCE_STATE: self.handle_advance,
            RequestType.INSPECT_STATE: self.handle_inspect,
        }

    @property
    def running(self) -> bool:
        return self._running

    async def run(self) -> None:
        """Poll and process requests until ``stop`` is called."""
        self._running = True
        logger.info("dispatcher_started", rollup_server=self.client.base_url)
        while self._running:
            await self.run_once()
        logger.info("dispatcher_stopped")

    def stop(self) -> None:
        """Stop after the request in progress, if any, has been reported."""
        self._running = False

    async def run_once(self) -> Status | None:
        """
        Perform one poll and process the request it returns.

        Returns:
            The status of the processed request, or None when no request was
            processed (nothing pending or the poll failed)
        """
        try:
            raw_request = await self.client.finish(self.status)
        except (RollupTransportError, httpx.HTTPError) as e:
            logger.warning("finish_failed", error=str(e), retry_in=self.retry_delay)
            await asyncio.sleep(self.retry_delay)
            return None
        except InvalidRequestError as e:
            logger.error("invalid_request", error=e.message)
            self.status = await self._reject(ErrorResponse(error=e.message))
            return self.status

        if raw_request is None:
            logger.debug("no_pending_request")
            return None

        self.status = await self.handle_request(raw_request)
        return self.status

    async def handle_request(self, raw_request: dict[str, Any]) -> Status:
        """
        Process one request end to end.

        Never raises: anything escaping an action is reported as a reject.
        """
        try:
            request = RollupRequest.model_validate(raw_request)
        except ValidationError as e:
            logger.error("invalid_request", error=str(e))
            return await self._reject(ErrorResponse(error=f"Invalid request: {e}"))

        with structlog.contextvars.bound_contextvars(request_type=request.request_type):
            logger.info("request_received", data=request.data)
            try:
                request_type = RequestType(request.request_type)
            except ValueError:
                logger.warning("request_type_not_supported")
                return await self._reject(
                    ErrorResponse(error=f"Request type '{request.request_type}' not supported.")
                )

            try:
                status = await self._request_handlers[request_type](request.data)
            except InvalidRequestError as e:
                logger.warning("invalid_request", error=e.message)
                return await self._reject(ErrorResponse(error=e.message))
            except Exception as e:
                logger.exception("request_failed", error=str(e))
                return await self._reject(ErrorResponse(error=str(e)))

            logger.info("request_processed", status=status.value)
            return status

    async def handle_advance(self, data: dict[str, Any]) -> Status:
        """Decode an advance request and run its action."""
        try:
            advance = AdvanceData.model_validate(data)
            call = ActionCall.model_validate(decode_json_payload(advance.payload))
        except ValueError as e:
            raise InvalidRequestError(str(e)) from e

        with structlog.contextvars.bound_contextvars(
            msg_sender=advance.metadata.msg_sender,
            input_index=advance.metadata.input_index,
        ):
            return await self.dispatch(RequestType.ADVANCE_STATE, call.action, call.data)

    async def handle_inspect(self, data: dict[str, Any]) -> Status:
        """Decode an inspect request (``action/arg1/arg2``) and run its action."""
        try:
            inspect = InspectData.model_validate(data)
            path = hex_to_str(inspect.payload)
        except ValueError as e:
            raise InvalidRequestError(str(e)) from e

        action, *args = path.split("/")
        spec = self.registry.resolve(action)
        arguments = spec.bind_arguments(args) if spec else {}
        return await self.dispatch(RequestType.INSPECT_STATE, action, arguments)

    async def dispatch(self, request_type: RequestType, action: str, data: ActionData) -> Status:
        """Run a named action, rejecting names that are unknown or of the wrong kind."""
        spec = self.registry.resolve(action)
        if spec is None:
            logger.warning("action_not_allowed", action=action)
            return await self.state_handler.handle_report(
                ErrorResponse(error=f"Action '{action}' not allowed.")
            )

        if spec.kind is not request_type:
            logger.warning("action_kind_mismatch", action=action, expected=spec.kind.value)
            return await self.state_handler.handle_report(
                ErrorResponse(
                    error=f"Action '{action}' not allowed for {request_type.label} requests."
                )
            )

        logger.info("action_dispatched", action=action)
        return await spec.handler(data)

    async def _reject(self, error: ErrorResponse) -> Status:
        """Report a rejection, falling back to a bare reject if the host is unreachable."""
        try:
            return await self.state_handler.handle_report(error)
        except (RollupTransportError, httpx.HTTPError) as e:
            logger.error("report_failed", error=str(e))
            return Status.REJECT
