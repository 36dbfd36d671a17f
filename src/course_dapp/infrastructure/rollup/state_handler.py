"""
Accept/reject reporting for action handlers.

Every action ends in exactly one of ``advance_wrapper``, ``inspect_wrapper``
or ``handle_report``, so each request produces one notice or report. The
only exception is a notice the host refuses, which is followed by a
report explaining the failure.
"""

import inspect
from collections.abc import Awaitable, Callable, Mapping
from typing import Any, TypeAlias

import httpx
import structlog
from pydantic import BaseModel

from course_dapp.application.common.result import Failure, Result, Success
from course_dapp.exceptions import RollupTransportError
from course_dapp.infrastructure.common.schemas.response_wrappers import ErrorResponse
from course_dapp.infrastructure.rollup.client import RollupClient
from course_dapp.infrastructure.rollup.codec import to_jsonable
from course_dapp.infrastructure.rollup.schemas import Status

logger = structlog.get_logger(__name__)

ActionResult: TypeAlias = Result[Any, Any]
ActionCallback: TypeAlias = Callable[[], ActionResult | Awaitable[ActionResult]]


def error_payload(error: object) -> Any:
    """Build the report body for a failure reason or an exception."""
    if isinstance(error, RollupTransportError):
        return ErrorResponse(error=error.body, status=error.status_code)
    if isinstance(error, BaseModel | Mapping):
        return error
    return ErrorResponse(error=str(error))


class RollupStateHandler:
    """Turns action outcomes into notices/reports and a final status."""

    def __init__(self, client: RollupClient) -> None:
        self.client = client

    async def handle_report(self, data: Any, status: Status = Status.REJECT) -> Status:
        """
        Send ``data`` as a report and return the final status.

        A requested accept is downgraded to reject when the host refuses
        the report; a requested reject is never upgraded.
        """
        response = await self.client.add_report(data)
        if response.status_code >= 400 and status is Status.ACCEPT:
            status = Status.REJECT

        logger.info(
            "report_sent",
            status_code=response.status_code,
            response=response.text,
            data=to_jsonable(data),
            status=status.value,
        )
        return status

    async def advance_wrapper(self, callback: ActionCallback) -> Status:
        """
        Run a state-changing action and publish its result as a notice.

        Returns:
            accept once the notice is recorded; reject (after a report) when
            the action fails, raises, or the host refuses the notice
        """
        try:
            result = await _invoke(callback)
        except Exception as e:
            logger.exception("advance_action_failed", error=str(e))
            return await self.handle_report(error_payload(e))

        if isinstance(result, Failure):
            return await self.handle_report(error_payload(result.error))

        try:
            await self._send_notice(result.value)
        except (RollupTransportError, httpx.HTTPError) as e:
            logger.warning("notice_failed", error=str(e))
            return await self.handle_report(error_payload(e))

        return Status.ACCEPT

    async def inspect_wrapper(self, callback: ActionCallback) -> Status:
        """
        Run a read-only action and publish its result as a report.

        Returns:
            accept when the action succeeds and the host takes the report,
            reject otherwise
        """
        try:
            result = await _invoke(callback)
        except Exception as e:
            logger.exception("inspect_action_failed", error=str(e))
            return await self.handle_report(error_payload(e))

        if isinstance(result, Failure):
            return await self.handle_report(error_payload(result.error))

        return await self.handle_report(result.value, Status.ACCEPT)

    async def _send_notice(self, data: Any) -> None:
        response = await self.client.add_notice(data)
        if response.status_code >= 400:
            raise RollupTransportError(response.status_code, response.text)

        logger.info(
            "notice_sent",
            status_code=response.status_code,
            response=response.text,
            data=to_jsonable(data),
        )


async def _invoke(callback: ActionCallback) -> ActionResult:
    result: Any = callback()
    if inspect.isawaitable(result):
        result = await result
    if not isinstance(result, Success | Failure):
        # Bare return values count as success.
        result = Success(result)
    return result
