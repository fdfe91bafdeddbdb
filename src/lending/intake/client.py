"""HTTP client that hands finished applications to the loan-origination system."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from lending.core.config import LOSConfig
from lending.intake.models import SubmissionOutcome

logger = logging.getLogger(__name__)


def _error_message(resp: httpx.Response) -> str:
    """Best-effort human readable reason for a non-2xx response."""
    try:
        body = resp.json()
    except ValueError:
        body = None

    if isinstance(body, dict):
        for key in ("message", "error", "detail"):
            value = body.get(key)
            if isinstance(value, str) and value.strip():
                return value
    return f"Request failed with status {resp.status_code}"


def _body(resp: httpx.Response) -> Any:
    try:
        return resp.json()
    except ValueError:
        return resp.text


class SubmissionClient:
    """POSTs application payloads to the configured endpoint.

    Every outcome, transport errors included, is returned as a
    ``SubmissionOutcome``; nothing is retried.
    """

    def __init__(
        self,
        config: LOSConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config or LOSConfig()
        self._http = httpx.AsyncClient(
            base_url=self.config.base_url,
            timeout=httpx.Timeout(self.config.timeout_seconds),
            headers={"Accept": "application/json"},
            transport=transport,
        )

    async def submit(self, payload: dict[str, Any]) -> SubmissionOutcome:
        path = self.config.submit_path
        try:
            resp = await self._http.post(path, json=payload)
        except httpx.TimeoutException as exc:
            logger.warning("Submission to %s timed out: %s", path, exc)
            return SubmissionOutcome(
                success=False,
                error="The request timed out. Please try again.",
            )
        except httpx.HTTPError as exc:
            logger.warning("Submission to %s failed: %s", path, exc)
            return SubmissionOutcome(
                success=False,
                error=str(exc) or type(exc).__name__,
            )

        if resp.is_success:
            logger.info("Submission to %s accepted with status %d", path, resp.status_code)
            return SubmissionOutcome(
                success=True,
                status_code=resp.status_code,
                data=_body(resp),
            )

        message = _error_message(resp)
        logger.warning(
            "Submission to %s rejected with status %d: %s", path, resp.status_code, message
        )
        return SubmissionOutcome(
            success=False,
            status_code=resp.status_code,
            data=_body(resp),
            error=message,
        )

    async def close(self) -> None:
        await self._http.aclose()
