import asyncio
import logging
import os
from typing import Any, Dict, Optional

import httpx

from janproxy.core.config import settings

logger = logging.getLogger(__name__)

SPEC_FORMS_PATH = "/spec-forms"


class UpstreamError(Exception):
    """
    Base error for anything that went wrong talking to the spec-form API.
    The lookup service turns every subclass into fallback data.
    """

    def __init__(self, message: str, status_code: Optional[int] = None, body: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.body = body


class UpstreamConfigError(UpstreamError):
    pass


class UpstreamTimeoutError(UpstreamError):
    pass


class UpstreamHTTPError(UpstreamError):
    pass


class UpstreamDecodeError(UpstreamError):
    pass


def _get_credentials() -> Dict[str, str]:
    # Prefer pydantic settings, fallback to env
    api_key = (getattr(settings, "BIHINKANRI_API_KEY", "") or "").strip()
    if not api_key:
        api_key = (os.environ.get("BIHINKANRI_API_KEY", "") or "").strip()
    account_id = (getattr(settings, "BIHINKANRI_ACCOUNT_ID", "") or "").strip()
    if not account_id:
        account_id = (os.environ.get("BIHINKANRI_ACCOUNT_ID", "") or "").strip()

    if not api_key:
        raise UpstreamConfigError("BIHINKANRI_API_KEY is not set")
    if not account_id:
        raise UpstreamConfigError("BIHINKANRI_ACCOUNT_ID is not set")

    return {
        "Authorization": api_key,
        "X-Account-ID": account_id,
        "Content-Type": "application/json",
    }


def _build_client() -> httpx.AsyncClient:
    return httpx.AsyncClient(timeout=settings.UPSTREAM_TIMEOUT_SECONDS)


async def _get_spec_forms(jan_code: str, headers: Dict[str, str]) -> httpx.Response:
    url = settings.BIHINKANRI_API_BASE.rstrip("/") + SPEC_FORMS_PATH
    async with _build_client() as client:
        return await client.get(url, params={"jan_code": jan_code}, headers=headers)


async def fetch_spec_form(jan_code: str) -> Any:
    """
    Calls the spec-form API for one JAN code and returns the decoded JSON body.

    Exactly one attempt, bounded by UPSTREAM_TIMEOUT_SECONDS. Raises an
    UpstreamError subclass for missing credentials, timeouts, transport
    failures, non-2xx statuses and non-JSON bodies.
    """
    headers = _get_credentials()
    timeout = settings.UPSTREAM_TIMEOUT_SECONDS

    logger.info("Calling spec-form API: JAN=%s", jan_code)

    try:
        r = await asyncio.wait_for(_get_spec_forms(jan_code, headers), timeout=timeout)
    except (asyncio.TimeoutError, httpx.TimeoutException):
        raise UpstreamTimeoutError(f"Spec-form API timed out after {timeout:g}s")
    except httpx.HTTPError as e:
        raise UpstreamError(f"Spec-form API request failed: {e.__class__.__name__}: {e}")

    if r.status_code < 200 or r.status_code >= 300:
        raise UpstreamHTTPError(
            f"API Error: {r.status_code} {r.reason_phrase}",
            status_code=r.status_code,
            body=r.text[:2000],
        )

    try:
        data = r.json()
    except ValueError:
        raise UpstreamDecodeError(
            "Spec-form API returned a non-JSON body",
            status_code=r.status_code,
            body=r.text[:2000],
        )

    logger.info("Spec-form API responded: JAN=%s status=%s", jan_code, r.status_code)
    return data
