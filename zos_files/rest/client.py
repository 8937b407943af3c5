"""z/OSMF REST client.

Thin async wrapper over httpx that turns any failed request into a
RestClientError. It does not retry.

Contract:
- Inputs: ZosmfSession, resource path, header list, payload
- Outputs: Response body text
- Side Effects: One HTTP request per call
"""

import json
import logging
from typing import Any

import httpx

from zos_files.errors import RestClientError
from zos_files.rest.headers import Headers
from zos_files.rest.headers import serialize_payload
from zos_files.rest.session import ZosmfSession

logger = logging.getLogger(__name__)


class ZosmfRestClient:
    """Issues requests against a z/OSMF REST API."""

    def __init__(self, transport: httpx.AsyncBaseTransport | None = None) -> None:
        """Initialize REST client.

        Args:
            transport: Optional httpx transport (e.g. httpx.MockTransport in tests)
        """
        self.transport = transport

    async def put_expect_string(
        self,
        session: ZosmfSession,
        resource: str,
        headers: list[dict[str, str]] | None = None,
        payload: Any = None,
    ) -> str:
        """Send a PUT request and return the response body as text.

        Args:
            session: Connection details
            resource: Resource path, e.g. /zosmf/restfiles/ds/USER.DATA.SET
            headers: Header entries, merged in order
            payload: Request body; dicts and lists are sent as JSON

        Returns:
            Response body text

        Raises:
            RestClientError: On connection failure or a non-2xx response
        """
        response = await self._request(session, "PUT", resource, headers, payload)
        return response.text

    async def _request(
        self,
        session: ZosmfSession,
        method: str,
        resource: str,
        headers: list[dict[str, str]] | None,
        payload: Any,
    ) -> httpx.Response:
        request_headers = self._merge_headers(headers)
        content = self._encode_payload(payload)
        auth = httpx.BasicAuth(session.user, session.password) if session.user and session.password else None

        logger.debug(f"{method} {session.base_url}{resource}")
        try:
            async with httpx.AsyncClient(
                auth=auth,
                verify=session.reject_unauthorized,
                timeout=session.timeout,
                transport=self.transport,
            ) as client:
                response = await client.request(
                    method, self._request_url(session, resource), headers=request_headers, content=content
                )
        except httpx.HTTPError as e:
            raise RestClientError(
                f"Failed to complete {method} request to {resource}: {e}",
                http_method=method,
                resource=resource,
            ) from e

        if not response.is_success:
            raise RestClientError(
                self._failure_message(response),
                http_method=method,
                resource=resource,
                status_code=response.status_code,
                response_text=response.text,
            )
        return response

    @staticmethod
    def _request_url(session: ZosmfSession, resource: str) -> httpx.URL:
        """Build the request URL with the resource as its path.

        Data set and member names may contain `#`, which would otherwise start a
        URL fragment, so `#` and `?` are percent-encoded. Everything else in the
        resource is left as given.
        """
        base_url = httpx.URL(session.base_url)
        path = f"{base_url.path.rstrip('/')}/{resource.lstrip('/')}"
        return base_url.copy_with(path=path.replace("#", "%23").replace("?", "%3F"))

    @staticmethod
    def _merge_headers(headers: list[dict[str, str]] | None) -> dict[str, str]:
        merged: dict[str, str] = {}
        for entry in headers or []:
            merged.update(entry)
        merged.update(Headers.CSRF)
        return merged

    @staticmethod
    def _encode_payload(payload: Any) -> bytes | None:
        if payload is None:
            return None
        if isinstance(payload, bytes):
            return payload
        if isinstance(payload, str):
            return payload.encode("utf-8")
        return serialize_payload(payload).encode("utf-8")

    @staticmethod
    def _failure_message(response: httpx.Response) -> str:
        """Describe a non-2xx response, preferring the z/OSMF error message."""
        detail = response.text
        try:
            body = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            body = None
        if isinstance(body, dict) and body.get("message"):
            detail = body["message"]
        return f"Rest API failure with HTTP(S) status {response.status_code}: {detail}"
