"""
HTTP client scoped to a single remote project.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple
import json
import time
import aiohttp
from tolgee_translation.exceptions import HttpStatusError
from tolgee_translation.utils.logging import LoggerMixin


# (field name, file name, content, content type)
UploadFile = Tuple[str, str, bytes, str]


@dataclass
class ApiResponse:
    """Fully read response of the remote service."""
    method: str
    url: str
    status: int
    body: str = ""

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    def json(self) -> Any:
        return json.loads(self.body) if self.body else None

    def raise_for_status(self):
        """Raise ``HttpStatusError`` for 4xx and 5xx responses."""
        if self.status >= 400:
            raise HttpStatusError(self)


class ScopedHttpClient(LoggerMixin):
    """
    aiohttp based client resolving every path against a base uri and sending
    default headers on every request.

    The underlying session is opened on the first request.
    """

    def __init__(
        self,
        base_uri: str,
        headers: Optional[Dict[str, str]] = None,
        timeout: Optional[float] = None,
        session: Optional[aiohttp.ClientSession] = None
    ):
        self.base_uri = base_uri.rstrip("/")
        self.headers = dict(headers or {})
        self.timeout = timeout
        self.session = session
        self._owns_session = session is None

    @classmethod
    def for_base_uri(cls, base_uri: str, headers: Optional[Dict[str, str]] = None, **kwargs) -> "ScopedHttpClient":
        return cls(base_uri, headers=headers, **kwargs)

    def build_url(self, path: str) -> str:
        return f"{self.base_uri}/{path.lstrip('/')}"

    @staticmethod
    def build_form(files: List[UploadFile]) -> aiohttp.FormData:
        """Build a multi-part body with one part per uploaded file."""
        form = aiohttp.FormData()
        for field, filename, content, content_type in files:
            form.add_field(field, content, filename=filename, content_type=content_type)
        return form

    async def _get_session(self) -> aiohttp.ClientSession:
        if self.session is None or self.session.closed:
            timeout = aiohttp.ClientTimeout(total=self.timeout) if self.timeout else None
            self.session = aiohttp.ClientSession(headers=self.headers, timeout=timeout)
            self._owns_session = True
        return self.session

    async def request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json: Any = None,
        files: Optional[List[UploadFile]] = None
    ) -> ApiResponse:
        """
        Send a request and read its whole body.

        Args:
            method: HTTP method
            path: Path relative to the base uri
            params: Query parameters, ``None`` values are left out
            json: JSON body
            files: Files sent as a multi-part body

        Returns:
            ApiResponse with status and body text
        """
        session = await self._get_session()
        url = self.build_url(path)
        start_time = time.time()

        kwargs: Dict[str, Any] = {"headers": self.headers}
        if params:
            kwargs["params"] = {k: str(v) for k, v in params.items() if v is not None}
        if files:
            kwargs["data"] = self.build_form(files)
        elif json is not None:
            kwargs["json"] = json

        async with session.request(method, url, **kwargs) as response:
            body = await response.text()
            result = ApiResponse(method=method, url=url, status=response.status, body=body)

        self.log_latency("http_request", start_time, method=method, url=url, status=result.status)
        return result

    async def close(self):
        """Close the session if this client opened it."""
        if self.session is not None and self._owns_session and not self.session.closed:
            await self.session.close()
        self.session = None

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()
