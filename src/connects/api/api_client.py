# src/connects/api/api_client.py
# Created: 2026-03-02 10:14:21
# Author: Connects

from typing import Dict, Any, Optional, Mapping, Protocol, runtime_checkable
from dataclasses import dataclass, field
from enum import Enum
import asyncio
import json
import logging
import aiohttp
import yarl

from ..core.exceptions import TransportError

logger = logging.getLogger(__name__)

class RequestMethod(Enum):
    """HTTP request methods"""
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"

class ContentType(Enum):
    """Encoding used for a request payload"""
    JSON = "application/json"
    FORM = "application/x-www-form-urlencoded"
    TEXT = "text/plain"

@dataclass(frozen=True)
class RequestDescriptor:
    """Everything needed to perform one vendor call"""
    path: str
    method: RequestMethod = RequestMethod.GET
    query: Optional[Mapping[str, str]] = None
    payload: Any = None
    content_type: ContentType = ContentType.JSON
    headers: Optional[Mapping[str, str]] = None

@dataclass(frozen=True)
class ResponseEnvelope:
    """Status code and parsed body returned by a transport"""
    status: int
    body: Any = None

@dataclass(frozen=True)
class APIConfig:
    """Configuration for API client"""
    base_url: str
    timeout: float = 10.0
    verify_ssl: bool = True
    user_agent: str = "connects/1.0"
    headers: Mapping[str, str] = field(default_factory=dict)

@runtime_checkable
class Transport(Protocol):
    """Anything able to turn a RequestDescriptor into a ResponseEnvelope"""
    async def send(self, request: RequestDescriptor) -> ResponseEnvelope:
        ...

class APIClient:
    """
    aiohttp backed transport.

    Sends a single request per call and hands back the status code with the
    parsed body. Status codes are not interpreted here; that is left to the
    connect that owns the request. Network failures and timeouts surface as
    TransportError.
    """

    def __init__(self, config: APIConfig):
        self.config = config
        self._session: Optional[aiohttp.ClientSession] = None

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create aiohttp session"""
        if self._session is None or self._session.closed:
            headers = {"User-Agent": self.config.user_agent}
            headers.update(self.config.headers)
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.config.timeout),
                headers=headers
            )
        return self._session

    async def close(self) -> None:
        """Close the API client session"""
        if self._session and not self._session.closed:
            await self._session.close()

    def build_url(self, path: str) -> yarl.URL:
        """Resolve a request path against the base URL; absolute URLs pass through"""
        url = yarl.URL(path)
        if url.is_absolute():
            return url
        base = self.config.base_url.rstrip('/')
        return yarl.URL(f"{base}/{path.lstrip('/')}", encoded=False)

    @staticmethod
    def parse_body(text: str) -> Any:
        """JSON when possible, raw text otherwise, None for an empty body"""
        if not text or not text.strip():
            return None
        try:
            return json.loads(text)
        except ValueError:
            return text

    async def send(self, request: RequestDescriptor) -> ResponseEnvelope:
        """
        Perform a request

        Args:
            request: Descriptor built by a connect

        Returns:
            ResponseEnvelope with the status and parsed body
        """
        url = self.build_url(request.path)
        session = await self._get_session()

        kwargs: Dict[str, Any] = {
            "params": dict(request.query) if request.query else None,
            "headers": dict(request.headers) if request.headers else None,
            "ssl": self.config.verify_ssl
        }
        if request.payload is not None:
            if request.content_type is ContentType.JSON:
                kwargs["json"] = request.payload
            else:
                kwargs["data"] = request.payload
                kwargs["headers"] = {
                    **(kwargs["headers"] or {}),
                    "Content-Type": request.content_type.value
                }

        logger.debug(f"{request.method.value} {url}")
        try:
            async with session.request(request.method.value, url, **kwargs) as response:
                text = await response.text()
                return ResponseEnvelope(status=response.status, body=self.parse_body(text))
        except asyncio.TimeoutError as e:
            raise TransportError(
                f"Request timed out after {self.config.timeout}s",
                details={"url": str(url), "method": request.method.value}
            ) from e
        except aiohttp.ClientError as e:
            logger.error(f"API request failed: {str(e)}")
            raise TransportError(
                f"API request failed: {str(e)}",
                details={"url": str(url), "method": request.method.value}
            ) from e

    async def get(self, path: str, query: Optional[Mapping[str, str]] = None) -> ResponseEnvelope:
        """Perform GET request"""
        return await self.send(RequestDescriptor(path=path, method=RequestMethod.GET, query=query))

    async def post(self, path: str, payload: Any = None, **kwargs: Any) -> ResponseEnvelope:
        """Perform POST request"""
        return await self.send(
            RequestDescriptor(path=path, method=RequestMethod.POST, payload=payload, **kwargs)
        )
