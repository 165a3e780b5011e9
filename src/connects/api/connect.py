# src/connects/api/connect.py
# Created: 2026-03-02 13:27:10
# Author: Connects

from typing import Any, Callable, Optional, Type, TypeVar
import logging

from pydantic import BaseModel

from .api_client import APIClient, APIConfig, RequestDescriptor, ResponseEnvelope, Transport
from .errors import UNHANDLED_ERROR, ConnectError, ErrorCatalog, ErrorTable
from .response_handler import ResponseHandler

M = TypeVar('M', bound=BaseModel)
logger = logging.getLogger(__name__)

class BaseConnect:
    """
    Common plumbing for a vendor connect.

    Every public operation goes through ``_call``: build the request, inject
    credentials, hand it to the transport, then let ``_handle`` turn the
    envelope into a validated model. Any failure, including caller input a
    builder cannot handle, leaves ``_call`` as this vendor's ConnectError
    carrying the endpoint that was being called.
    """

    vendor: str = ""
    catalog: ErrorCatalog
    table: ErrorTable

    def __init__(self, api_config: APIConfig, transport: Optional[Transport] = None):
        self.api_config = api_config
        self.transport: Transport = transport if transport is not None else APIClient(api_config)
        self.responses = ResponseHandler(self.catalog, self.table)

    async def close(self) -> None:
        """Close the underlying transport when it holds resources"""
        close = getattr(self.transport, "close", None)
        if close is not None:
            await close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    def _error(self, code: str, cause: Optional[BaseException] = None, **metadata: Any) -> ConnectError:
        return self.catalog.error(code, metadata, cause)

    def _authorize(self, request: RequestDescriptor) -> RequestDescriptor:
        """Return the request with credentials attached"""
        return request

    def _handle(self, response: ResponseEnvelope, schema: Type[M]) -> M:
        raise NotImplementedError

    async def _call(
        self,
        build: Callable[..., RequestDescriptor],
        schema: Type[M],
        *args: Any
    ) -> M:
        """
        Run one operation

        Args:
            build: Request builder, called here with args
            schema: Model the response must validate against

        Returns:
            The validated model
        """
        # Named after the builder until the request exists
        endpoint = build.__name__
        try:
            request = build(*args)
            endpoint = request.path
            response = await self.transport.send(self._authorize(request))
            return self._handle(response, schema)
        except ConnectError as e:
            log_extra = {"vendor": self.vendor, "endpoint": endpoint}
            if e.vendor != self.vendor:
                logger.warning(f"{self.vendor} {endpoint} failed with foreign error {e.vendor}/{e.code}",
                               extra=log_extra)
                raise self._error(UNHANDLED_ERROR, e, endpoint=endpoint)
            logger.warning(f"{self.vendor} {endpoint} failed: {e.code}", extra=log_extra)
            raise e.annotate(endpoint=endpoint)
        except Exception as e:
            log_extra = {"vendor": self.vendor, "endpoint": endpoint}
            logger.warning(f"{self.vendor} {endpoint} failed unexpectedly: {e!r}", extra=log_extra)
            raise self._error(UNHANDLED_ERROR, e, endpoint=endpoint)
