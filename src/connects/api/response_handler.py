# src/connects/api/response_handler.py
# Created: 2026-03-02 11:02:45
# Author: Connects

from typing import Any, Dict, Optional, Type, TypeVar
import logging

from pydantic import BaseModel, ValidationError

from .api_client import ResponseEnvelope
from .errors import ConnectError, ErrorCatalog, ErrorTable

M = TypeVar('M', bound=BaseModel)
logger = logging.getLogger(__name__)

class ResponseHandler:
    """
    Turns a ResponseEnvelope into a validated model or a ConnectError.

    This class provides:
    - Schema validation through pydantic models
    - Status/vendor-message to error code mapping
    - Error metadata extraction
    """

    def __init__(self, catalog: ErrorCatalog, table: ErrorTable):
        """Initialize ResponseHandler"""
        self.catalog = catalog
        self.table = table

    def validate(
        self,
        schema: Type[M],
        data: Any,
        code: str,
        **metadata: Any
    ) -> M:
        """
        Validate a response body against a schema

        Args:
            schema: pydantic model describing the expected body
            data: Parsed response body, or the part of it holding the result
            code: Catalog code raised when validation fails
            metadata: Extra context stored on the error

        Returns:
            The validated model instance
        """
        try:
            return schema.model_validate(data)
        except ValidationError as e:
            logger.debug(f"{self.catalog.vendor} response failed {schema.__name__} validation")
            raise self.catalog.error(
                code,
                {**metadata, "details": e.errors(include_url=False)},
                e
            )

    def matches(self, schema: Type[BaseModel], body: Any) -> Optional[BaseModel]:
        """Validated model when the body fits the schema, None otherwise"""
        try:
            return schema.model_validate(body)
        except ValidationError:
            return None

    def fail(
        self,
        status: Optional[int],
        message: Optional[str] = None,
        **metadata: Any
    ) -> ConnectError:
        """
        Build the error for a failed response

        Args:
            status: Status code reported for the failure
            message: Vendor error message/code, if the body carried one
            metadata: Extra context stored on the error

        Returns:
            ConnectError carrying the mapped code
        """
        code = self.table.resolve(status, message)
        return self.catalog.error(code, {"status": status, "message": message, **metadata})

    @staticmethod
    def extract_error(response: ResponseEnvelope) -> Dict[str, Any]:
        """
        Extract error information from a failed response

        Args:
            response: Failed ResponseEnvelope

        Returns:
            Dict containing error details
        """
        error_data: Dict[str, Any] = {"status": response.status}
        if isinstance(response.body, dict):
            error_data.update({
                "message": response.body.get("message"),
                "code": response.body.get("error_code") or response.body.get("message_code"),
                "body": response.body
            })
        else:
            error_data.update({
                "message": None,
                "code": None,
                "body": response.body
            })
        return error_data
