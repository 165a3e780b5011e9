# src/connects/api/errors.py
# Created: 2026-03-02 11:40:07
# Author: Connects

from typing import Any, Dict, Mapping, Optional
from dataclasses import dataclass, field
from types import MappingProxyType

from ..core.exceptions import ConnectsError
from ..core.utils import render_template

UNKNOWN_ERROR = "UNKNOWN_ERROR"
UNHANDLED_ERROR = "UNHANDLED_ERROR"

@dataclass(frozen=True)
class ErrorCatalog:
    """
    Error codes and message templates of one vendor.

    Templates use ``${name}`` placeholders filled from the error metadata.
    """
    vendor: str
    templates: Mapping[str, str]
    unknown: str = UNKNOWN_ERROR

    def __post_init__(self):
        if self.unknown not in self.templates:
            raise ValueError(f"{self.vendor} catalog has no template for {self.unknown}")
        object.__setattr__(self, "templates", MappingProxyType(dict(self.templates)))

    def __contains__(self, code: object) -> bool:
        return code in self.templates

    @property
    def codes(self) -> frozenset:
        return frozenset(self.templates)

    def error(
        self,
        code: str,
        metadata: Optional[Mapping[str, Any]] = None,
        cause: Optional[BaseException] = None
    ) -> "ConnectError":
        """Build a ConnectError for this vendor"""
        return ConnectError(self, code, metadata, cause)

class ConnectError(ConnectsError):
    """
    The single error type raised by every connect.

    ``code`` is one of the catalog codes. A code the catalog does not know is
    replaced with the catalog's unknown code and kept in
    ``metadata["original_code"]``. The message is rendered once, here, so a
    template variable missing from ``metadata`` raises TemplateError.
    """

    def __init__(
        self,
        catalog: ErrorCatalog,
        code: str,
        metadata: Optional[Mapping[str, Any]] = None,
        cause: Optional[BaseException] = None
    ):
        meta: Dict[str, Any] = dict(metadata or {})
        if code not in catalog:
            meta["original_code"] = code
            code = catalog.unknown

        rendered = render_template(catalog.templates[code], meta)
        super().__init__(f"[{catalog.vendor}] {rendered}")

        self.catalog = catalog
        self.vendor = catalog.vendor
        self.code = code
        self.details = self.metadata = MappingProxyType(meta)
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def annotate(self, **context: Any) -> "ConnectError":
        """Return a copy of this error with extra metadata"""
        merged = {**self.metadata, **context}
        return ConnectError(self.catalog, self.code, merged, self.cause)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "vendor": self.vendor,
            "code": self.code,
            "message": self.message,
            "metadata": dict(self.metadata),
            "cause": repr(self.cause) if self.cause is not None else None
        }

    def __repr__(self) -> str:
        return f"ConnectError(vendor={self.vendor!r}, code={self.code!r})"

@dataclass(frozen=True)
class ErrorTable:
    """
    Maps a failed response to a catalog code.

    A known vendor message wins over the status code; anything else falls
    back to ``default``.
    """
    default: str
    statuses: Mapping[int, str] = field(default_factory=dict)
    messages: Mapping[str, str] = field(default_factory=dict)

    def resolve(self, status: Optional[int], message: Optional[str] = None) -> str:
        if message is not None and message in self.messages:
            return self.messages[message]
        if status is not None and status in self.statuses:
            return self.statuses[status]
        return self.default
