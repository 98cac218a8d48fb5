"""Shared plumbing for resource modules."""

from typing import Any
from urllib.parse import quote

from pydantic import BaseModel
from pydantic import TypeAdapter

from ..http import MonimeHttpClient
from ..validation import validate


class Resource:
    """Base class for one API resource.

    Subclasses set ``base_path`` and translate each method call into a
    single :meth:`MonimeHttpClient.request`.
    """

    base_path: str = ""

    def __init__(self, http: MonimeHttpClient) -> None:
        self._http = http

    def _validate(
        self, *checks: tuple[type[BaseModel] | TypeAdapter, Any]
    ) -> None:
        """Run ``(schema, data)`` checks when input validation is enabled."""
        if not self._http.should_validate:
            return
        for schema, data in checks:
            validate(schema, data)

    def _path(self, *segments: str) -> str:
        quoted = "/".join(quote(str(s), safe="") for s in segments)
        return f"{self.base_path}/{quoted}" if quoted else self.base_path
