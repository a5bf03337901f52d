"""
JSON response classes producing pretty‑printed bodies.

FastAPI's default ``JSONResponse`` emits compact JSON.  Album API
responses are indented for readability.  ``create_app`` builds the
response class for its own ``Settings.json_indent`` with
``indented_json_response`` and keeps it on ``app.state`` so the error
handlers render with the same width.
"""

import json
from typing import Any, Type

from fastapi.responses import JSONResponse


class IndentedJSONResponse(JSONResponse):
    """``JSONResponse`` that renders its content with ``indent`` spaces."""

    indent: int = 4

    def render(self, content: Any) -> bytes:
        return json.dumps(
            content,
            ensure_ascii=False,
            allow_nan=False,
            indent=self.indent,
        ).encode("utf-8")


def indented_json_response(indent: int) -> Type[IndentedJSONResponse]:
    """Return an ``IndentedJSONResponse`` subclass fixed to ``indent``."""
    if indent == IndentedJSONResponse.indent:
        return IndentedJSONResponse
    return type(f"IndentedJSONResponse{indent}", (IndentedJSONResponse,), {"indent": indent})
