"""Helpers to synthesise API Gateway proxy events for a single invocation."""

from __future__ import annotations

import json
import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from bedlamb import __version__
from bedlamb.errors import SerializationError

TOOL_TAG = "bedlamb"
STAGE = "prod"


def new_request_id(version: str = __version__) -> str:
    return f"{TOOL_TAG}-{version}-{uuid.uuid4()}"


@dataclass(frozen=True)
class RequestContext:
    request_id: str
    stage: str
    http_method: str
    path: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "requestId": self.request_id,
            "stage": self.stage,
            "httpMethod": self.http_method,
            "path": self.path,
        }


@dataclass(frozen=True)
class InvocationRequest:
    method: str
    path: str
    request_context: RequestContext
    headers: Dict[str, str] = field(default_factory=dict)
    query: Dict[str, str] = field(default_factory=dict)
    body: str = ""
    is_base64_encoded: bool = False

    def to_event(self) -> Dict[str, Any]:
        """Return the API Gateway proxy integration event payload."""
        return {
            "httpMethod": self.method,
            "path": self.path,
            "queryStringParameters": dict(self.query),
            "headers": dict(self.headers),
            "body": self.body,
            "isBase64Encoded": self.is_base64_encoded,
            "requestContext": self.request_context.to_dict(),
        }

    def to_json(self) -> bytes:
        try:
            return json.dumps(self.to_event()).encode("utf-8")
        except (TypeError, ValueError) as exc:
            raise SerializationError(str(exc)) from exc


def make_apigw_event(
    method: str,
    path: str,
    *,
    body: Optional[str] = None,
    headers: Optional[Dict[str, str]] = None,
    query: Optional[Dict[str, str]] = None,
    request_id: Optional[str] = None,
) -> InvocationRequest:
    """Build the request for one invocation.

    The method is upper-cased for both ``httpMethod`` fields; path, headers,
    query and body are passed through untouched.
    """
    http_method = method.upper()
    return InvocationRequest(
        method=http_method,
        path=path,
        headers=dict(headers or {}),
        query=dict(query or {}),
        body=body or "",
        request_context=RequestContext(
            request_id=request_id or new_request_id(),
            stage=STAGE,
            http_method=http_method,
            path=path,
        ),
    )
