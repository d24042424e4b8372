from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional, Protocol

import boto3
from botocore.exceptions import BotoCoreError, ClientError, NoCredentialsError

from bedlamb.config import Settings
from bedlamb.errors import ConfigError, InvocationError
from bedlamb.log import LOGGER_NAME

logger = logging.getLogger(LOGGER_NAME)


@dataclass(frozen=True)
class InvocationResult:
    status_code: int
    payload: bytes
    function_error: Optional[str] = None
    executed_version: Optional[str] = None


class Invoker(Protocol):
    def invoke(self, function_name: str, payload: bytes) -> InvocationResult:
        ...


class LambdaInvoker:
    """Synchronous (RequestResponse) invoke through a boto3 Lambda client."""

    def __init__(self, client: Any):
        self.client = client

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        session: Optional[boto3.session.Session] = None,
    ) -> "LambdaInvoker":
        try:
            session = session or boto3.session.Session(
                profile_name=settings.profile,
                region_name=settings.region,
            )
            if session.get_credentials() is None:
                raise ConfigError("unable to locate AWS credentials")
            client = session.client(
                "lambda",
                endpoint_url=settings.endpoint_url,
                region_name=settings.region,
            )
        except (BotoCoreError, ValueError) as exc:
            # botocore raises ValueError for a malformed endpoint_url
            raise ConfigError(str(exc)) from exc
        logger.debug(
            "lambda client ready (region=%s endpoint=%s)",
            client.meta.region_name,
            settings.endpoint_url,
        )
        return cls(client)

    def invoke(self, function_name: str, payload: bytes) -> InvocationResult:
        try:
            resp = self.client.invoke(
                FunctionName=function_name,
                InvocationType="RequestResponse",
                Payload=payload,
            )
        except NoCredentialsError as exc:
            raise ConfigError(str(exc)) from exc
        except (ClientError, BotoCoreError) as exc:
            raise InvocationError(str(exc)) from exc

        body = resp.get("Payload")
        try:
            raw = body.read() if body is not None else b""
        except BotoCoreError as exc:
            raise InvocationError(str(exc)) from exc
        return InvocationResult(
            status_code=resp.get("StatusCode", 0),
            payload=raw,
            function_error=resp.get("FunctionError"),
            executed_version=resp.get("ExecutedVersion"),
        )
