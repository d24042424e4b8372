from __future__ import annotations

import io
import json
from typing import Any, Dict, Optional

import boto3
import pytest
from botocore.response import StreamingBody
from botocore.stub import ANY, Stubber

DEFAULT_REGION = "us-east-1"
AWS_FAKE_CREDS = {
    "AWS_ACCESS_KEY_ID": "test",
    "AWS_SECRET_ACCESS_KEY": "test",
    "AWS_SESSION_TOKEN": "test",
}


@pytest.fixture(autouse=True)
def aws_credentials(monkeypatch: pytest.MonkeyPatch) -> Dict[str, str]:
    """Ensure AWS creds exist for boto3 even when running offline."""
    for key, value in AWS_FAKE_CREDS.items():
        monkeypatch.setenv(key, value)
    monkeypatch.setenv("AWS_DEFAULT_REGION", DEFAULT_REGION)
    return AWS_FAKE_CREDS


def streaming_body(data: Any) -> StreamingBody:
    raw = data if isinstance(data, (bytes, bytearray)) else json.dumps(data).encode("utf-8")
    return StreamingBody(io.BytesIO(raw), len(raw))


@pytest.fixture
def lambda_stub():
    """Return a stubbed Lambda client plus a helper registering invoke responses."""
    client = boto3.session.Session(region_name=DEFAULT_REGION).client("lambda")
    stubber = Stubber(client)
    stubber.activate()

    def _register(
        function_name: str,
        response_body: Any,
        status: int = 200,
        function_error: Optional[str] = None,
    ):
        expected = {
            "FunctionName": function_name,
            "InvocationType": "RequestResponse",
            "Payload": ANY,
        }
        if status >= 400:
            stubber.add_client_error(
                "invoke",
                service_error_code="ResourceNotFoundException",
                service_message=f"Function not found: {function_name}",
                http_status_code=status,
                expected_params=expected,
            )
            return
        response = {"StatusCode": status, "Payload": streaming_body(response_body)}
        if function_error:
            response["FunctionError"] = function_error
        stubber.add_response("invoke", response, expected_params=expected)

    yield {"client": client, "register": _register, "stubber": stubber}

    stubber.assert_no_pending_responses()
    stubber.deactivate()
