import json

from bedlamb import __version__
from bedlamb.event_factory import make_apigw_event, new_request_id


def test_method_upper_cased_in_both_fields():
    request = make_apigw_event("get", "/health", request_id="rid")
    event = request.to_event()
    assert event["httpMethod"] == "GET"
    assert event["requestContext"]["httpMethod"] == "GET"


def test_event_shape():
    request = make_apigw_event(
        "post",
        "/api/users",
        body='{"name":"John"}',
        headers={"Content-Type": "application/json"},
        query={"page": "2"},
        request_id="bedlamb-test-1",
    )
    assert json.loads(request.to_json()) == {
        "httpMethod": "POST",
        "path": "/api/users",
        "queryStringParameters": {"page": "2"},
        "headers": {"Content-Type": "application/json"},
        "body": '{"name":"John"}',
        "isBase64Encoded": False,
        "requestContext": {
            "requestId": "bedlamb-test-1",
            "stage": "prod",
            "httpMethod": "POST",
            "path": "/api/users",
        },
    }


def test_empty_fields_are_kept():
    event = make_apigw_event("GET", "/").to_event()
    assert event["headers"] == {}
    assert event["queryStringParameters"] == {}
    assert event["body"] == ""
    assert event["isBase64Encoded"] is False


def test_path_is_not_validated():
    event = make_apigw_event("GET", "no leading slash?x=1").to_event()
    assert event["path"] == "no leading slash?x=1"
    assert event["requestContext"]["path"] == "no leading slash?x=1"


def test_request_id_format_and_uniqueness():
    first = new_request_id()
    second = new_request_id()
    assert first.startswith(f"bedlamb-{__version__}-")
    assert first != second


def test_generated_request_ids_differ_per_event():
    a = make_apigw_event("GET", "/").request_context.request_id
    b = make_apigw_event("GET", "/").request_context.request_id
    assert a != b
