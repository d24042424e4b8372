import json
import os


def handler(event, context):
    event = event or {}
    if event.get("headers", {}).get("X-Fail"):
        raise ValueError("requested failure")
    return {
        "statusCode": 200,
        "body": json.dumps(
            {
                "method": event.get("httpMethod"),
                "path": event.get("path"),
                "query": event.get("queryStringParameters"),
                "requestId": (event.get("requestContext") or {}).get("requestId"),
                "stage": os.getenv("STAGE", "local"),
            }
        ),
    }
