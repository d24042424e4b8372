"""Invoke a Lambda function with a synthetic API Gateway proxy event."""

__version__ = "0.1.0"
