"""Helpers shared by the HTTP and Connect handlers"""
import json

import sentry_sdk

from rps_engine.domain.errors import ValidationError


def start_request_transaction(request, op: str, name: str):
    """Start a Sentry transaction, continuing the upstream trace if one was sent"""
    sentry_trace = request.headers.get("sentry-trace")
    baggage = request.headers.get("baggage")

    if sentry_trace:
        transaction = sentry_sdk.continue_trace({
            "sentry-trace": sentry_trace,
            "baggage": baggage
        }, op=op, name=name)
        return sentry_sdk.start_transaction(transaction)

    return sentry_sdk.start_transaction(op=op, name=name)


def parse_json_body(body: bytes) -> dict:
    """Decode a JSON object body; an empty body reads as an empty object"""
    if not body:
        return {}
    try:
        data = json.loads(body)
    except ValueError as e:
        raise ValidationError(f"Malformed JSON body: {e}") from e
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data
