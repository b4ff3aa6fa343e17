"""Endpoint detail extraction from the API description."""

from typing import Any

from .base import METHOD_PRIORITY, EndpointMissing, OperationDescriptor
from .loader import get_paths


def extract_endpoint_details(spec: dict[str, Any], endpoint: str) -> OperationDescriptor | EndpointMissing:
    """Locate the operation for ``endpoint``.

    Returns an EndpointMissing marker rather than raising, so callers can
    report a readable reason.
    """
    path_item = get_paths(spec).get(endpoint)
    if not path_item:
        return EndpointMissing(path=endpoint, reason="endpoint_not_found")

    for method in METHOD_PRIORITY:
        operation = path_item.get(method)
        if operation:
            return _build_descriptor(endpoint, method, operation)

    return EndpointMissing(path=endpoint, reason="no_supported_method")


def list_operations(spec: dict[str, Any]) -> list[OperationDescriptor]:
    """Return every supported operation in the spec, in document order."""
    operations = []
    for path, path_item in get_paths(spec).items():
        for method in METHOD_PRIORITY:
            operation = path_item.get(method)
            if operation:
                operations.append(_build_descriptor(path, method, operation))
    return operations


def _build_descriptor(path: str, method: str, operation: dict) -> OperationDescriptor:
    return OperationDescriptor(
        path=path,
        method=method.upper(),
        summary=operation.get("summary", ""),
        description=operation.get("description", ""),
        operation_id=operation.get("operationId", ""),
        request_schema=_json_body_schema(operation.get("requestBody")),
        responses=operation.get("responses", {}),
        parameters=operation.get("parameters", []),
        tags=operation.get("tags", []),
    )


def _json_body_schema(body: dict | None) -> dict | None:
    if not body:
        return None
    return body.get("content", {}).get("application/json", {}).get("schema")
