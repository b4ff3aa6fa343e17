"""Reduce the full API description to what one endpoint needs.

Keeping the prompt small matters more than completeness: the narrowed
document carries only the schemas the endpoint touches.
"""

import copy
from typing import Any

from .loader import get_paths, get_schemas, iter_refs, resolve_ref

SCHEMA_PREFIX = "#/components/schemas/"

# Static allow-list. tests/test_narrower.py checks it against schema_closure().
ENDPOINT_SCHEMAS: dict[str, tuple[str, ...]] = {
    "/quotes": ("QuoteRequest", "QuoteData", "EventEnvelope", "Error", "Amount", "UnixTime"),
    "/payments": ("PaymentRequest", "PaymentData", "EventEnvelope", "Error", "UnixTime"),
}


def narrow_spec(spec: dict[str, Any], endpoint: str) -> dict[str, Any]:
    """Build the narrowed spec for ``endpoint``.

    The result is a deep copy; mutating it never touches ``spec``.
    """
    info = spec.get("info", {})
    components = spec.get("components", {})
    schemas = get_schemas(spec)

    narrowed = {
        "info": {
            "title": info.get("title"),
            "version": info.get("version"),
        },
        "servers": spec.get("servers", []),
        "paths": {
            endpoint: get_paths(spec).get(endpoint),
        },
        "components": {
            "schemas": {
                name: schemas.get(name) for name in ENDPOINT_SCHEMAS.get(endpoint, ())
            },
            "securitySchemes": {
                "BearerAuth": components.get("securitySchemes", {}).get("BearerAuth"),
            },
            "parameters": {
                "IdempotencyKey": components.get("parameters", {}).get("IdempotencyKey"),
            },
        },
    }
    return copy.deepcopy(narrowed)


def schema_closure(spec: dict[str, Any], endpoint: str) -> set[str]:
    """Names of every component schema reachable from ``endpoint`` via $refs."""
    start = get_paths(spec).get(endpoint)
    if start is None:
        return set()

    names: set[str] = set()
    seen: set[str] = set()
    pending = list(iter_refs(start))
    while pending:
        ref = pending.pop()
        if ref in seen:
            continue
        seen.add(ref)
        if ref.startswith(SCHEMA_PREFIX):
            names.add(ref[len(SCHEMA_PREFIX):])
        pending.extend(iter_refs(resolve_ref(spec, ref)))
    return names
