"""Load the bundled Tesser FX OpenAPI description.

The description ships as package data and is parsed once per process.
Treat the returned dict as read-only; the narrower hands out deep copies.
"""

from functools import lru_cache
from pathlib import Path
from typing import Any, Iterator

import yaml

SPEC_PATH = Path(__file__).parent.parent / "openapi" / "tesser_fx.yaml"


def load_spec(path: Path) -> dict[str, Any]:
    """Parse an OpenAPI document from disk."""
    text = path.read_text(encoding="utf-8")
    return yaml.safe_load(text)


@lru_cache(maxsize=1)
def load_api_description() -> dict[str, Any]:
    """Return the shared Tesser FX API description."""
    return load_spec(SPEC_PATH)


def get_paths(spec: dict[str, Any]) -> dict[str, Any]:
    return spec.get("paths", {})


def get_schemas(spec: dict[str, Any]) -> dict[str, Any]:
    return spec.get("components", {}).get("schemas", {})


def resolve_ref(spec: dict[str, Any], ref: str) -> Any:
    """Resolve a local ``#/...`` $ref pointer in the spec.

    Raises KeyError if any segment is missing.
    """
    if not ref.startswith("#/"):
        raise KeyError(f"Only local references are supported: {ref}")
    node: Any = spec
    for part in ref[2:].split("/"):
        node = node[part]
    return node


def iter_refs(node: Any) -> Iterator[str]:
    """Yield every $ref value found anywhere under ``node``."""
    if isinstance(node, dict):
        for key, value in node.items():
            if key == "$ref" and isinstance(value, str):
                yield value
            else:
                yield from iter_refs(value)
    elif isinstance(node, list):
        for item in node:
            yield from iter_refs(item)


def find_dangling_refs(spec: dict[str, Any]) -> list[str]:
    """Return the $refs in ``spec`` that do not resolve within it."""
    dangling = []
    for ref in iter_refs(spec):
        try:
            resolve_ref(spec, ref)
        except (KeyError, TypeError):
            dangling.append(ref)
    return dangling
