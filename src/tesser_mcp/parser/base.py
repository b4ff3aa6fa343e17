"""Data models for the Tesser FX API description.

The extractor converts raw OpenAPI path items into these models so that
callers never poke at the nested dicts directly.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict

HttpMethod = Literal["POST", "GET", "PUT", "DELETE"]

# Order matters: the first populated method wins.
METHOD_PRIORITY: tuple[str, ...] = ("post", "get", "put", "delete")


class OperationDescriptor(BaseModel):
    """A single HTTP method on a single path."""

    model_config = ConfigDict(frozen=True)

    path: str
    method: HttpMethod
    summary: str = ""
    description: str = ""
    operation_id: str = ""
    request_schema: dict | None = None  # application/json body schema
    responses: dict = {}  # {status_code: response descriptor or $ref}
    parameters: list[dict] = []
    tags: list[str] = []


class EndpointMissing(BaseModel):
    """Returned instead of an OperationDescriptor when lookup fails."""

    model_config = ConfigDict(frozen=True)

    path: str
    reason: Literal["endpoint_not_found", "no_supported_method"]

    @property
    def message(self) -> str:
        if self.reason == "endpoint_not_found":
            return f"Endpoint {self.path} not found in OpenAPI specification"
        return f"No supported HTTP method found for endpoint {self.path}"
