"""Request and result models for code generation."""

from typing import Literal

from pydantic import BaseModel, ConfigDict

from tesser_mcp.languages import Language

QUOTE_ENDPOINT = "/quotes"
PAYMENT_ENDPOINT = "/payments"

EndpointPath = Literal["/quotes", "/payments"]


class GenerationRequest(BaseModel):
    """Validated input for one code generation call."""

    model_config = ConfigDict(frozen=True)

    endpoint_path: EndpointPath
    language: Language
    include_types: bool = True


class GenerationResult(BaseModel):
    """Tagged outcome of a handler call.

    Only render() flattens it into the single text block the tool returns.
    """

    ok: bool
    text: str = ""
    error_kind: str | None = None
    message: str = ""

    @classmethod
    def success(cls, text: str) -> "GenerationResult":
        return cls(ok=True, text=text)

    @classmethod
    def failure(cls, error_kind: str, message: str) -> "GenerationResult":
        return cls(ok=False, error_kind=error_kind, message=message)

    def render(self) -> str:
        if self.ok:
            return self.text
        return f"Error generating code: {self.message}"
