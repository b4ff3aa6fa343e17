"""Exceptions raised while generating client code.

Each carries a ``kind`` string that ends up in the failed GenerationResult.
"""


class CodegenError(Exception):
    """Base class for failures after argument validation."""

    kind = "codegen_error"


class EndpointNotFoundError(CodegenError):
    kind = "endpoint_not_found"


class UnsupportedMethodError(CodegenError):
    kind = "unsupported_method"


class GenerationError(CodegenError):
    """The text-generation call failed or returned nothing usable."""

    kind = "collaborator_failure"


class MissingCredentialsError(GenerationError):
    kind = "missing_credentials"
