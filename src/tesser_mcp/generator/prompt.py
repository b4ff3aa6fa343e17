"""Prompt assembly — fills the client-code template for one endpoint."""

import json
import logging
from pathlib import Path
from typing import Any

from tesser_mcp.exceptions import EndpointNotFoundError, UnsupportedMethodError
from tesser_mcp.languages import Language, language_config
from tesser_mcp.parser.base import EndpointMissing
from tesser_mcp.parser.extractor import extract_endpoint_details
from tesser_mcp.parser.loader import load_api_description
from tesser_mcp.parser.narrower import narrow_spec

logger = logging.getLogger(__name__)

PROMPTS_DIR = Path(__file__).parent.parent / "prompts"
TEMPLATE_PATH = PROMPTS_DIR / "client_code.md"

FALLBACK_TEMPLATE = "Generate code for the {{ENDPOINT}} endpoint in {{LANGUAGE}}."

ENDPOINT_TOKEN = "{{ENDPOINT}}"
LANGUAGE_TOKEN = "{{LANGUAGE}}"
EXTENSION_TOKEN = "{{LANGUAGE_EXTENSION}}"
SPEC_TOKEN = "{{OPENAPI_SPEC}}"
INFO_TOKEN = "{{ENDPOINT_SPECIFIC_INFO}}"


def load_template(path: Path | None = None) -> str:
    """Read the prompt template, falling back to a one-line template on failure."""
    template_path = path or TEMPLATE_PATH
    try:
        return template_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Could not read prompt template %s (%s); using fallback", template_path, exc)
        return FALLBACK_TEMPLATE


def serialize_spec(narrowed: dict[str, Any]) -> str:
    return json.dumps(narrowed, indent=2, ensure_ascii=False)


def assemble_prompt(
    template: str,
    endpoint: str,
    language: Language | str,
    endpoint_info: str,
    include_types_guidance: str = "",
    spec: dict[str, Any] | None = None,
) -> str:
    """Substitute every placeholder occurrence in ``template``.

    Raises EndpointNotFoundError or UnsupportedMethodError if ``endpoint``
    has no usable operation in ``spec``.
    """
    spec = spec if spec is not None else load_api_description()
    config = language_config(language)

    details = extract_endpoint_details(spec, endpoint)
    if isinstance(details, EndpointMissing):
        if details.reason == "endpoint_not_found":
            raise EndpointNotFoundError(details.message)
        raise UnsupportedMethodError(details.message)

    logger.debug(
        "Template placeholders found: ENDPOINT=%s, LANGUAGE=%s, OPENAPI_SPEC=%s",
        ENDPOINT_TOKEN in template, LANGUAGE_TOKEN in template, SPEC_TOKEN in template,
    )

    narrowed = narrow_spec(spec, endpoint)
    logger.debug("Narrowed spec for %s %s (%s)", details.method, endpoint, details.operation_id)

    info = endpoint_info.rstrip("\n")
    if include_types_guidance:
        info = f"{info}\n{include_types_guidance}"

    prompt = (
        template
        .replace(ENDPOINT_TOKEN, endpoint)
        .replace(LANGUAGE_TOKEN, config.name)
        .replace(EXTENSION_TOKEN, config.extension)
        .replace(SPEC_TOKEN, serialize_spec(narrowed))
        .replace(INFO_TOKEN, info)
    )
    logger.info("Final prompt length: %d chars", len(prompt))
    return prompt
