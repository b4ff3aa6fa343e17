"""Code generator — turns a generation request into LLM-written client code."""

import logging

from tesser_mcp.config import Settings
from tesser_mcp.generator.base import GenerationRequest
from tesser_mcp.generator.prompt import assemble_prompt, load_template
from tesser_mcp.languages import language_config
from tesser_mcp.llm import LlmClient
from tesser_mcp.parser.loader import load_api_description

logger = logging.getLogger(__name__)


class CodeGenerator:
    """Builds the endpoint prompt and delegates to the LLM."""

    def __init__(self, settings: Settings | None = None, client: LlmClient | None = None):
        self.settings = settings or Settings.from_env()
        self.client = client or LlmClient(settings=self.settings)
        self.spec = load_api_description()
        self.template = load_template()

    def build_prompt(self, request: GenerationRequest, endpoint_info: str) -> str:
        return assemble_prompt(
            self.template,
            request.endpoint_path,
            request.language,
            endpoint_info,
            include_types_guidance=include_types_guidance(request),
            spec=self.spec,
        )

    async def generate(self, request: GenerationRequest, endpoint_info: str) -> str:
        """Return the generated text. Raises CodegenError subclasses on failure."""
        logger.info(
            "Generating code for endpoint: %s, language: %s",
            request.endpoint_path, request.language.value,
        )
        prompt = self.build_prompt(request, endpoint_info)
        text = await self.client.complete(prompt, max_tokens=self.settings.max_tokens)
        logger.info("Generated code length: %d chars", len(text))
        return text


def include_types_guidance(request: GenerationRequest) -> str:
    if not request.include_types:
        return ""
    name = language_config(request.language).name
    return f"- Include full {name} type definitions matching the OpenAPI schemas"
