from unittest.mock import patch

from tesser_mcp.generator.base import GenerationRequest
from tesser_mcp.generator.code import CodeGenerator, include_types_guidance


class TestCodeGenerator:
    async def test_generate_returns_collaborator_text(self, generator, llm_client):
        request = GenerationRequest(endpoint_path="/quotes", language="python")
        text = await generator.generate(request, "GUIDANCE")

        assert text.startswith("prompt length: ")
        llm_client.complete.assert_awaited_once()

    async def test_passes_max_tokens(self, generator, llm_client):
        request = GenerationRequest(endpoint_path="/payments", language="go")
        await generator.generate(request, "GUIDANCE")

        assert llm_client.complete.call_args.kwargs["max_tokens"] == 1234

    async def test_prompt_contains_guidance_and_endpoint(self, generator, llm_client):
        request = GenerationRequest(endpoint_path="/payments", language="go")
        await generator.generate(request, "CUSTOM GUIDANCE BLOCK")

        prompt = llm_client.complete.call_args.args[0]
        assert "CUSTOM GUIDANCE BLOCK" in prompt
        assert "TARGET ENDPOINT: /payments" in prompt
        assert "Go" in prompt

    def test_build_prompt_without_llm(self, generator, llm_client):
        request = GenerationRequest(endpoint_path="/quotes", language="rust", include_types=False)
        prompt = generator.build_prompt(request, "G")

        assert "/quotes" in prompt
        assert "type definitions" not in prompt
        llm_client.complete.assert_not_called()

    @patch("tesser_mcp.generator.code.LlmClient")
    def test_default_client_uses_settings(self, MockLlmClient, settings):
        gen = CodeGenerator(settings=settings)
        MockLlmClient.assert_called_once_with(settings=settings)
        assert gen.client is MockLlmClient.return_value


class TestIncludeTypesGuidance:
    def test_enabled_names_language(self):
        request = GenerationRequest(endpoint_path="/quotes", language="typescript")
        assert include_types_guidance(request) == (
            "- Include full TypeScript type definitions matching the OpenAPI schemas"
        )

    def test_disabled(self):
        request = GenerationRequest(endpoint_path="/quotes", language="typescript", include_types=False)
        assert include_types_guidance(request) == ""
