import pytest
from pydantic import ValidationError

from tesser_mcp.generator.base import GenerationRequest, GenerationResult
from tesser_mcp.languages import Language, language_config
from tesser_mcp.parser.base import EndpointMissing, OperationDescriptor


class TestLanguageConfig:
    def test_all_languages_configured(self):
        assert {lang.value for lang in Language} == {
            "typescript", "javascript", "python", "go", "rust", "cpp",
        }
        for lang in Language:
            assert language_config(lang).name
            assert language_config(lang).extension

    def test_lookup_by_string(self):
        config = language_config("cpp")
        assert config.name == "C++"
        assert config.extension == "cpp"

    def test_unknown_language(self):
        with pytest.raises(ValueError):
            language_config("java")


class TestGenerationRequest:
    def test_defaults_include_types(self):
        req = GenerationRequest(endpoint_path="/quotes", language="python")
        assert req.include_types is True
        assert req.language is Language.PYTHON

    def test_rejects_unknown_language(self):
        with pytest.raises(ValidationError):
            GenerationRequest(endpoint_path="/quotes", language="java")

    def test_rejects_unknown_endpoint(self):
        with pytest.raises(ValidationError):
            GenerationRequest(endpoint_path="/refunds", language="go")


class TestGenerationResult:
    def test_success_renders_text(self):
        result = GenerationResult.success("code")
        assert result.ok is True
        assert result.render() == "code"

    def test_failure_renders_error_message(self):
        result = GenerationResult.failure("collaborator_failure", "boom")
        assert result.ok is False
        assert result.error_kind == "collaborator_failure"
        assert result.render() == "Error generating code: boom"


class TestOperationDescriptor:
    def test_minimal_descriptor_defaults(self):
        op = OperationDescriptor(path="/quotes", method="POST")
        assert op.summary == ""
        assert op.request_schema is None
        assert op.parameters == []
        assert op.tags == []

    def test_descriptor_is_frozen(self):
        op = OperationDescriptor(path="/quotes", method="POST")
        with pytest.raises(ValidationError):
            op.summary = "changed"

    def test_rejects_unsupported_method(self):
        with pytest.raises(ValidationError):
            OperationDescriptor(path="/quotes", method="PATCH")

    def test_missing_messages(self):
        assert "not found" in EndpointMissing(path="/x", reason="endpoint_not_found").message
        assert "No supported HTTP method" in EndpointMissing(path="/x", reason="no_supported_method").message
