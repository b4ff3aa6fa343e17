from tesser_mcp.config import DEFAULT_MODEL, Settings


class TestSettingsFromEnv:
    def test_defaults(self):
        settings = Settings.from_env({})
        assert settings.model == DEFAULT_MODEL
        assert settings.max_tokens == 4000
        assert settings.api_key_env == "ANTHROPIC_API_KEY"
        assert settings.api_key is None
        assert settings.server_name == "tesser-fx-codegen"

    def test_reads_overrides(self):
        settings = Settings.from_env({
            "TESSER_MCP_MODEL": "gpt-4o",
            "TESSER_MCP_MAX_TOKENS": "2048",
            "ANTHROPIC_API_KEY": "sk-test",
            "TESSER_MCP_SERVER_NAME": "fx",
        })
        assert settings.model == "gpt-4o"
        assert settings.max_tokens == 2048
        assert settings.api_key == "sk-test"
        assert settings.server_name == "fx"

    def test_custom_key_variable(self):
        settings = Settings.from_env({
            "TESSER_MCP_API_KEY_ENV": "OPENAI_API_KEY",
            "OPENAI_API_KEY": "sk-openai",
            "ANTHROPIC_API_KEY": "sk-anthropic",
        })
        assert settings.api_key_env == "OPENAI_API_KEY"
        assert settings.api_key == "sk-openai"

    def test_empty_key_treated_as_missing(self):
        assert Settings.from_env({"ANTHROPIC_API_KEY": ""}).api_key is None
