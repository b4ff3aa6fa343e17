"""Runtime settings, read from the environment.

CLI options override these values.
"""

import os

from pydantic import BaseModel

DEFAULT_MODEL = "claude-sonnet-4-20250514"
DEFAULT_MAX_TOKENS = 4000
DEFAULT_API_KEY_ENV = "ANTHROPIC_API_KEY"
DEFAULT_SERVER_NAME = "tesser-fx-codegen"


class Settings(BaseModel):
    """Settings for the LLM collaborator and the tool host."""

    model: str = DEFAULT_MODEL
    max_tokens: int = DEFAULT_MAX_TOKENS
    api_key_env: str = DEFAULT_API_KEY_ENV
    api_key: str | None = None
    server_name: str = DEFAULT_SERVER_NAME

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "Settings":
        env = os.environ if environ is None else environ
        api_key_env = env.get("TESSER_MCP_API_KEY_ENV", DEFAULT_API_KEY_ENV)
        return cls(
            model=env.get("TESSER_MCP_MODEL", DEFAULT_MODEL),
            max_tokens=env.get("TESSER_MCP_MAX_TOKENS", DEFAULT_MAX_TOKENS),
            api_key_env=api_key_env,
            api_key=env.get(api_key_env) or None,
            server_name=env.get("TESSER_MCP_SERVER_NAME", DEFAULT_SERVER_NAME),
        )
