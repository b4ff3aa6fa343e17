"""LLM client wrapper around litellm.

The rest of the package treats the model as an opaque text-completion
function: one prompt in, one block of text out, or a GenerationError.
"""

import logging

from litellm import acompletion

from tesser_mcp.config import Settings
from tesser_mcp.exceptions import GenerationError, MissingCredentialsError

logger = logging.getLogger(__name__)


class LlmClient:
    """Wrapper for LLM API calls via litellm."""

    def __init__(self, settings: Settings | None = None, model: str | None = None):
        self.settings = settings or Settings.from_env()
        self.model = model or self.settings.model

    async def complete(self, prompt: str, max_tokens: int | None = None) -> str:
        """Send a single user prompt and return the response text."""
        if not self.settings.api_key:
            raise MissingCredentialsError(
                f"{self.settings.api_key_env} is not set; cannot reach model {self.model}"
            )

        try:
            response = await acompletion(
                model=self.model,
                api_key=self.settings.api_key,
                max_tokens=max_tokens or self.settings.max_tokens,
                messages=[{"role": "user", "content": prompt}],
            )
        except Exception as exc:
            logger.exception("LLM call to %s failed", self.model)
            raise GenerationError(str(exc) or exc.__class__.__name__) from exc

        return _extract_text(response)


def _extract_text(response) -> str:
    choices = getattr(response, "choices", None)
    if not choices:
        raise GenerationError("No content in response from model")

    message = getattr(choices[0], "message", None)
    content = getattr(message, "content", None)
    if content is None or content == "":
        raise GenerationError("Empty content block in response")
    if not isinstance(content, str):
        raise GenerationError("Unexpected response format from model")
    return content
