"""MCP tool host exposing the code generation tools.

Tool and argument names (``getQuoteCode``, ``includeTypes``, ...) are part
of the wire contract with existing clients.
"""

import logging

from fastmcp import FastMCP

from tesser_mcp.config import Settings
from tesser_mcp.generator.code import CodeGenerator
from tesser_mcp.generator.handlers import generate_payment_code, generate_quote_code
from tesser_mcp.languages import Language

logger = logging.getLogger(__name__)


def create_server(settings: Settings | None = None, generator: CodeGenerator | None = None) -> FastMCP:
    """Build a FastMCP server with echo, getQuoteCode and sendPaymentCode registered."""
    settings = settings or Settings.from_env()
    generator = generator or CodeGenerator(settings=settings)

    mcp = FastMCP(settings.server_name)

    @mcp.tool(name="echo")
    def echo(message: str) -> str:
        """Echo a message back. Used for connectivity checks."""
        return f"Tool echo: {message}"

    @mcp.tool(name="getQuoteCode")
    async def get_quote_code(language: Language, includeTypes: bool = True) -> str:
        """Generate client code for creating a locked FX quote (POST /quotes)."""
        result = await generate_quote_code(generator, language, includeTypes)
        return result.render()

    @mcp.tool(name="sendPaymentCode")
    async def send_payment_code(language: Language, includeTypes: bool = True) -> str:
        """Generate client code for submitting a payment against a quote (POST /payments)."""
        result = await generate_payment_code(generator, language, includeTypes)
        return result.render()

    logger.info("Registered tools on %s", settings.server_name)
    return mcp
