"""CLI entry point for tesser-mcp."""

import asyncio
import logging

import click

from tesser_mcp.config import Settings
from tesser_mcp.generator.base import GenerationRequest
from tesser_mcp.generator.code import CodeGenerator
from tesser_mcp.generator.handlers import (
    PAYMENT_GUIDANCE,
    QUOTE_GUIDANCE,
    generate_payment_code,
    generate_quote_code,
)
from tesser_mcp.languages import Language
from tesser_mcp.parser.extractor import list_operations
from tesser_mcp.parser.loader import load_api_description
from tesser_mcp.server import create_server

LANGUAGES = [lang.value for lang in Language]

GUIDANCE_BY_ENDPOINT = {
    "/quotes": QUOTE_GUIDANCE,
    "/payments": PAYMENT_GUIDANCE,
}


def _settings(model: str | None, max_tokens: int | None) -> Settings:
    settings = Settings.from_env()
    overrides = {}
    if model:
        overrides["model"] = model
    if max_tokens:
        overrides["max_tokens"] = max_tokens
    return settings.model_copy(update=overrides)


@click.group()
@click.option("-v", "--verbose", count=True, help="Increase log verbosity (-v info, -vv debug).")
def main(verbose: int):
    """Tesser FX code generation tools over MCP."""
    level = {0: logging.WARNING, 1: logging.INFO}.get(verbose, logging.DEBUG)
    # stdout belongs to the stdio transport; logs go to stderr.
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


@main.command()
@click.option("--transport", default="stdio", type=click.Choice(["stdio", "sse", "http"]), help="MCP transport.")
@click.option("--host", default="127.0.0.1", help="Bind address for sse/http.")
@click.option("--port", default=8000, type=int, help="Port for sse/http.")
@click.option("--model", default=None, help="LLM model to use.")
@click.option("--max-tokens", default=None, type=int, help="Maximum output tokens per generation.")
def serve(transport: str, host: str, port: int, model: str | None, max_tokens: int | None):
    """Run the MCP tool server."""
    server = create_server(settings=_settings(model, max_tokens))
    if transport == "stdio":
        server.run(transport="stdio")
    else:
        click.echo(f"Serving {transport} on {host}:{port}", err=True)
        server.run(transport=transport, host=host, port=port)


@main.command()
def endpoints():
    """List operations in the bundled API description."""
    for op in list_operations(load_api_description()):
        click.echo(f"{op.method} {op.path}  {op.operation_id}  {op.summary}")


@main.command()
@click.argument("endpoint", type=click.Choice(sorted(GUIDANCE_BY_ENDPOINT)))
@click.option("--language", "-l", required=True, type=click.Choice(LANGUAGES), help="Target language.")
@click.option("--types/--no-types", "include_types", default=True, help="Ask for type definitions.")
def prompt(endpoint: str, language: str, include_types: bool):
    """Print the assembled prompt without calling the LLM."""
    generator = CodeGenerator(settings=Settings.from_env())
    request = GenerationRequest(endpoint_path=endpoint, language=language, include_types=include_types)
    click.echo(generator.build_prompt(request, GUIDANCE_BY_ENDPOINT[endpoint]))


@main.command()
@click.argument("kind", type=click.Choice(["quote", "payment"]))
@click.option("--language", "-l", required=True, type=click.Choice(LANGUAGES), help="Target language.")
@click.option("--types/--no-types", "include_types", default=True, help="Ask for type definitions.")
@click.option("--model", default=None, help="LLM model to use.")
@click.option("--max-tokens", default=None, type=int, help="Maximum output tokens per generation.")
def generate(kind: str, language: str, include_types: bool, model: str | None, max_tokens: int | None):
    """Run one code generation tool and print its result."""
    generator = CodeGenerator(settings=_settings(model, max_tokens))
    handler = generate_quote_code if kind == "quote" else generate_payment_code

    click.echo(f"Generating {kind} client code ({language})...", err=True)
    result = asyncio.run(handler(generator, language, include_types))
    click.echo(result.render())
    if not result.ok:
        raise SystemExit(1)
