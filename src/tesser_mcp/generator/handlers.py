"""Tool handlers for the quote and payment endpoints.

Both handlers share one flow: validate, build guidance, generate, wrap.
Failures after validation come back as a failed GenerationResult, never
as an exception.
"""

import logging

from tesser_mcp.exceptions import CodegenError, GenerationError
from tesser_mcp.generator.base import (
    PAYMENT_ENDPOINT,
    QUOTE_ENDPOINT,
    GenerationRequest,
    GenerationResult,
)
from tesser_mcp.generator.code import CodeGenerator
from tesser_mcp.languages import Language, language_config

logger = logging.getLogger(__name__)

QUOTE_GUIDANCE = r"""
TESSER FX /quotes ENDPOINT:
This endpoint creates a locked FX quote that can be used for currency exchange.

KEY REQUIREMENTS FROM OPENAPI SPEC:
- POST to /quotes
- Required: to_currency field
- Either from_amount OR to_amount is required (mutually exclusive)
- Optional fields: client_quote_id, from_currency, quote_time, rules, compliance
- Returns EventEnvelope with type "quote.created" and QuoteData in data field
- Quote includes: id, valid_until (unix timestamp), quotes array with rates
- Amount format must match: ^[0-9]+(\.[0-9]{1,18})?$

AUTHENTICATION & HEADERS:
- Bearer token authentication required
- Optional Idempotency-Key header (max 255 bytes)
- Content-Type: application/json

ERROR RESPONSES:
- 400: Validation errors (bad request format)
- 401: Authentication failed
- 409: Conflict (idempotency key reused)
- 429: Rate limit exceeded (with Retry-After header)

INTEGRATION NOTES:
- Store the quote.id for subsequent payment submission
- Monitor valid_until timestamp for quote expiration
- Handle rate limiting with exponential backoff
"""

PAYMENT_GUIDANCE = """
TESSER FX /payments ENDPOINT:
This endpoint submits a payment using a previously obtained quote.

KEY REQUIREMENTS FROM OPENAPI SPEC:
- POST to /payments
- Required: quote_id (from previous /quotes response)
- Optional: client_payment_id for tracking
- Returns EventEnvelope with payment event type and PaymentData
- Event types: payment.created, payment.settled, payment.rejected

AUTHENTICATION & HEADERS:
- Bearer token authentication required
- Optional Idempotency-Key header (max 255 bytes)
- Content-Type: application/json

ERROR RESPONSES:
- 400: Validation errors (malformed request)
- 401: Authentication failed
- 409: Conflict (quote already used, idempotency key reused)
- 422: Business logic errors (insufficient balance, expired quote)
- 429: Rate limit exceeded (with Retry-After header)

PAYMENT LIFECYCLE:
1. payment.created - Payment initiated successfully
2. payment.settled - Payment completed successfully
3. payment.rejected - Payment failed (check reason field)

INTEGRATION NOTES:
- Must use valid, unexpired quote_id from /quotes endpoint
- Payment processing is asynchronous
- Monitor change field for payment state transitions
- Handle rejection reasons appropriately
"""

QUOTE_NOTES = """## Integration Notes:
- This code follows the official Tesser FX OpenAPI specification
- Replace 'your-api-key-here' with your actual Tesser API key
- The quote_id from the response must be used for payment submission
- Quotes have limited validity - check valid_until timestamp
- Implement proper retry logic for 429 (rate limit) responses"""

PAYMENT_NOTES = """## Integration Notes:
- This code follows the official Tesser FX OpenAPI specification
- Replace 'your-api-key-here' with your actual Tesser API key
- The quote_id must be from a recent, valid /quotes response
- Payment processing is asynchronous - monitor status changes
- Implement proper error handling for all payment states
- Handle 422 errors (business logic failures) gracefully"""


def wrap_generated(title: str, endpoint: str, language: Language, body: str, notes: str) -> str:
    name = language_config(language).name
    return f"# Tesser FX {title} Integration ({name}): POST {endpoint}\n\n{body}\n\n{notes}"


async def _run(
    generator: CodeGenerator,
    request: GenerationRequest,
    guidance: str,
    title: str,
    notes: str,
) -> GenerationResult:
    try:
        body = await generator.generate(request, guidance)
    except CodegenError as exc:
        logger.error("Code generation for %s failed (%s): %s", request.endpoint_path, exc.kind, exc)
        return GenerationResult.failure(exc.kind, f"Failed to generate code: {exc}")
    except Exception as exc:
        logger.exception("Unexpected failure generating code for %s", request.endpoint_path)
        return GenerationResult.failure(
            GenerationError.kind, f"Failed to generate code: {str(exc) or exc.__class__.__name__}"
        )
    return GenerationResult.success(
        wrap_generated(title, request.endpoint_path, request.language, body, notes)
    )


async def generate_quote_code(
    generator: CodeGenerator,
    language: Language | str,
    include_types: bool = True,
) -> GenerationResult:
    """Generate client code for POST /quotes.

    Raises pydantic.ValidationError for an unknown language before any
    other work is done.
    """
    request = GenerationRequest(
        endpoint_path=QUOTE_ENDPOINT, language=language, include_types=include_types
    )
    return await _run(generator, request, QUOTE_GUIDANCE, "Quote", QUOTE_NOTES)


async def generate_payment_code(
    generator: CodeGenerator,
    language: Language | str,
    include_types: bool = True,
) -> GenerationResult:
    """Generate client code for POST /payments. Same contract as generate_quote_code."""
    request = GenerationRequest(
        endpoint_path=PAYMENT_ENDPOINT, language=language, include_types=include_types
    )
    return await _run(generator, request, PAYMENT_GUIDANCE, "Payment", PAYMENT_NOTES)
