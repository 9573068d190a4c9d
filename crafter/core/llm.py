"""LLM generation client: structured-output completion with one fix-up retry.

Backends are small capability objects (``complete(...) -> str``) so stages can
be exercised against a fake in tests. The client owns JSON parsing, schema
validation and the single retry; it never persists anything.
"""

import json
import re
from dataclasses import dataclass
from typing import Protocol, TypeVar

import anthropic
import openai
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from crafter.core.config import Settings, get_settings
from crafter.core.errors import FormatError, ServiceError
from crafter.core.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T", bound=BaseModel)


FIX_SCHEMA_PROMPT = """The previous output was invalid. Here is the error:

{error}

The output must be a single JSON object matching this schema:

{schema}

Please fix the output to match the required JSON schema exactly. Output ONLY valid JSON, no explanation."""

FORMAT_ERROR_MESSAGE = "The AI returned an incomplete response. Please try again."


@dataclass(frozen=True)
class PromptSpec:
    """A fully built prompt for one stage. Pure data, no sampling settings."""

    stage: str
    system_prompt: str
    user_prompt: str
    output_schema: str


class CompletionBackend(Protocol):
    """Anything that can turn a system prompt plus chat turns into text."""

    def complete(
        self,
        system_prompt: str,
        messages: list[dict[str, str]],
        *,
        temperature: float,
        json_mode: bool,
    ) -> str: ...


class OpenAIBackend:
    """Chat completions with forced JSON object output."""

    def __init__(self, api_key: str, model: str, max_tokens: int):
        self.client = openai.OpenAI(api_key=api_key)
        self.model = model
        self.max_tokens = max_tokens

    def complete(
        self,
        system_prompt: str,
        messages: list[dict[str, str]],
        *,
        temperature: float,
        json_mode: bool,
    ) -> str:
        kwargs = {}
        if json_mode:
            kwargs["response_format"] = {"type": "json_object"}
        try:
            response = self.client.chat.completions.create(
                model=self.model,
                temperature=temperature,
                max_tokens=self.max_tokens,
                messages=[{"role": "system", "content": system_prompt}, *messages],
                **kwargs,
            )
        except openai.AuthenticationError as e:
            raise ServiceError(
                f"OpenAI authentication failed: {e}",
                user_message="The AI service rejected our credentials. Please contact support.",
                service="openai",
            ) from e
        except openai.RateLimitError as e:
            raise ServiceError(
                f"OpenAI rate limit: {e}",
                user_message="The AI service is busy right now. Please try again in a minute.",
                service="openai",
            ) from e
        except openai.APIError as e:
            raise ServiceError(
                f"OpenAI request failed: {e}",
                user_message="The AI service is unavailable. Please try again.",
                service="openai",
            ) from e

        if not response.choices:
            return ""
        return response.choices[0].message.content or ""


class AnthropicBackend:
    """Messages API. JSON output is enforced by instruction only."""

    def __init__(self, api_key: str, model: str, max_tokens: int):
        self.client = anthropic.Anthropic(api_key=api_key)
        self.model = model
        self.max_tokens = max_tokens

    def complete(
        self,
        system_prompt: str,
        messages: list[dict[str, str]],
        *,
        temperature: float,
        json_mode: bool,
    ) -> str:
        system = system_prompt
        if json_mode:
            system += "\n\nReturn ONLY valid JSON, no additional text."
        try:
            response = self.client.messages.create(
                model=self.model,
                max_tokens=self.max_tokens,
                temperature=temperature,
                system=system,
                messages=messages,
            )
        except anthropic.AuthenticationError as e:
            raise ServiceError(
                f"Anthropic authentication failed: {e}",
                user_message="The AI service rejected our credentials. Please contact support.",
                service="anthropic",
            ) from e
        except anthropic.RateLimitError as e:
            raise ServiceError(
                f"Anthropic rate limit: {e}",
                user_message="The AI service is busy right now. Please try again in a minute.",
                service="anthropic",
            ) from e
        except anthropic.APIError as e:
            raise ServiceError(
                f"Anthropic request failed: {e}",
                user_message="The AI service is unavailable. Please try again.",
                service="anthropic",
            ) from e

        return "".join(block.text for block in response.content if block.type == "text")


def _strip_llm_fences(raw_output: str) -> str:
    """Strip markdown code fences from LLM output.

    Handles: ```json ... ```, ``` ... ```, leading/trailing whitespace.
    """
    cleaned = raw_output.strip()

    fence_match = re.search(r"```(?:json)?\s*\n?(.*?)```", cleaned, re.DOTALL)
    if fence_match:
        return fence_match.group(1).strip()

    if cleaned.startswith("```json"):
        cleaned = cleaned[7:]
    elif cleaned.startswith("```"):
        cleaned = cleaned[3:]
    if cleaned.endswith("```"):
        cleaned = cleaned[:-3]
    return cleaned.strip()


def parse_llm_json(raw_output: str, model: type[T]) -> T:
    """
    Parse LLM output as a JSON object and validate against a Pydantic model.

    Handles code fences and prose around a single JSON object.

    Args:
        raw_output: Raw string from LLM response
        model: Pydantic model class to validate against

    Returns:
        Validated Pydantic model instance

    Raises:
        FormatError: If the content is empty, not a JSON object, or fails validation
    """
    if not raw_output or not raw_output.strip():
        raise FormatError("Empty response content", user_message=FORMAT_ERROR_MESSAGE)

    cleaned = _strip_llm_fences(raw_output)
    try:
        parsed = json.loads(cleaned)
    except json.JSONDecodeError as e:
        # Fall back to the outermost {...} span when the model wrapped it in prose
        start, end = cleaned.find("{"), cleaned.rfind("}")
        if start == -1 or end <= start:
            raise FormatError(f"Invalid JSON: {e}", user_message=FORMAT_ERROR_MESSAGE) from e
        try:
            parsed = json.loads(cleaned[start : end + 1])
        except json.JSONDecodeError as inner:
            raise FormatError(
                f"Invalid JSON: {inner}", user_message=FORMAT_ERROR_MESSAGE
            ) from inner

    if not isinstance(parsed, dict):
        raise FormatError(
            f"Expected a JSON object, got {type(parsed).__name__}",
            user_message=FORMAT_ERROR_MESSAGE,
        )

    try:
        return model.model_validate(parsed)
    except PydanticValidationError as e:
        raise FormatError(
            f"Schema validation failed: {e}", user_message=FORMAT_ERROR_MESSAGE
        ) from e


class GenerationClient:
    """Sends a PromptSpec to a backend and returns a validated model."""

    def __init__(self, backend: CompletionBackend):
        self.backend = backend

    def generate(self, spec: PromptSpec, model: type[T], *, temperature: float) -> T:
        """
        Generate a structured artifact for one stage.

        A FormatError on the first attempt triggers exactly one retry that
        feeds the error back to the model. ServiceError is never retried.

        Raises:
            ServiceError: Transport, auth or rate-limit failure
            FormatError: Output still invalid after the retry
        """
        messages = [{"role": "user", "content": spec.user_prompt}]

        logger.info(
            f"Generating {model.__name__}",
            extra={"stage": spec.stage, "prompt_chars": len(spec.user_prompt)},
        )

        raw_output = self.backend.complete(
            spec.system_prompt, messages, temperature=temperature, json_mode=True
        )
        logger.debug(
            f"Raw output (length: {len(raw_output)})",
            extra={"stage": spec.stage, "output_preview": raw_output[:500]},
        )

        try:
            return parse_llm_json(raw_output, model)
        except FormatError as e:
            error_msg = str(e)
            logger.warning(
                f"First generation attempt failed validation: {error_msg}",
                extra={"stage": spec.stage},
            )

        fix_prompt = FIX_SCHEMA_PROMPT.format(error=error_msg, schema=spec.output_schema)
        retry_messages = [
            *messages,
            {"role": "assistant", "content": raw_output or "(empty response)"},
            {"role": "user", "content": fix_prompt},
        ]
        retry_output = self.backend.complete(
            spec.system_prompt, retry_messages, temperature=temperature, json_mode=True
        )

        try:
            result = parse_llm_json(retry_output, model)
        except FormatError as e:
            logger.error(
                f"Retry also failed validation: {e}",
                extra={"stage": spec.stage},
            )
            # Do NOT leak raw model output in exception
            raise FormatError(
                "Model output could not be validated to schema",
                user_message=FORMAT_ERROR_MESSAGE,
            ) from e

        logger.info("Retry succeeded", extra={"stage": spec.stage})
        return result


def get_completion_backend(settings: Settings | None = None) -> CompletionBackend:
    """
    Build the configured completion backend.

    Raises:
        ServiceError: If the provider is unknown or its API key is missing
    """
    settings = settings or get_settings()
    provider = settings.LLM_PROVIDER.strip().lower()

    if provider == "openai":
        if not settings.OPENAI_API_KEY:
            raise ServiceError(
                "OPENAI_API_KEY is not configured",
                user_message="The AI service is not configured.",
                service="openai",
            )
        return OpenAIBackend(
            settings.OPENAI_API_KEY, settings.OPENAI_MODEL, settings.GENERATION_MAX_TOKENS
        )

    if provider == "anthropic":
        if not settings.ANTHROPIC_API_KEY:
            raise ServiceError(
                "ANTHROPIC_API_KEY is not configured",
                user_message="The AI service is not configured.",
                service="anthropic",
            )
        return AnthropicBackend(
            settings.ANTHROPIC_API_KEY, settings.ANTHROPIC_MODEL, settings.GENERATION_MAX_TOKENS
        )

    raise ServiceError(
        f"Unknown LLM_PROVIDER: {settings.LLM_PROVIDER}",
        user_message="The AI service is not configured.",
    )


def get_generation_client() -> GenerationClient:
    """Generation client over the configured backend."""
    return GenerationClient(get_completion_backend())


def get_route_generation_client() -> GenerationClient | None:
    """
    Route dependency for stage endpoints.

    None means the stage pipeline builds the configured client itself, and
    only once it has to call the LLM.
    """
    return None
