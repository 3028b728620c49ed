"""LLM API client used by the enrichment engine."""

import os

from openai import OpenAI
from openai.types.chat import ChatCompletionSystemMessageParam, ChatCompletionUserMessageParam

from common.display import console

DEFAULT_MODEL = "gpt-4o-mini"


class LLMError(Exception):
    """Raised when the model cannot produce a response."""
    pass


def get_client() -> OpenAI:
    """Build an OpenAI client from environment.

    Raises:
        LLMError: If OPENAI_API_KEY is not set
    """
    api_key = os.environ.get("OPENAI_API_KEY")
    base_url = os.environ.get("OPENAI_BASE_URL")

    if not api_key:
        raise LLMError("OPENAI_API_KEY not set")

    client_kwargs = {"api_key": api_key}
    if base_url:
        client_kwargs["base_url"] = base_url
    return OpenAI(**client_kwargs)


def call_api(user_prompt: str, system_prompt: str | None = None, verbose: int = 0) -> str:
    """Send one prompt to the model and return its text response.

    Uses OpenAI-compatible API. Configure via environment variables:
    - OPENAI_API_KEY: API key (required)
    - OPENAI_BASE_URL: Base URL (optional, for Gemini/Groq/other providers)
    - OPENAI_MODEL: Model name (default: gpt-4o-mini)
    - OPENAI_MODEL_TIER: Service tier (optional)
    - OPENAI_USE_RESPONSE_API: Set to "1" to use Responses API

    Single request, no retries. SDK errors propagate to the caller.

    Raises:
        LLMError: If the client cannot be configured or the response is empty
    """
    model = os.environ.get("OPENAI_MODEL", DEFAULT_MODEL)
    service_tier = os.environ.get("OPENAI_MODEL_TIER")
    use_responses_api = os.environ.get("OPENAI_USE_RESPONSE_API", "").lower() in ("1", "true", "yes")

    client = get_client()

    if verbose >= 2:
        console.print(f"[dim]  LLM prompt ({model}):[/dim]")
        console.print(f"[dim]{user_prompt}[/dim]")

    if use_responses_api:
        response_text = call_responses_api(client, model, user_prompt, system_prompt, service_tier=service_tier)
    else:
        response_text = call_chat_completions_api(client, model, user_prompt, system_prompt, service_tier=service_tier)

    if not response_text:
        raise LLMError("Empty response from API")

    if verbose >= 2:
        console.print(f"[dim]  LLM response: {len(response_text):,} chars[/dim]")

    return response_text


def call_responses_api(client: OpenAI, model: str, user_prompt: str, system_prompt: str | None = None, service_tier: str | None = None) -> str | None:
    """Call OpenAI Responses API.

    Args:
        client: OpenAI client
        model: Model name
        user_prompt: User message content
        system_prompt: Optional system instructions

    Returns:
        Response text or None
    """
    if system_prompt:
        input_content = f"{system_prompt}\n\n---\n\n{user_prompt}"
    else:
        input_content = user_prompt

    kwargs = {"model": model, "input": input_content}
    if service_tier:
        kwargs["service_tier"] = service_tier
    response = client.responses.create(**kwargs)

    # Extract text from response output
    response_text = getattr(response, "output_text", None)
    if not response_text:
        for item in getattr(response, "output", []):
            if getattr(item, "type", "") == "message":
                for content in getattr(item, "content", []):
                    if getattr(content, "type", "") == "output_text":
                        response_text = getattr(content, "text", "")
                        break
            if response_text:
                break
    return response_text


def call_chat_completions_api(client: OpenAI, model: str, user_prompt: str, system_prompt: str | None = None, service_tier: str | None = None) -> str | None:
    """Call OpenAI Chat Completions API.

    Args:
        client: OpenAI client
        model: Model name
        user_prompt: User message content
        system_prompt: Optional system instructions

    Returns:
        Response text or None
    """
    messages = []

    if system_prompt:
        message_system_prompt: ChatCompletionSystemMessageParam = {"role": "system", "content": system_prompt}
        messages.append(message_system_prompt)

    message_user_prompt: ChatCompletionUserMessageParam = {"role": "user", "content": user_prompt}
    messages.append(message_user_prompt)

    kwargs = {"model": model, "messages": messages}
    if service_tier:
        kwargs["service_tier"] = service_tier
    response = client.chat.completions.create(**kwargs)
    return response.choices[0].message.content
