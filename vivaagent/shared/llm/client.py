"""
OpenAI client with retry logic.

Provides a cached async client instance and a wrapper for chat completion
calls (with optional tool schemas) with automatic retries using tenacity.
"""

import os
from typing import Any, Dict, List, Optional

from openai import AsyncOpenAI
from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
)


# Module-level cache for OpenAI client
_client: Optional[AsyncOpenAI] = None


def get_cached_client(api_key: Optional[str] = None) -> AsyncOpenAI:
    """
    Returns a cached instance of the async OpenAI client.

    Uses the given key, or the OPENAI_API_KEY environment variable.
    The client is created once and reused for all subsequent calls.
    """
    global _client
    if _client is None:
        api_key = api_key or os.environ.get("OPENAI_API_KEY")
        if not api_key:
            raise ValueError(
                "OPENAI_API_KEY not found in environment. "
                "Please set it to your OpenAI API key."
            )
        _client = AsyncOpenAI(api_key=api_key)
    return _client


def _message_to_dict(message: Any) -> Dict[str, Any]:
    """Convert an assistant message to a chat-format dict that can be replayed."""
    result: Dict[str, Any] = {"role": "assistant", "content": message.content}
    if message.tool_calls:
        result["tool_calls"] = [
            {
                "id": call.id,
                "type": "function",
                "function": {
                    "name": call.function.name,
                    "arguments": call.function.arguments,
                },
            }
            for call in message.tool_calls
        ]
    return result


@retry(
    stop=stop_after_attempt(3),
    wait=wait_exponential(multiplier=1, min=2, max=10),
    retry=retry_if_exception_type((Exception,)),
    reraise=True,
)
async def call_llm(
    messages: List[Dict[str, Any]],
    model: str = "gpt-4o",
    tools: Optional[List[Dict[str, Any]]] = None,
    temperature: Optional[float] = None,
    max_tokens: Optional[int] = None,
    client: Optional[AsyncOpenAI] = None,
) -> Dict[str, Any]:
    """
    Call the OpenAI Chat Completion API with automatic retries.

    Args:
        messages: Chat messages (system/user/assistant/tool dicts)
        model: Model identifier to use (default: gpt-4o)
        tools: Optional OpenAI tool schemas the model may call
        temperature: Optional sampling temperature
        max_tokens: Optional completion token limit
        client: Optional client instance. If not provided, uses cached client.

    Returns:
        The assistant message as a dict with 'role', 'content' and,
        when the model requested tools, 'tool_calls'.

    Raises:
        Exception: If all retry attempts fail.
    """
    if client is None:
        client = get_cached_client()

    kwargs: Dict[str, Any] = {"model": model, "messages": messages}
    if tools:
        kwargs["tools"] = tools
    if temperature is not None:
        kwargs["temperature"] = temperature
    if max_tokens is not None:
        kwargs["max_tokens"] = max_tokens

    response = await client.chat.completions.create(**kwargs)

    return _message_to_dict(response.choices[0].message)


class ChatModel:
    """
    Chat model bound to a client and sampling parameters.

    The planning graph only depends on `complete`, so tests can pass any
    object with the same coroutine.
    """

    def __init__(
        self,
        client: Optional[AsyncOpenAI] = None,
        model: str = "gpt-4o",
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
    ):
        self.client = client
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens

    async def complete(
        self,
        messages: List[Dict[str, Any]],
        tools: Optional[List[Dict[str, Any]]] = None,
    ) -> Dict[str, Any]:
        """Run one completion and return the assistant message dict."""
        return await call_llm(
            messages,
            model=self.model,
            tools=tools,
            temperature=self.temperature,
            max_tokens=self.max_tokens,
            client=self.client,
        )
