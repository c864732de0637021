"""LLM client utilities."""

from vivaagent.shared.llm.client import get_cached_client, call_llm, ChatModel

__all__ = ["get_cached_client", "call_llm", "ChatModel"]
