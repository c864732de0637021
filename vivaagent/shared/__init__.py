"""
Shared infrastructure for the planner.

Modules:
- config: Settings loaded once at startup
- llm: OpenAI chat client with retry logic
- logging: Structured JSON logging for tool calls
- contracts: Conference data contracts
- errors: Error taxonomy
"""

from vivaagent.shared.config.settings import AppSettings, load_settings
from vivaagent.shared.llm.client import get_cached_client, ChatModel
from vivaagent.shared.logging.config import setup_logging, log_tool_call

__all__ = [
    "AppSettings",
    "load_settings",
    "get_cached_client",
    "ChatModel",
    "setup_logging",
    "log_tool_call",
]
