"""
OpenAI provider package.

Exports:
- OpenAIProvider: chat-completions adapter for OpenAI
- ResponsesAdapter: responses API adapter (event stream or JSON body)
- create_openai_provider: picks one of the two from ``AdapterParams.api_type``
"""

from .client import OpenAIProvider, create_openai_provider
from .responses import ResponsesAdapter

__all__ = ["OpenAIProvider", "ResponsesAdapter", "create_openai_provider"]
