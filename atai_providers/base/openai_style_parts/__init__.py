"""OpenAI-style adapter building blocks.

- ``BaseHttpProvider``: error boundary, logging and HTTP plumbing.
- ``ChatCompletionsAdapter``: the OpenAI-compatible chat-completions adapter.
- ``FixedCatalogProvider``: composition wrapper with a static model list.
"""

from .base import BaseHttpProvider
from .chat_completions import ChatCompletionsAdapter
from .fixed_catalog import FixedCatalogProvider

__all__ = [
    "BaseHttpProvider",
    "ChatCompletionsAdapter",
    "FixedCatalogProvider",
]
