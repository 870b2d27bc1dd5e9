"""atai_providers.config.defaults
==============================

Central place for small, stable default values used across the
atai_providers package: vendor base URLs, default models, fixed model
catalogs and vendor header values.

This module intentionally avoids importing from other provider packages to
prevent circular dependencies. Only plain constants live here.
"""

from __future__ import annotations

# ---- Generation defaults ----
DEFAULT_TEMPERATURE = 0.7
DEFAULT_MAX_TOKENS = 2000
# Model used when neither the request nor the provider config names one.
FALLBACK_MODEL = "gpt-3.5-turbo"

# ---- Validation bounds ----
TEMPERATURE_MIN = 0.0
TEMPERATURE_MAX = 2.0
MAX_TOKENS_MIN = 1
MAX_TOKENS_MAX = 100000

# ---- Registry ----
# Order in which the registry picks a provider automatically.
AUTO_PICK_PRIORITY = ("openai", "anthropic", "openrouter", "deepseek", "kimi", "glm")

# ---- Provider-specific defaults ----
# OpenAI
OPENAI_DEFAULT_BASE_URL = "https://api.openai.com/v1"
OPENAI_DEFAULT_MODEL = "gpt-4o-mini"
# Substring kept by the openai kind when listing models.
OPENAI_MODEL_FILTER = "gpt"

# Anthropic
ANTHROPIC_DEFAULT_BASE_URL = "https://api.anthropic.com"
ANTHROPIC_DEFAULT_MODEL = "claude-3-5-sonnet-20241022"
ANTHROPIC_VERSION = "2023-06-01"
ANTHROPIC_PROBE_MODEL = "claude-3-haiku-20240307"
ANTHROPIC_MODELS = (
    "claude-3-5-sonnet-20241022",
    "claude-3-opus-20240229",
    "claude-3-sonnet-20240229",
    "claude-3-haiku-20240307",
)

# OpenRouter
OPENROUTER_DEFAULT_BASE_URL = "https://openrouter.ai/api/v1"
OPENROUTER_DEFAULT_MODEL = "anthropic/claude-3.5-sonnet"
OPENROUTER_REFERER = "https://github.com/yourusername/obsidian-at-ai"
OPENROUTER_TITLE = "@AI Obsidian Plugin"

# DeepSeek
DEEPSEEK_DEFAULT_BASE_URL = "https://api.deepseek.com/v1"
DEEPSEEK_DEFAULT_MODEL = "deepseek-chat"
DEEPSEEK_MODELS = ("deepseek-chat", "deepseek-coder")

# Kimi (Moonshot)
KIMI_DEFAULT_BASE_URL = "https://api.moonshot.cn/v1"
KIMI_DEFAULT_MODEL = "moonshot-v1-8k"
KIMI_MODELS = ("moonshot-v1-8k", "moonshot-v1-32k", "moonshot-v1-128k")

# GLM (Zhipu)
GLM_DEFAULT_BASE_URL = "https://open.bigmodel.cn/api/paas/v4"
GLM_DEFAULT_MODEL = "glm-4"
GLM_PROBE_MODEL = "glm-3-turbo"
GLM_MODELS = ("glm-4", "glm-4-plus", "glm-3-turbo")
