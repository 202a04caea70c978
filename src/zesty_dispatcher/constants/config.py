"""Configuration defaults, keys, and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "zesty-dispatcher.yaml"

DEFAULT_EXEMPTIONS: tuple[str, ...] = ("zesty-*", "qmd")
DEFAULT_ROUTER_MODEL: str = "github-copilot/gpt-5-mini"
DEFAULT_ENABLE_TOOL: bool = False
DEFAULT_SKILLS_DIR: str = "~/.openclaw/skills"
DEFAULT_SEMANTIC_TIMEOUT_SECONDS: float = 30.0

ROUTER_API_KEY_ENV: str = "ZESTY_ROUTER_API_KEY"

KEY_EXEMPTIONS: str = "exemptions"
KEY_ROUTER_MODEL: str = "routerModel"
KEY_ENABLE_TOOL: str = "enableTool"
KEY_SKILLS_DIR: str = "skillsDir"
KEY_SEMANTIC_TIMEOUT: str = "semanticTimeoutSeconds"
KEY_ROUTER_ENDPOINT: str = "routerEndpoint"

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset(
    {
        KEY_EXEMPTIONS,
        KEY_ROUTER_MODEL,
        KEY_ENABLE_TOOL,
        KEY_SKILLS_DIR,
        KEY_SEMANTIC_TIMEOUT,
        KEY_ROUTER_ENDPOINT,
    }
)
