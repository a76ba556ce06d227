"""Configuration constants for the documentation generator."""

# Default locations, overridable through RunSettings
DEFAULT_CONFIG_PATH = "doc_support/_ai_doc_set.yaml"
DEFAULT_OUTPUT_DIR = "docs"

# Topic identities generated when running in test mode
DEFAULT_TOPICS_TO_TEST = (
    "index.md",
    "getting-started.md",
    "api-reference/get-all-tasks.md",
)

# Front-matter placeholders
POSITION_PLACEHOLDER = "$pos"
DATE_PLACEHOLDER = "$today"

# Front-matter keys with special meaning
AI_GENERATED_KEY = "ai-generated"
API_ENDPOINTS_KEY = "api_endpoints"

# Generation defaults
DEFAULT_PROVIDER = "anthropic"
DEFAULT_MODEL = "claude-3-7-sonnet-20250219"
DEFAULT_MAX_TOKENS = 4000
DEFAULT_TIMEOUT = 600
