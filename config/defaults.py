"""Trade Scout: All default values and configuration constants.

All tuneable values live here. Never hard-code magic numbers in source files.
Import constants from this module; override via ScoutConfig at runtime.
"""

# ── Model response protocol ────────────────────────────────────────────────────
# Literal token separating the narrative part from the JSON payload in search replies
JSON_DELIMITER: str = "___JSON_START___"

# Fallback texts substituted when the model returns an empty reply
EMPTY_SEARCH_TEXT: str = "No results found."
EMPTY_ANALYSIS_TEXT: str = "Could not generate analysis."
EMPTY_VENUE_TEXT: str = "Location not found."

# ── LLM backends ──────────────────────────────────────────────────────────────
# Default active LLM backend: "gemini", "anthropic" or "ollama"
LLM_BACKEND: str = "gemini"

# Gemini model identifiers per request type
SEARCH_MODEL: str = "gemini-3-flash-preview"
ANALYSIS_MODEL: str = "gemini-3-pro-preview"
VENUE_MODEL: str = "gemini-2.5-flash"

# Thinking budget (tokens) granted to the strategic analysis request
ANALYSIS_THINKING_BUDGET: int = 32768

# Anthropic model identifier (text-only backend, no grounding)
ANTHROPIC_MODEL: str = "claude-sonnet-4-6"

# Ollama model identifier and server URL (text-only backend, no grounding)
OLLAMA_MODEL: str = "gemma3:27b"
OLLAMA_HOST: str = "http://localhost:11434"

# Maximum tokens for the text-only backends
LLM_DEFAULT_MAX_TOKENS: int = 4096

# ── Geolocation ────────────────────────────────────────────────────────────────
# IP geolocation endpoint returning JSON with latitude/longitude fields
GEOLOCATION_URL: str = "https://ipapi.co/json/"

# Geolocation lookup timeout (seconds); the lookup is optional and non-fatal
GEOLOCATION_TIMEOUT: float = 5.0

# ── Session views ──────────────────────────────────────────────────────────────
# Type filter value meaning "no filter"
ALL_TYPES: str = "All"

# ── Report export ──────────────────────────────────────────────────────────────
BRAND_NAME: str = "Kinetick"
COMPANY_NAME: str = "Kinetick International"
COMPANY_LINKEDIN: str = "www.linkedin.com/in/kalpeshkadav"
COMPANY_WEBSITE: str = "www.kinetickint.com"
COMPANY_PHONE: str = "+91 9322847479"
REPORT_TITLE: str = "Kinetick Trade Scout Report"

# Maximum length of the sanitized product segment in export file names
FILENAME_PRODUCT_MAX_CHARS: int = 20

# Substituted for the analysis section when no analysis was generated
ANALYSIS_PLACEHOLDER: str = "Strategy Analysis not generated."

# Substituted for the EPC line when the narrative does not name one
EPC_PLACEHOLDER: str = "See Analysis"

# Brand colour (hex RGB) used for the company name and PDF table header
BRAND_COLOR_HEX: str = "990000"

# Supported export formats
EXPORT_FORMATS: tuple = ("docx", "pdf")

# ── Output paths ──────────────────────────────────────────────────────────────
# Directory receiving exported reports
EXPORT_DIR: str = "outputs/reports"

# ── Logging ────────────────────────────────────────────────────────────────────
DEFAULT_LOG_LEVEL: str = "INFO"
