# Copyright AGNTCY Contributors (https://github.com/agntcy)
# SPDX-License-Identifier: Apache-2.0

"""
Application Configuration

Central configuration module that loads settings from environment variables.
All configuration values are loaded at module import time from .env files.

Key sections:
- LLM: Language model configuration and provider credentials
- SerpAPI: Web search API settings
- Workflow: Vacation team config, default brief and report location
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()  # Automatically loads from `.env` or `.env.local`

PROJECT_ROOT = Path(__file__).resolve().parents[1]

# =============================================================================
# LLM Configuration
# =============================================================================
# Language model settings - uses litellm for provider abstraction
LLM_MODEL = os.getenv("LLM_MODEL", "gemini/gemini-2.0-flash")
LLM_TEMPERATURE = float(os.getenv("LLM_TEMPERATURE", "0.2"))
LLM_TIMEOUT_SECONDS = float(os.getenv("LLM_TIMEOUT_SECONDS", "120"))

# Upper bound on agent <-> tool round trips for a single job
AGENT_MAX_TOOL_ROUNDS = int(os.getenv("AGENT_MAX_TOOL_ROUNDS", "6"))

# Provider credentials litellm understands. At least one must be set.
PROVIDER_API_KEY_VARS = (
    "GEMINI_API_KEY",
    "ANTHROPIC_API_KEY",
    "OPENAI_API_KEY",
    "GROQ_API_KEY",
    "OPENROUTER_API_KEY",
    "MISTRAL_API_KEY",
)

# =============================================================================
# SerpAPI Configuration (webSearch tool)
# =============================================================================
# Get your API key at: https://serpapi.com/
SERPAPI_API_KEY = os.getenv("SERPAPI_API_KEY", "")
SERPAPI_BASE_URL = os.getenv("SERPAPI_BASE_URL", "https://serpapi.com/search")
SERPAPI_MAX_RESULTS = int(os.getenv("SERPAPI_MAX_RESULTS", "5"))

# =============================================================================
# Workflow Configuration
# =============================================================================
VACATION_CONFIG_PATH = os.getenv(
    "VACATION_CONFIG_PATH",
    str(PROJECT_ROOT / "agents" / "supervisors" / "vacation" / "vacation_team.json"),
)
VACATION_REPORT_PATH = os.getenv(
    "VACATION_REPORT_PATH",
    str(PROJECT_ROOT / "vacation-results.html"),
)
DEFAULT_BRIEF_ID = os.getenv("DEFAULT_BRIEF_ID", "st-pete-clearwater-trip-001")
DEFAULT_TEAM_ID = os.getenv("DEFAULT_TEAM_ID", "vacationTeam")

# =============================================================================
# Logging Configuration
# =============================================================================
LOGGING_LEVEL = os.getenv("LOGGING_LEVEL", "INFO").upper()


def configured_provider_keys() -> list[str]:
    """Return the names of provider API key variables that are set."""
    return [name for name in PROVIDER_API_KEY_VARS if os.getenv(name)]
