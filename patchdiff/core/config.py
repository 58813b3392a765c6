"""
patchdiff Configuration
Centralized configuration read from the environment and an optional .env file
"""
import os
from dotenv import load_dotenv
from pathlib import Path

# Load from .env file with UTF-8 encoding (Windows compatibility)
env_path = Path(__file__).parent.parent.parent / '.env'
load_dotenv(dotenv_path=env_path, encoding='utf-8')

# =============================================================================
# Patch Notes Corpus Configuration
# =============================================================================
HTML_DIR = Path(os.getenv("PATCHDIFF_HTML_DIR", "html"))
OUTPUT_FILE = os.getenv("PATCHDIFF_OUTPUT_FILE", "patch_diff.html")
DEFAULT_FROM_VERSION = os.getenv("PATCHDIFF_FROM_VERSION", "")
DEFAULT_TO_VERSION = os.getenv("PATCHDIFF_TO_VERSION", "")

# =============================================================================
# Document Walker Configuration
# =============================================================================
# Top-level sections without per-property mechanics
IGNORED_SECTIONS = [
    section.strip()
    for section in os.getenv("PATCHDIFF_IGNORED_SECTIONS", "General,Additional Content").split(",")
    if section.strip()
]
CONTENT_SELECTOR = os.getenv("PATCHDIFF_CONTENT_SELECTOR", ".mw-parser-output > *")

# =============================================================================
# Logging Configuration
# =============================================================================
LOG_LEVEL = os.getenv("PATCHDIFF_LOG_LEVEL", "INFO")

# =============================================================================
# Progress Configuration
# =============================================================================
PROGRESS_ENABLED = os.getenv("PATCHDIFF_PROGRESS_ENABLED", "true").lower() == "true"


# Configuration class for type safety
class Config:
    """Configuration class for type-safe access to settings."""

    # Corpus
    html_dir: Path = HTML_DIR
    output_file: str = OUTPUT_FILE
    default_from_version: str = DEFAULT_FROM_VERSION
    default_to_version: str = DEFAULT_TO_VERSION

    # Walker
    ignored_sections: list = IGNORED_SECTIONS
    content_selector: str = CONTENT_SELECTOR

    # Logging
    log_level: str = LOG_LEVEL

    # Progress
    progress_enabled: bool = PROGRESS_ENABLED

# Export configuration instance
config = Config()
