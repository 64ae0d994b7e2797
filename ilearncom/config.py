"""
Runtime configuration for ILearnCom.

Values come from the environment (optionally a .env file in the working
directory). A missing API key is not an error here: AI calls fail at call
time instead.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


PACKAGE_DIR = Path(__file__).parent
DEFAULT_CURRICULUM_PATH = PACKAGE_DIR / "data" / "curriculum.json"

DEFAULT_TEXT_MODEL = "gemini-3-flash-preview"
DEFAULT_IMAGE_MODEL = "gemini-2.5-flash-image"
IMAGE_ASPECT_RATIO = "16:9"

API_KEY_VARS = ("GEMINI_API_KEY", "API_KEY")
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


@dataclass
class Settings:
    api_key: Optional[str]
    text_model: str = DEFAULT_TEXT_MODEL
    image_model: str = DEFAULT_IMAGE_MODEL
    image_aspect_ratio: str = IMAGE_ASPECT_RATIO
    curriculum_path: Path = DEFAULT_CURRICULUM_PATH
    log_level: str = "INFO"


def get_api_key() -> Optional[str]:
    """Return the first configured API key, or None."""
    for var in API_KEY_VARS:
        value = os.environ.get(var)
        if value:
            return value
    return None


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """
    Build settings from the environment.

    Args:
        env_file: Optional .env file; defaults to python-dotenv's lookup

    Returns:
        Settings instance
    """
    load_dotenv(env_file)

    curriculum = os.environ.get("ILEARNCOM_CURRICULUM")
    return Settings(
        api_key=get_api_key(),
        text_model=os.environ.get("ILEARNCOM_TEXT_MODEL", DEFAULT_TEXT_MODEL),
        image_model=os.environ.get("ILEARNCOM_IMAGE_MODEL", DEFAULT_IMAGE_MODEL),
        curriculum_path=Path(curriculum) if curriculum else DEFAULT_CURRICULUM_PATH,
        log_level=os.environ.get("ILEARNCOM_LOG_LEVEL", "INFO").upper(),
    )


def configure_logging(level: str = "INFO"):
    """Configure root logging for the app process."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
