"""
ILearnCom AI - Integrations with the hosted Gemini service.

This module provides:
- GeminiClient: text and image requests
- TutorChat: peer-tutor Q&A session
- IllustrationCache: per-step generated images
"""

from .client import (
    GeminiClient,
    InlineImage,
    ServiceError,
    extract_inline_image,
)

from .tutor import (
    TutorChat,
    ChatRequest,
)

from .illustrations import (
    IllustrationCache,
    ImageRequest,
    to_data_uri,
)

__all__ = [
    # Client
    "GeminiClient",
    "InlineImage",
    "ServiceError",
    "extract_inline_image",
    # Tutor
    "TutorChat",
    "ChatRequest",
    # Illustrations
    "IllustrationCache",
    "ImageRequest",
    "to_data_uri",
]
