"""
Gemini API client for the tutor chat and step illustrations.

The SDK client is created on first use, so a missing API key surfaces as a
ServiceError from the call rather than at startup.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from google import genai
from google.genai import types as genai_types

from ilearncom.config import DEFAULT_IMAGE_MODEL, DEFAULT_TEXT_MODEL, IMAGE_ASPECT_RATIO, get_api_key

logger = logging.getLogger(__name__)


class ServiceError(RuntimeError):
    """The AI service could not be reached or rejected the request."""


@dataclass
class InlineImage:
    """Raw image bytes from an inline response part."""
    data: bytes
    mime_type: str = "image/png"


class GeminiClient:
    """Thin wrapper over google-genai for single text and image requests."""

    def __init__(
        self,
        api_key: str | None = None,
        text_model: str = DEFAULT_TEXT_MODEL,
        image_model: str = DEFAULT_IMAGE_MODEL,
    ):
        self.api_key = api_key
        self.text_model = text_model
        self.image_model = image_model
        self._client: Optional[genai.Client] = None

    def _get_client(self) -> genai.Client:
        if self._client is None:
            api_key = self.api_key or get_api_key()
            if not api_key:
                raise ServiceError("GEMINI_API_KEY not set. Check your .env file.")
            self._client = genai.Client(api_key=api_key)
        return self._client

    def generate_text(self, prompt: str, system_instruction: str) -> Optional[str]:
        """
        Send one prompt with a fixed system instruction.

        Returns:
            Response text, or None when the service returned no text

        Raises:
            ServiceError: On a missing key or any API failure
        """
        client = self._get_client()
        try:
            response = client.models.generate_content(
                model=self.text_model,
                contents=prompt,
                config=genai_types.GenerateContentConfig(
                    system_instruction=system_instruction,
                ),
            )
        except Exception as e:
            raise ServiceError(f"Text generation failed: {e}") from e

        return response.text or None

    def generate_image(
        self,
        prompt: str,
        aspect_ratio: str = IMAGE_ASPECT_RATIO,
    ) -> Optional[InlineImage]:
        """
        Request a single illustration.

        Returns:
            The first inline image part of the response, or None if the
            response carried no image

        Raises:
            ServiceError: On a missing key or any API failure
        """
        client = self._get_client()
        try:
            response = client.models.generate_content(
                model=self.image_model,
                contents=prompt,
                config=genai_types.GenerateContentConfig(
                    image_config=genai_types.ImageConfig(aspect_ratio=aspect_ratio),
                ),
            )
        except Exception as e:
            raise ServiceError(f"Image generation failed: {e}") from e

        return extract_inline_image(response)


def extract_inline_image(response) -> Optional[InlineImage]:
    """Find the first inline image part in the first candidate."""
    if not response.candidates:
        return None
    content = response.candidates[0].content
    if not content or not content.parts:
        return None

    for part in content.parts:
        inline = getattr(part, "inline_data", None)
        if inline and inline.data:
            return InlineImage(data=inline.data, mime_type=inline.mime_type or "image/png")
    return None
