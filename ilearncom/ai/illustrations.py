"""
IllustrationCache - Lazily generated images for activity steps.

Entries are keyed by step_key() (week + section + step) and are either
absent, loading or ready. A key that is loading or ready is never requested
again; a failed or imageless request drops the entry so the step can be
retried.
"""

import base64
import logging
from dataclasses import dataclass
from typing import Optional, Protocol

from ilearncom.config import IMAGE_ASPECT_RATIO
from ilearncom.schemas import ActivityStep, ImageCacheState, ImageEntry, ImageStatus
from ilearncom.utils import format_prompt, load_prompt

from .client import InlineImage

logger = logging.getLogger(__name__)


class ImageGenerator(Protocol):
    def generate_image(self, prompt: str, aspect_ratio: str = IMAGE_ASPECT_RATIO) -> Optional[InlineImage]: ...


@dataclass
class ImageRequest:
    key: str
    token: int
    prompt: str


def to_data_uri(image: InlineImage) -> str:
    encoded = base64.b64encode(image.data).decode("ascii")
    return f"data:{image.mime_type};base64,{encoded}"


class IllustrationCache:
    """Drive one ImageCacheState against an image generator."""

    def __init__(
        self,
        state: ImageCacheState,
        generator: ImageGenerator,
        aspect_ratio: str = IMAGE_ASPECT_RATIO,
    ):
        self.state = state
        self.generator = generator
        self.aspect_ratio = aspect_ratio
        self.template: str = load_prompt("step_illustration", required=("user_template",))["user_template"]

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def get(self, key: str) -> Optional[ImageEntry]:
        return self.state.entries.get(key)

    def is_loading(self, key: str) -> bool:
        entry = self.get(key)
        return entry is not None and entry.status == ImageStatus.LOADING

    def image_for(self, key: str) -> Optional[str]:
        """Data URI for a ready image, else None."""
        entry = self.get(key)
        if entry and entry.status == ImageStatus.READY:
            return entry.data_uri
        return None

    def build_prompt(self, title: str, description: str) -> str:
        return format_prompt(self.template, title=title, description=description)

    # -------------------------------------------------------------------------
    # Request lifecycle
    # -------------------------------------------------------------------------

    def begin(self, key: str, title: str, description: str) -> Optional[ImageRequest]:
        """
        Mark a key as loading.

        Returns:
            ImageRequest, or None if the key is already loading or ready
        """
        if key in self.state.entries:
            return None

        self.state.generation += 1
        token = self.state.generation
        self.state.entries[key] = ImageEntry(status=ImageStatus.LOADING, token=token)
        return ImageRequest(key=key, token=token, prompt=self.build_prompt(title, description))

    def _is_current(self, request: ImageRequest) -> bool:
        entry = self.state.entries.get(request.key)
        if entry is None or entry.token != request.token or entry.status != ImageStatus.LOADING:
            logger.debug(f"Discarding stale illustration for {request.key}")
            return False
        return True

    def complete(self, request: ImageRequest, image: Optional[InlineImage]):
        """Store the image; a response without one leaves the key absent."""
        if not self._is_current(request):
            return
        if image is None:
            logger.warning(f"No image in response for {request.key}")
            del self.state.entries[request.key]
            return
        self.state.entries[request.key] = ImageEntry(
            status=ImageStatus.READY,
            token=request.token,
            data_uri=to_data_uri(image),
        )

    def fail(self, request: ImageRequest):
        if not self._is_current(request):
            return
        del self.state.entries[request.key]

    def ensure_image(self, key: str, title: str, description: str) -> bool:
        """
        Generate the image for a step unless it exists or is on its way.

        Returns:
            True if a request was issued
        """
        request = self.begin(key, title, description)
        if request is None:
            return False

        try:
            image = self.generator.generate_image(request.prompt, self.aspect_ratio)
        except Exception as e:
            logger.warning(f"Image generation failed for {key}: {e}")
            self.fail(request)
        else:
            self.complete(request, image)
        return True

    def ensure_step_image(self, key: str, step: ActivityStep) -> bool:
        return self.ensure_image(key, step.title, step.desc)

    def reset(self):
        """Forget every image; late replies are dropped."""
        self.state.generation += 1
        self.state.entries.clear()
