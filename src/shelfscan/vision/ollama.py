# ABOUTME: Client for a local Ollama server running a vision-language model.
# ABOUTME: Sends a cover/spine photo and parses the model's JSON reply into an ExtractedRecord.

import base64
import json
import logging
import re
from typing import Any

from shelfscan.identify.http import FetchError, HttpClient
from shelfscan.identify.types import ExtractedRecord

logger = logging.getLogger(__name__)

DEFAULT_OLLAMA_URL = "http://localhost:11434"

# Substrings that mark a model as able to read images.
VISION_MODEL_MARKERS = ("llava", "vision", "bakllava", "vl", "clip", "multimodal")

EXTRACTION_PROMPT = """Analyze this image of a book and extract the following information. \
Look at both the cover and spine if visible. Return only a valid JSON object with no additional text:

{
  "title": "exact book title",
  "author": "author name(s)",
  "isbn": "ISBN number if visible",
  "publisher": "publisher name if visible"
}

If any information is not clearly visible or readable, omit that field from the JSON. \
Make sure the response is valid JSON only."""

_JSON_OBJECT_RE = re.compile(r"\{.*\}", re.DOTALL)
_FIELDS = ("title", "author", "isbn", "publisher")


class VisionError(Exception):
    """Raised when the vision model cannot be reached or its reply cannot be used."""


def parse_vision_response(text: str) -> ExtractedRecord:
    """Pull the JSON object out of a model reply and map it to an ExtractedRecord.

    Models often wrap the JSON in prose or code fences, so the outermost
    {...} span is used when present. Only non-empty string values survive.

    Raises:
        VisionError: If no JSON object can be decoded from the reply.
    """
    cleaned = text.strip()
    match = _JSON_OBJECT_RE.search(cleaned)
    payload = match.group(0) if match else cleaned
    try:
        data = json.loads(payload)
    except json.JSONDecodeError as exc:
        raise VisionError(f"Could not parse book information from model reply: {exc}") from exc
    if not isinstance(data, dict):
        raise VisionError("Model reply was not a JSON object")

    values: dict[str, str] = {}
    for name in _FIELDS:
        value = data.get(name)
        if isinstance(value, str) and value.strip():
            values[name] = value.strip()
    return ExtractedRecord(**values)


class OllamaVisionClient:
    """Talks to Ollama's /api/tags and /api/generate endpoints.

    The client is inert unless enabled: availability checks report False,
    model listing is empty, and analysis raises VisionError.
    """

    def __init__(
        self,
        http_client: HttpClient,
        *,
        base_url: str = DEFAULT_OLLAMA_URL,
        enabled: bool = False,
    ) -> None:
        self._http = http_client
        self._base_url = base_url.rstrip("/")
        self._enabled = enabled

    @property
    def enabled(self) -> bool:
        return self._enabled

    def _tags(self) -> dict[str, Any]:
        data = self._http.get(f"{self._base_url}/api/tags")
        return data if isinstance(data, dict) else {}

    def is_available(self) -> bool:
        """Whether the server is enabled and answering."""
        if not self._enabled:
            return False
        try:
            self._tags()
        except FetchError as exc:
            logger.warning("Ollama availability check failed: %s", exc)
            return False
        return True

    def list_models(self) -> list[str]:
        """Names of installed models that look vision-capable."""
        if not self._enabled:
            return []
        try:
            data = self._tags()
        except FetchError as exc:
            logger.warning("Failed to list Ollama models: %s", exc)
            return []
        names = [m.get("name", "") for m in data.get("models") or [] if isinstance(m, dict)]
        return [n for n in names if any(marker in n for marker in VISION_MODEL_MARKERS)]

    def analyze_image(self, image: bytes, model: str) -> ExtractedRecord:
        """Ask the model to read title, author, ISBN and publisher from a photo.

        Raises:
            VisionError: If the client is disabled, the request fails, or the
                reply holds no usable JSON.
        """
        if not self._enabled:
            raise VisionError("Ollama is not enabled")

        request = {
            "model": model,
            "prompt": EXTRACTION_PROMPT,
            "images": [base64.b64encode(image).decode("ascii")],
            "stream": False,
        }
        try:
            data = self._http.post(f"{self._base_url}/api/generate", json=request)
        except FetchError as exc:
            raise VisionError(f"Ollama request failed: {exc}") from exc

        reply = data.get("response") if isinstance(data, dict) else None
        if not isinstance(reply, str):
            raise VisionError("Ollama reply had no response text")

        logger.debug("Raw vision reply: %s", reply)
        return parse_vision_response(reply)
