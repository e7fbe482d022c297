import logging
from dataclasses import dataclass
from typing import Optional

import requests

import settings
from breed_data import breed_names
from errors import (
    CredentialFetchError,
    DecodeError,
    IdentificationError,
    ImageEncodingError,
    TransportError,
    UnexpectedStatusError,
)
from image_encoding import encode_image_base64, to_data_uri

logger = logging.getLogger(__name__)

USER_PROMPT = "Identify the chicken breed in this image. Return only the breed name from the provided list."

SYSTEM_PROMPT = """You are an expert poultry specialist. Analyze the provided image and identify which chicken breed it most closely matches from this specific list of breeds ONLY:

{breeds}

You MUST select ONE breed name from the above list that best matches the chicken in the image based on:
- Feather color and patterns
- Body size and shape
- Comb type and size
- Leg color and feathering
- Overall appearance

Return ONLY the breed name exactly as it appears in the list above. Do not add any additional text or formatting.
If the image doesn't clearly show a chicken or is unclear, select the breed that seems most likely based on any visible features."""


@dataclass
class IdentificationResult:
    breed_name: Optional[str] = None
    error: Optional[IdentificationError] = None

    @property
    def ok(self):
        return self.breed_name is not None


def build_system_prompt(names):
    return SYSTEM_PROMPT.format(breeds=", ".join(names))


class BreedIdentificationClient:
    """Asks a hosted chat-completion model to pick one breed name for a photo."""

    def __init__(self, credentials, session=None, names=None, endpoint=None, model=None,
                 max_tokens=None, temperature=None, timeout=None, jpeg_quality=None):
        self.credentials = credentials
        self.session = session or requests.Session()
        self.names = list(names) if names is not None else breed_names()
        self.endpoint = endpoint or settings.OPENAI_ENDPOINT
        self.model = model or settings.OPENAI_MODEL
        self.max_tokens = settings.OPENAI_MAX_TOKENS if max_tokens is None else max_tokens
        self.temperature = settings.OPENAI_TEMPERATURE if temperature is None else temperature
        self.timeout = settings.REQUEST_TIMEOUT if timeout is None else timeout
        self.jpeg_quality = settings.JPEG_QUALITY if jpeg_quality is None else jpeg_quality

    def build_request_body(self, image_b64):
        return {
            "model": self.model,
            "messages": [
                {"role": "system", "content": build_system_prompt(self.names)},
                {"role": "user", "content": [
                    {"type": "text", "text": USER_PROMPT},
                    {"type": "image_url", "image_url": {"url": to_data_uri(image_b64)}},
                ]},
            ],
            "max_tokens": self.max_tokens,
            "temperature": self.temperature,
        }

    def identify(self, image_bytes):
        """
        Return an IdentificationResult holding the model's trimmed label, or the
        error that stopped the attempt. Never raises for I/O or payload problems.
        """
        try:
            image_b64 = encode_image_base64(image_bytes, self.jpeg_quality)
        except ImageEncodingError as e:
            logger.warning("image encoding failed: %s", e)
            return IdentificationResult(error=e)

        try:
            api_key = self.credentials.get_credential()
        except CredentialFetchError as e:
            logger.warning("credential fetch failed: %s", e)
            return IdentificationResult(error=e)

        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {api_key}",
        }
        try:
            resp = self.session.post(
                self.endpoint,
                json=self.build_request_body(image_b64),
                headers=headers,
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            logger.warning("classification request failed: %s", e)
            return IdentificationResult(error=TransportError(str(e)))

        if resp.status_code != 200:
            logger.warning("classification returned HTTP %s", resp.status_code)
            return IdentificationResult(error=UnexpectedStatusError(resp.status_code, resp.text))

        try:
            content = parse_completion(resp.json())
        except (ValueError, DecodeError) as e:
            # requests' JSONDecodeError is a ValueError
            logger.warning("could not decode classification response: %s", e)
            return IdentificationResult(error=e if isinstance(e, DecodeError) else DecodeError(str(e)))

        return IdentificationResult(breed_name=content.strip())


def parse_completion(data):
    """Pull the first choice's message text out of a chat-completion envelope."""
    try:
        content = data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError) as e:
        raise DecodeError(f"unexpected response shape: {e!r}") from e
    if not isinstance(content, str):
        raise DecodeError("message content is not a string")
    return content
