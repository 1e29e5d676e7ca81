# src/services/description_client.py

"""Drafts listing descriptions through the Gemini text API."""

import asyncio
import logging
from typing import Any

from curl_cffi import requests as curl_requests

from src.config.settings import Settings
from src.models.errors import (
    AuthenticationError,
    ConfigurationError,
    EmptyResponseError,
    SuggestionError,
    TransientError,
)

logger = logging.getLogger("bazaar.suggest")

_AUTH_STATUS_CODES = (401, 403)
_AUTH_API_STATUSES = ("UNAUTHENTICATED", "PERMISSION_DENIED")

_PROMPT_TEMPLATE = (
    'Generate a compelling and concise e-commerce product description '
    'for "{name}".\n'
    'Highlight its key selling points based on these features/keywords: '
    '"{keywords}".\n'
    "The description should be suitable for a C2C marketplace.\n"
    "Aim for around 50-80 words. Be engaging and informative.\n"
    "Do not use markdown formatting in your response, just plain text."
)


def build_prompt(name: str, keywords: str) -> str:
    """Build the generation prompt; a blank name becomes "this item"."""
    subject = name.strip() or Settings.SUGGESTION_FALLBACK_NAME
    return _PROMPT_TEMPLATE.format(name=subject, keywords=keywords.strip())


def classify_failure(
    status_code: int | None,
    message: str,
    api_status: str = "",
) -> SuggestionError:
    """Map a raw upstream failure onto the suggestion error taxonomy.

    This is the only place message text is inspected.
    """
    lowered = message.lower()
    if (
        status_code in _AUTH_STATUS_CODES
        or api_status.upper() in _AUTH_API_STATUSES
        or any(m in lowered for m in Settings.AUTH_ERROR_MARKERS)
    ):
        return AuthenticationError(
            "Gemini API key is invalid, missing, or expired: " + message
        )
    return TransientError(
        f"Failed to generate description with Gemini: {message}"
    )


def extract_text(payload: Any) -> str:
    """Join the text parts of the first candidate, stripped.

    Missing candidates or parts yield ``""``; a body whose levels have
    the wrong type raises ``ValueError``.
    """
    if not isinstance(payload, dict):
        raise ValueError(
            f"expected a JSON object, got {type(payload).__name__}"
        )
    candidates = payload.get("candidates") or []
    if not isinstance(candidates, list):
        raise ValueError("'candidates' is not a list")
    if not candidates:
        return ""
    first = candidates[0]
    if not isinstance(first, dict):
        raise ValueError("candidate is not an object")
    content = first.get("content") or {}
    if not isinstance(content, dict):
        raise ValueError("'content' is not an object")
    parts = content.get("parts") or []
    if not isinstance(parts, list):
        raise ValueError("'parts' is not a list")
    text = "".join(
        str(part.get("text") or "")
        for part in parts
        if isinstance(part, dict)
    )
    return text.strip()


def _error_details(resp: curl_requests.Response) -> tuple[str, str]:
    """Return ``(message, api_status)`` from an error response."""
    try:
        body = resp.json()
    except ValueError:
        return resp.text[:200] or f"HTTP {resp.status_code}", ""
    error = body.get("error", {}) if isinstance(body, dict) else {}
    if not isinstance(error, dict):
        return str(error)[:200], ""
    message = str(error.get("message") or f"HTTP {resp.status_code}")
    return message, str(error.get("status") or "")


class DescriptionSuggestionClient:
    """Ask the text-generation upstream for a product description.

    The client never touches the catalog or the view state; callers
    decide what to do with the returned text.
    """

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        session: curl_requests.Session | None = None,
    ) -> None:
        self.settings = Settings()
        self.api_key = (
            self.settings.GEMINI_API_KEY if api_key is None else api_key
        )
        self.model = model or self.settings.GEMINI_MODEL
        self.session = session or curl_requests.Session(
            impersonate=self.settings.IMPERSONATE_BROWSER
        )
        if not self.api_key:
            logger.warning(
                "Gemini API key (GEMINI_API_KEY / API_KEY) is not set; "
                "description suggestions will fail until it is configured"
            )

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    @property
    def endpoint(self) -> str:
        return (
            f"{self.settings.GEMINI_API_URL}/models/"
            f"{self.model}:generateContent"
        )

    async def suggest(self, name: str, keywords: str) -> str:
        """Return generated description text for *name* and *keywords*.

        Raises:
            ConfigurationError: no API key is configured.
            AuthenticationError: the upstream rejected the key.
            EmptyResponseError: the upstream returned no text.
            TransientError: any other upstream or network failure.
        """
        if not self.api_key:
            raise ConfigurationError(
                "Gemini API key is not configured (set GEMINI_API_KEY); "
                "cannot generate a description"
            )
        prompt = build_prompt(name, keywords)
        logger.info(
            "Requesting description for '%s' from %s",
            name.strip() or self.settings.SUGGESTION_FALLBACK_NAME,
            self.model,
        )
        return await asyncio.to_thread(self._generate, prompt)

    def _generate(self, prompt: str) -> str:
        """Blocking request to the upstream, classified on failure."""
        headers = {
            "Content-Type": "application/json",
            "x-goog-api-key": self.api_key,
        }
        payload = {"contents": [{"parts": [{"text": prompt}]}]}
        try:
            resp = self.session.post(
                self.endpoint,
                headers=headers,
                json=payload,
                timeout=self.settings.REQUEST_TIMEOUT,
            )
        except Exception as exc:
            logger.error(
                "Suggestion request failed: %s", exc, exc_info=True
            )
            raise TransientError(
                f"Failed to reach the suggestion service: {exc}"
            ) from exc

        if resp.status_code != 200:
            message, api_status = _error_details(resp)
            error = classify_failure(resp.status_code, message, api_status)
            logger.error(
                "Suggestion service returned HTTP %d (%s): %s",
                resp.status_code,
                error.kind.value,
                message,
            )
            raise error

        try:
            text = extract_text(resp.json())
        except ValueError as exc:
            logger.error("Malformed suggestion response", exc_info=True)
            raise TransientError(
                "Received a malformed response from the suggestion service"
            ) from exc

        if not text:
            logger.warning("Suggestion service returned no text")
            raise EmptyResponseError(
                "Received an empty response from the suggestion service"
            )
        logger.debug("Received %d-word suggestion", len(text.split()))
        return text
