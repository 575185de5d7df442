"""LibreTranslate Service - Implements translation via the LibreTranslate HTTP API."""

import json
from typing import Any, List, Optional

import httpx

from libre_translate.core import Language, TranslationResult
from libre_translate.logging_config import get_logger
from libre_translate.services.translation.errors import (
    ApiError,
    DecodeError,
    SerializationError,
    TransportError,
)
from libre_translate.services.translation.translation_service import TranslationService

logger = get_logger(__name__)


class LibreTranslationService(TranslationService):
    """
    Translation service talking to a LibreTranslate server.

    One instance is created at startup and shared by everything that needs it.
    Calls are blocking; run them from a worker thread in the UI.
    """

    DEFAULT_BASE_URL = "https://libretranslate.de"

    JSON_HEADERS = {
        "Content-Type": "application/json",
        "Accept": "application/json",
    }

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        client: Optional[httpx.Client] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Args:
            base_url: Server root, optionally with a path prefix.
            client: HTTP client to use. When omitted the service owns a new one
                that follows redirects.
            transport: Transport for the owned client. Ignored when client is given.
        """
        self.base_url = base_url.rstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.Client(transport=transport, follow_redirects=True)

    def __enter__(self) -> "LibreTranslationService":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        """Close the HTTP client if this service created it."""
        if self._owns_client:
            self._client.close()

    def list_languages(self) -> List[Language]:
        """
        Fetch the languages supported by the server.

        Returns:
            Languages in server order.

        Raises:
            TransportError, ApiError, DecodeError
        """
        url = self._url("/languages")
        logger.debug("GET %s", url)

        try:
            response = self._client.get(url, headers={"Accept": "application/json"})
        except httpx.RequestError as e:
            logger.warning("Language list request failed: %s", e)
            raise TransportError(e) from e

        payload = self._checked_payload(response)
        languages = self._decode_languages(payload, response.status_code)
        logger.info("Fetched %d languages", len(languages))
        return languages

    def translate(
        self, text: str, source_language: Language, target_language: Language
    ) -> TranslationResult:
        """
        Translate text from source_language into target_language.

        Raises:
            SerializationError, TransportError, ApiError, DecodeError
        """
        payload = {
            "q": text,
            "source": source_language.id,
            "target": target_language.id,
            "format": "text",
        }
        try:
            body = json.dumps(payload).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Could not encode translation request: {e}") from e

        url = self._url("/translate")
        logger.debug("POST %s (%s -> %s, %d chars)", url, source_language.id, target_language.id, len(text))

        try:
            response = self._client.post(url, content=body, headers=self.JSON_HEADERS)
        except httpx.RequestError as e:
            logger.warning("Translate request failed: %s", e)
            raise TransportError(e) from e

        data = self._checked_payload(response)
        translated = data.get("translatedText") if isinstance(data, dict) else None
        if not isinstance(translated, str):
            raise DecodeError(
                "Unexpected translation response from server",
                status_code=response.status_code,
                body=response.text,
            )
        return TranslationResult(translated_text=translated)

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def _checked_payload(self, response: httpx.Response) -> Any:
        """
        Classify a response and return its decoded JSON body.

        Error statuses (>= 400) become ApiError when the body carries an
        ``{"error": str}`` message and DecodeError otherwise. Any other status
        returns the decoded body, or raises DecodeError if it is not JSON.
        """
        status = response.status_code

        if status >= 400:
            message = None
            try:
                body = response.json()
            except ValueError:
                body = None
            if isinstance(body, dict) and isinstance(body.get("error"), str):
                message = body["error"]

            if message is None:
                logger.warning("Undecodable error response (HTTP %d)", status)
                raise DecodeError(
                    f"Unexpected error response from server (HTTP {status})",
                    status_code=status,
                    body=response.text,
                )

            logger.warning("Server returned HTTP %d: %s", status, message)
            raise ApiError(message, status_code=status)

        try:
            return response.json()
        except ValueError as e:
            raise DecodeError(
                f"Could not read server response: {e}",
                status_code=status,
                body=response.text,
            ) from e

    @staticmethod
    def _decode_languages(payload: Any, status_code: int) -> List[Language]:
        if not isinstance(payload, list):
            raise DecodeError("Expected a list of languages", status_code=status_code)

        languages = []
        seen = set()
        for entry in payload:
            try:
                code = entry["code"]
                name = entry["name"]
            except (KeyError, TypeError) as e:
                raise DecodeError("Malformed language entry", status_code=status_code) from e
            if not isinstance(code, str) or not code or not isinstance(name, str):
                raise DecodeError("Malformed language entry", status_code=status_code)
            if code in seen:
                raise DecodeError(f"Duplicate language code: {code}", status_code=status_code)
            seen.add(code)
            languages.append(Language(id=code, name=name))
        return languages
