"""DeepL translation adapter.

Sends a single text to the DeepL REST API and returns the first translation.
Every failure (missing credential, empty input, transport error, non-2xx
status, unexpected payload) degrades to returning the input text unchanged,
so callers never have to handle exceptions from this module.

Contents:
    * :class:`DeepLTranslator` - Callable translator satisfying the ``Translate`` port.
    * :func:`create_translator` - Builds a translator from the ``[translation]`` section.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, cast

import httpx
import orjson
from lib_layered_config import Config

from timegreet.adapters.config.models import DEFAULT_ENDPOINT, load_translation_settings
from timegreet.domain.behaviors import is_blank, normalize_language
from timegreet.domain.errors import TranslationError

logger = logging.getLogger(__name__)

_AUTH_SCHEME = "DeepL-Auth-Key"


def _field(payload: Mapping[str, Any], name: str) -> Any:
    """Look up ``name`` in ``payload`` ignoring case.

    Examples:
        >>> _field({"Translations": []}, "translations")
        []
        >>> _field({"text": "x"}, "missing") is None
        True
    """
    if name in payload:
        return payload[name]
    wanted = name.lower()
    for key, value in payload.items():
        if isinstance(key, str) and key.lower() == wanted:
            return value
    return None


def extract_translation(payload: object) -> str:
    """Return the first translation text from a DeepL response body.

    Raises:
        TranslationError: If the payload does not look like
            ``{"translations": [{"text": "..."}]}``.

    Examples:
        >>> extract_translation({"translations": [{"detected_source_language": "EN", "text": "Hallo"}]})
        'Hallo'
        >>> extract_translation({"TRANSLATIONS": [{"Text": "Bonjour"}, {"text": "Salut"}]})
        'Bonjour'
        >>> extract_translation({"translations": []})  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        TranslationError: response contains no translations
    """
    if not isinstance(payload, Mapping):
        raise TranslationError("response body is not a JSON object")
    translations = _field(cast("Mapping[str, Any]", payload), "translations")
    if not isinstance(translations, list) or not translations:
        raise TranslationError("response contains no translations")
    first: object = cast("list[object]", translations)[0]
    if not isinstance(first, Mapping):
        raise TranslationError("translation entry is not a JSON object")
    text = _field(cast("Mapping[str, Any]", first), "text")
    if not isinstance(text, str):
        raise TranslationError("translation entry has no text")
    return text


class DeepLTranslator:
    """Translate English text through DeepL, falling back to the input text.

    The credential is fixed at construction; the environment is never
    consulted again afterwards.

    Args:
        api_key: DeepL authentication key. Empty disables translation.
        endpoint: Translate endpoint URL.
        source_lang: Source language of every request.
        timeout: Request timeout in seconds.
        transport: Optional httpx transport, e.g. ``httpx.MockTransport`` in tests.

    Example:
        >>> translator = DeepLTranslator(api_key="")
        >>> translator("Good morning", "DE")
        'Good morning'
    """

    def __init__(
        self,
        api_key: str,
        *,
        endpoint: str = DEFAULT_ENDPOINT,
        source_lang: str = "EN",
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._api_key = api_key.strip()
        self._endpoint = endpoint
        self._source_lang = normalize_language(source_lang)
        self._timeout = timeout
        self._transport = transport

        if self._api_key:
            logger.info("DeepL translation service initialized", extra={"endpoint": endpoint})
        else:
            logger.warning("DeepL API key not found. Translation will be skipped.")

    @property
    def enabled(self) -> bool:
        """True when a credential is configured."""
        return bool(self._api_key)

    def __call__(self, text: str, target_language: str) -> str:
        return self.translate(text, target_language)

    def translate(self, text: str, target_language: str) -> str:
        """Return ``text`` translated into ``target_language``, or ``text`` itself on any failure."""
        if is_blank(text) or is_blank(target_language):
            logger.warning("Text or target language missing for translation.")
            return text
        if not self._api_key:
            logger.warning("DeepL API key missing. Returning original text.")
            return text

        target = normalize_language(target_language)
        try:
            return self._request(text, target)
        except Exception as exc:  # noqa: BLE001 - every failure degrades to the original text
            logger.error(
                "Translation failed; returning original text",
                exc_info=True,
                extra={"target_lang": target, "error": f"{type(exc).__name__}: {exc}"},
            )
            return text

    def _request(self, text: str, target: str) -> str:
        body = orjson.dumps({"text": [text], "source_lang": self._source_lang, "target_lang": target})
        headers = {
            "Authorization": f"{_AUTH_SCHEME} {self._api_key}",
            "Content-Type": "application/json",
        }

        logger.info("Sending translation request to DeepL", extra={"target_lang": target})
        with httpx.Client(transport=self._transport, timeout=self._timeout) as client:
            response = client.post(self._endpoint, content=body, headers=headers)

        if not response.is_success:
            logger.warning("DeepL returned a non-success status", extra={"status_code": response.status_code})
            return text

        logger.info("Raw DeepL response", extra={"response": response.text})
        try:
            translated = extract_translation(orjson.loads(response.content))
        except TranslationError as exc:
            logger.warning("Unexpected DeepL response shape: %s", exc)
            return text

        logger.info("Translation received", extra={"translated": translated, "target_lang": target})
        return translated


def create_translator(
    config: Config,
    *,
    environ: Mapping[str, str] | None = None,
    transport: httpx.BaseTransport | None = None,
) -> DeepLTranslator:
    """Build a :class:`DeepLTranslator` from the ``[translation]`` section.

    The credential is resolved here, once: ``translation.api_key`` when set,
    otherwise the environment variable named by ``translation.api_key_env``.

    Example:
        >>> translator = create_translator(Config({}, {}), environ={})
        >>> translator.enabled
        False
    """
    settings = load_translation_settings(config)
    return DeepLTranslator(
        settings.resolve_api_key(environ),
        endpoint=settings.endpoint,
        source_lang=settings.source_lang,
        timeout=settings.timeout,
        transport=transport,
    )


__all__ = [
    "DeepLTranslator",
    "create_translator",
    "extract_translation",
]
