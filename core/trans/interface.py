"""This module defines the abstract base class every translation engine implements, and the errors they raise.

Callers depend only on ``TransInterface``; each concrete engine adapts it to one provider's protocol.
All failures derive from ``TranslateExceptionError``. Local validation failures are raised before
anything reaches the network.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, Self

from core.trans.languages import auto_detect_code, to_provider_code
from handlers.async_comm import AsyncCommError, AsyncCommInvalidContentTypeError, AsyncHttp
from models.translation_models import TranslationListOutput
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Awaitable, Sequence

    from core.trans.languages import Language
    from models.translation_models import ProviderKind, TranslationOutput

__all__: list[str] = [
    "BatchSplitError",
    "EmptyResultError",
    "EngineAttributes",
    "InputTooLargeError",
    "MissingCredentialsError",
    "NotSupportedLanguagesError",
    "ProviderRejectedError",
    "ResponseFormatError",
    "TransInterface",
    "TranslateExceptionError",
    "TranslationQuotaExceededError",
    "TranslationRateLimitError",
    "TranslationTransportError",
    "UndecodableLanguageError",
    "UnrecognizedProviderError",
]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


@dataclass(frozen=True)
class EngineAttributes:
    """Engine-specific capabilities.

    Attributes:
        name (ProviderKind): Provider the engine talks to.
        supports_native_batch (bool): Whether one request can carry several texts as a list.
        input_limit (int | None): Maximum request size in UTF-8 bytes, or None if unconstrained.
    """

    name: ProviderKind
    supports_native_batch: bool = False
    input_limit: int | None = None


class TranslateExceptionError(Exception):
    """An error occurred during the translation process."""


class TranslationTransportError(TranslateExceptionError):
    """The request could not be completed: connection failure, timeout or non-success HTTP status."""

    def __init__(self, msg: str, *, status: int | None = None) -> None:
        super().__init__(msg)
        self.status: int | None = status


class ProviderRejectedError(TranslateExceptionError):
    """The provider answered, but with an application-level error."""

    def __init__(self, provider: ProviderKind, code: str, message: str) -> None:
        super().__init__(f"{provider} API error [{code}]: {message}")
        self.provider: ProviderKind = provider
        self.code: str = code
        self.message: str = message


class TranslationRateLimitError(ProviderRejectedError):
    """The provider rejected the request because of its access frequency limit."""


class TranslationQuotaExceededError(ProviderRejectedError):
    """The provider rejected the request because the account balance or quota is exhausted."""


class NotSupportedLanguagesError(TranslateExceptionError):
    """A language has no equivalent in the provider's vocabulary."""

    def __init__(self, language: Language, provider: ProviderKind) -> None:
        super().__init__(f"Language '{language}' is not supported by {provider}")
        self.language: Language = language
        self.provider: ProviderKind = provider


class UndecodableLanguageError(TranslateExceptionError):
    """The provider returned a language code with no canonical equivalent."""

    def __init__(self, code: str | None, provider: ProviderKind) -> None:
        super().__init__(f"Language code '{code}' returned by {provider} could not be mapped")
        self.code: str | None = code
        self.provider: ProviderKind = provider


class InputTooLargeError(TranslateExceptionError):
    """The text exceeds the provider's declared input limit."""

    def __init__(self, length: int, limit: int) -> None:
        super().__init__(f"Request is {length} bytes long, the limit is {limit}")
        self.length: int = length
        self.limit: int = limit


class EmptyResultError(TranslateExceptionError):
    """The provider answered successfully but produced no translation."""

    def __init__(self, provider: ProviderKind) -> None:
        super().__init__(f"{provider} did not return a translation")
        self.provider: ProviderKind = provider


class ResponseFormatError(TranslateExceptionError):
    """The response body matched neither the provider's success nor its error shape."""


class BatchSplitError(TranslateExceptionError):
    """A joined batch did not split back into one segment per input text.

    Delimiter-joined batches rely on the provider leaving the delimiter intact; this is raised instead of
    returning a list whose length differs from the input.
    """

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(f"Batch translation returned {actual} segments for {expected} texts")
        self.expected: int = expected
        self.actual: int = actual


class UnrecognizedProviderError(TranslateExceptionError):
    """The provider identifier names no known provider."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unrecognized translation provider: '{name}'")
        self.name: str = name


class MissingCredentialsError(TranslateExceptionError):
    """Required secret material was not supplied. Only the field names are reported, never values."""

    def __init__(self, provider: ProviderKind, missing: Sequence[str]) -> None:
        super().__init__(f"Missing credentials for {provider}: {', '.join(missing)}")
        self.provider: ProviderKind = provider
        self.missing: tuple[str, ...] = tuple(missing)


class TransInterface(ABC):
    """Abstract base class for translation engines.

    Each subclass adapts one provider. Subclasses are registered on definition under their provider
    kind, so the factory can look them up without importing each engine by name.

    Attributes:
        registered (ClassVar[dict[ProviderKind, type[TransInterface]]]): Registered engine classes,
            keyed by provider kind.
    """

    registered: ClassVar[dict[ProviderKind, type[TransInterface]]] = {}

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        kind: ProviderKind | None = cls.fetch_engine_name()
        if kind is None:
            return  # abstract helpers and test doubles are not registered

        if kind in cls.registered:
            msg: str = f"A translation engine for '{kind}' is already registered."
            raise ValueError(msg)

        cls.registered[kind] = cls

    def __init__(self, attributes: EngineAttributes, http: AsyncHttp | None = None) -> None:
        """Initialize the engine.

        Args:
            attributes (EngineAttributes): Capabilities of the concrete engine.
            http (AsyncHttp | None): HTTP client to use. A new one is created if omitted.
        """
        self._engine_attributes: EngineAttributes = attributes
        self._http: AsyncHttp = http if http is not None else AsyncHttp()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        _ = exc_type, exc_val, exc_tb
        await self.close()

    def __repr__(self) -> str:
        # credentials never appear in the repr
        return f"<{self.__class__.__name__} engine={self.engine_name}>"

    @property
    def engine_attributes(self) -> EngineAttributes:
        return self._engine_attributes

    @property
    def engine_name(self) -> ProviderKind:
        return self._engine_attributes.name

    @staticmethod
    def fetch_engine_name() -> ProviderKind | None:
        """Return the provider kind a concrete engine registers under. None for abstract classes."""
        return None

    def is_local(self) -> bool:
        """Whether the engine works without network access. No current provider does."""
        return False

    @abstractmethod
    async def translate_one(
        self, content: str, tgt_lang: Language, src_lang: Language | None = None
    ) -> TranslationOutput:
        """Translate a single text.

        Args:
            content (str): Text to translate.
            tgt_lang (Language): Target language.
            src_lang (Language | None): Source language. If None, the provider detects it.

        Returns:
            TranslationOutput: The translated text.

        Raises:
            TranslateExceptionError: One of its subclasses, depending on the failure.
        """
        raise NotImplementedError

    @abstractmethod
    async def translate_many(
        self, contents: Sequence[str], tgt_lang: Language, src_lang: Language | None = None
    ) -> TranslationListOutput:
        """Translate several texts, preserving their count and order.

        Args:
            contents (Sequence[str]): Texts to translate.
            tgt_lang (Language): Target language.
            src_lang (Language | None): Source language. If None, the provider detects it.

        Returns:
            TranslationListOutput: One translated text per input, in input order.

        Raises:
            TranslateExceptionError: One of its subclasses, depending on the failure.
        """
        raise NotImplementedError

    async def close(self) -> None:
        """Release the HTTP session."""
        await self._http.close()
        logger.debug("'%s' process termination", self.__class__.__name__)

    def _target_code(self, lang: Language) -> str:
        code: str | None = to_provider_code(lang, self.engine_name)
        if code is None:
            raise NotSupportedLanguagesError(lang, self.engine_name)
        return code

    def _source_code(self, lang: Language | None) -> str:
        """Wire code for the source language; the provider's auto-detect token only when none was given."""
        if lang is None:
            return auto_detect_code(self.engine_name)
        return self._target_code(lang)

    def _check_input_limit(self, content: str) -> None:
        limit: int | None = self._engine_attributes.input_limit
        if limit is None:
            return
        length: int = len(content.encode("utf-8"))
        if length > limit:
            raise InputTooLargeError(length, limit)

    @staticmethod
    def _split_batch(text: str, delimiter: str, expected: int) -> list[str]:
        segments: list[str] = text.split(delimiter)
        if len(segments) != expected:
            raise BatchSplitError(expected, len(segments))
        return segments

    async def _translate_joined(
        self, contents: Sequence[str], tgt_lang: Language, src_lang: Language | None, delimiter: str
    ) -> TranslationListOutput:
        """Emulate a batch with one request: join the texts with a delimiter and split the translation on it."""
        if not contents:
            return TranslationListOutput(text=[], lang=tgt_lang)
        result: TranslationOutput = await self.translate_one(delimiter.join(contents), tgt_lang, src_lang)
        return TranslationListOutput(
            text=self._split_batch(result.text, delimiter, len(contents)),
            lang=result.lang,
            metadata=result.metadata,
        )

    async def _call(self, request: Awaitable[Any]) -> Any:
        """Await a request on the HTTP client, converting transport failures to TranslationTransportError."""
        msg: str
        try:
            return await request
        except AsyncCommInvalidContentTypeError as err:
            msg = f"Undecodable response from {self.engine_name}: {err.msg}"
            raise ResponseFormatError(msg) from err
        except AsyncCommError as err:
            logger.error("'%s': %s", self.engine_name, err)
            msg = f"Request to {self.engine_name} failed: {err.msg}"
            raise TranslationTransportError(msg, status=err.status) from err
