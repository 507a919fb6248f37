"""Translation engine interfaces and construction.

This package provides one contract, ``TransInterface``, over several remote translation providers
(Baidu, Youdao, Caiyun, MyMemory and Alibaba), the canonical ``Language`` vocabulary, and
``TranslatorFactory`` for building an engine from a provider name and credentials.
"""

from core.trans.factory import TranslatorFactory
from core.trans.interface import (
    BatchSplitError,
    EmptyResultError,
    EngineAttributes,
    InputTooLargeError,
    MissingCredentialsError,
    NotSupportedLanguagesError,
    ProviderRejectedError,
    ResponseFormatError,
    TransInterface,
    TranslateExceptionError,
    TranslationQuotaExceededError,
    TranslationRateLimitError,
    TranslationTransportError,
    UndecodableLanguageError,
    UnrecognizedProviderError,
)
from core.trans.languages import Language, from_provider_code, to_provider_code

__all__: list[str] = [
    "BatchSplitError",
    "EmptyResultError",
    "EngineAttributes",
    "InputTooLargeError",
    "Language",
    "MissingCredentialsError",
    "NotSupportedLanguagesError",
    "ProviderRejectedError",
    "ResponseFormatError",
    "TransInterface",
    "TranslateExceptionError",
    "TranslationQuotaExceededError",
    "TranslationRateLimitError",
    "TranslationTransportError",
    "TranslatorFactory",
    "UndecodableLanguageError",
    "UnrecognizedProviderError",
    "from_provider_code",
    "to_provider_code",
]
