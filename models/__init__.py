"""Data models for the translator.

This package contains dataclass definitions for configuration, translation results, and the
request/response payloads of each translation provider.
"""

from __future__ import annotations

from models.config_models import Config
from models.provider_models import (
    AlibabaResponse,
    BaiduErrorResponse,
    BaiduTranslateForm,
    BaiduTranslateResponse,
    CaiyunRequest,
    CaiyunResponse,
    MyMemoryResponse,
    YoudaoResponse,
    YoudaoTranslateForm,
)
from models.translation_models import ProviderKind, TranslationListOutput, TranslationOutput

__all__: list[str] = [
    "AlibabaResponse",
    "BaiduErrorResponse",
    "BaiduTranslateForm",
    "BaiduTranslateResponse",
    "CaiyunRequest",
    "CaiyunResponse",
    "Config",
    "MyMemoryResponse",
    "ProviderKind",
    "TranslationListOutput",
    "TranslationOutput",
    "YoudaoResponse",
    "YoudaoTranslateForm",
]
