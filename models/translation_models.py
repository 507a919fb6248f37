"""Models for translation results and provider identity.

Defines the ProviderKind enumeration and the TranslationOutput / TranslationListOutput dataclasses
returned by every translation engine.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from core.trans.languages import Language

__all__: list[str] = ["ProviderKind", "TranslationListOutput", "TranslationOutput"]


class ProviderKind(StrEnum):
    """Closed set of supported translation providers.

    The value is the distinguished engine name used for registration, configuration and logging.
    """

    BAIDU = "baidu"
    YOUDAO = "youdao"
    ALIBABA = "alibaba"
    CAIYUN = "caiyun"
    MYMEMORY = "mymemory"

    @classmethod
    def parse(cls, name: str) -> ProviderKind | None:
        """Resolve a provider name or one of its aliases, case-insensitively.

        Args:
            name (str): Provider identifier such as "Baidu", "ali" or "my memory".

        Returns:
            ProviderKind | None: The matching kind, or None if the name is not recognized.
        """
        return _PROVIDER_ALIASES.get(name.strip().lower())


_PROVIDER_ALIASES: dict[str, ProviderKind] = {
    "baidu": ProviderKind.BAIDU,
    "youdao": ProviderKind.YOUDAO,
    "alibaba": ProviderKind.ALIBABA,
    "ali": ProviderKind.ALIBABA,
    "caiyun": ProviderKind.CAIYUN,
    "彩云": ProviderKind.CAIYUN,
    "mymemory": ProviderKind.MYMEMORY,
    "my-memory": ProviderKind.MYMEMORY,
    "my memory": ProviderKind.MYMEMORY,
}


@dataclass
class TranslationOutput:
    """Result of translating a single text.

    Attributes:
        text (str): Translated text.
        lang (Language | None): Language of the translated text, when known.
        metadata (dict[str, str] | None): Engine-specific metadata (e.g. the engine name).
    """

    text: str
    lang: Language | None = None
    metadata: dict[str, str] | None = None

    def __str__(self) -> str:
        return self.text


@dataclass
class TranslationListOutput:
    """Result of translating a sequence of texts.

    ``text`` always has the same length and order as the input sequence.

    Attributes:
        text (list[str]): Translated texts.
        lang (Language | None): Language of the translated texts, when known.
        metadata (dict[str, str] | None): Engine-specific metadata.
    """

    text: list[str]
    lang: Language | None = None
    metadata: dict[str, str] | None = None

    def __len__(self) -> int:
        return len(self.text)
