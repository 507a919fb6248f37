"""Configuration data models for the translator.

Each data class mirrors one section of the INI file; field names are the INI keys. Values are kept
as plain strings here and resolved to languages and providers by the loader's validation step.
"""

from __future__ import annotations

from dataclasses import dataclass, field

__all__: list[str] = ["Baidu", "Caiyun", "Config", "General", "Translation", "Youdao"]


@dataclass
class General:
    DEBUG: bool = False
    LOG_FILE: str = ""
    SCRIPT_NAME: str = ""


@dataclass
class Translation:
    PROVIDER: str = "mymemory"
    SOURCE_LANGUAGE: str = ""  # empty means detect automatically
    TARGET_LANGUAGE: str = "en"
    TIMEOUT: float = 10.0


@dataclass
class Baidu:
    APP_ID: str = ""
    KEY: str = ""

    def __repr__(self) -> str:
        return f"Baidu(APP_ID={'***' if self.APP_ID else ''!r}, KEY={'***' if self.KEY else ''!r})"


@dataclass
class Youdao:
    APP_KEY: str = ""
    APP_SECRET: str = ""

    def __repr__(self) -> str:
        return f"Youdao(APP_KEY={'***' if self.APP_KEY else ''!r}, APP_SECRET={'***' if self.APP_SECRET else ''!r})"


@dataclass
class Caiyun:
    TOKEN: str = ""
    REQUEST_ID: str = ""  # empty means the engine default

    def __repr__(self) -> str:
        return f"Caiyun(TOKEN={'***' if self.TOKEN else ''!r}, REQUEST_ID={self.REQUEST_ID!r})"


@dataclass
class Config:
    GENERAL: General = field(default_factory=General)
    TRANSLATION: Translation = field(default_factory=Translation)
    BAIDU: Baidu = field(default_factory=Baidu)
    YOUDAO: Youdao = field(default_factory=Youdao)
    CAIYUN: Caiyun = field(default_factory=Caiyun)
