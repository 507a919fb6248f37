"""Data models for the translation providers' request and response payloads."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from dataclasses_json import DataClassJsonMixin, LetterCase, config, dataclass_json

__all__: list[str] = [
    "AlibabaResponse",
    "BaiduErrorResponse",
    "BaiduTranslateForm",
    "BaiduTranslateResponse",
    "CaiyunRequest",
    "CaiyunResponse",
    "MyMemoryResponse",
    "YoudaoResponse",
    "YoudaoTranslateForm",
]


# Baidu

@dataclass
class BaiduTranslateForm(DataClassJsonMixin):
    """Form fields of a Baidu translate request."""

    q: str
    from_lang: str = field(metadata=config(field_name="from"))
    to: str
    appid: str
    salt: str
    sign: str

    def __repr__(self) -> str:
        return f"BaiduTranslateForm(from={self.from_lang}, to={self.to}, q={self.q!r})"


@dataclass
class _BaiduSentence(DataClassJsonMixin):
    src: str
    dst: str


@dataclass
class BaiduTranslateResponse(DataClassJsonMixin):
    """Success shape: one ``trans_result`` entry per line of the query."""

    from_lang: str = field(metadata=config(field_name="from"))
    to: str
    trans_result: list[_BaiduSentence]


@dataclass
class BaiduErrorResponse(DataClassJsonMixin):
    """Error shape. Shares the response channel with the success shape and carries no tag."""

    error_code: str
    error_msg: str = ""


# Youdao

@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass
class YoudaoTranslateForm(DataClassJsonMixin):
    """Form fields of a Youdao v3-signed translate request."""

    q: str
    from_lang: str = field(metadata=config(field_name="from"))
    to: str
    app_key: str
    salt: str
    sign: str
    curtime: str
    sign_type: str = "v3"

    def __repr__(self) -> str:
        return f"YoudaoTranslateForm(from={self.from_lang}, to={self.to}, salt={self.salt}, q={self.q!r})"


@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass
class YoudaoResponse(DataClassJsonMixin):
    error_code: str
    translation: list[str] | None = None
    lang_pair: str | None = field(default=None, metadata=config(field_name="l"))


# Caiyun

@dataclass
class CaiyunRequest(DataClassJsonMixin):
    """JSON body of a Caiyun translate request. ``detect`` is omitted unless set."""

    trans_type: str
    source: list[str]
    request_id: str
    detect: bool | None = field(default=None, metadata=config(exclude=lambda value: value is None))


@dataclass
class CaiyunResponse(DataClassJsonMixin):
    target: list[str] | None = None
    message: str | None = None


# MyMemory

@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass
class _MyMemoryResponseData(DataClassJsonMixin):
    translated_text: str | None = None
    detected_language: str | None = None


@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass
class MyMemoryResponse(DataClassJsonMixin):
    response_data: _MyMemoryResponseData | None = None
    response_status: Any = None  # int on success, sometimes a string on errors
    response_details: str | None = None


# Alibaba

@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass
class _AlibabaResponseData(DataClassJsonMixin):
    translate_text: str | None = None
    detect_language: str | None = None


@dataclass
class AlibabaResponse(DataClassJsonMixin):
    data: _AlibabaResponseData | None = None
