from __future__ import annotations

import hashlib
import random
import uuid
from typing import Any

import pytest

from core.trans.engines import trans_youdao as trans_youdao_module
from core.trans.engines.trans_youdao import (
    YoudaoTranslation,
    generate_node,
    generate_nonce,
    sha256_encode,
    truncate,
)
from core.trans.interface import (
    BatchSplitError,
    EmptyResultError,
    MissingCredentialsError,
    NotSupportedLanguagesError,
    ProviderRejectedError,
)
from core.trans.languages import Language
from tests.stub_http import StubHttp, as_http

APP_KEY = "youdao-app-key"
APP_SECRET = "youdao-app-secret"
NOW_NS = 1_700_000_000_123_456_789
NONCE = "04c29687-833b-11ee-aa5b-0a1b2c3d4e5f"


def _engine(stub: StubHttp, seed: int = 0) -> YoudaoTranslation:
    return YoudaoTranslation(APP_KEY, APP_SECRET, as_http(stub), rng=random.Random(seed), clock=lambda: NOW_NS)


def _success(*translation: str) -> dict[str, Any]:
    return {"errorCode": "0", "translation": list(translation), "l": "en2zh-CHS"}


@pytest.mark.parametrize(
    ("query", "expected"),
    [
        ("", ""),
        ("hello", "hello"),
        ("a" * 20, "a" * 20),
        ("abcdefghijklmnopqrstuvwxyz", "abcdefghij26qrstuvwxyz"),
        ("你" * 25, "你" * 10 + "25" + "你" * 10),
    ],
)
def test_truncate_counts_characters(query: str, expected: str) -> None:
    assert truncate(query) == expected


def test_sha256_encode_is_lowercase_hex() -> None:
    assert sha256_encode("abc") == hashlib.sha256(b"abc").hexdigest()
    assert sha256_encode("abc") == sha256_encode("abc").lower()


def test_generate_node_is_locally_administered_unicast() -> None:
    for seed in range(20):
        node: int = generate_node(random.Random(seed))
        first_byte: int = node >> 40

        assert 0 <= node < 1 << 48
        assert first_byte & 0x02 == 0x02
        assert first_byte & 0x01 == 0


def test_generate_nonce_is_version_1_uuid() -> None:
    node: int = generate_node(random.Random(7))

    nonce = uuid.UUID(generate_nonce(NOW_NS, node, 0x2A5B))

    assert nonce.version == 1
    assert nonce.variant == uuid.RFC_4122
    assert nonce.node == node
    assert nonce.clock_seq == 0x2A5B
    assert nonce.time == NOW_NS // 100 + trans_youdao_module.UUID_EPOCH_OFFSET


def test_generate_nonce_known_value() -> None:
    assert generate_nonce(NOW_NS, 0x0A1B2C3D4E5F, 0x2A5B) == "04c29687-833b-11ee-aa5b-0a1b2c3d4e5f"


@pytest.mark.parametrize(
    ("query", "sign"),
    [
        ("hello", "2e29eae64ddb1e83521bfd8499020d804d15494ca062474bba2f412b1c9a40b1"),
        ("hellp", "6ddb6fd637b19045807c3f5cbb8d9c07b2da7459be85bfc467b6756b484cd436"),
        ("abcdefghijklmnopqrstuvwxyz", "a230a68afbdc5a1d6736528d007f76a91e0a2102c1b1d23f17e50b20fd0fc995"),
    ],
)
def test_build_form_known_signature(monkeypatch: pytest.MonkeyPatch, query: str, sign: str) -> None:
    monkeypatch.setattr(trans_youdao_module, "generate_nonce", lambda *_: NONCE)

    form = _engine(StubHttp()).build_form(query, "en", "zh-CHS")

    assert form.salt == NONCE
    assert form.curtime == "1700000000"
    assert form.sign == sign


def test_build_form_is_reproducible_and_signed() -> None:
    form = _engine(StubHttp(), seed=3).build_form("hello", "en", "zh-CHS")
    again = _engine(StubHttp(), seed=3).build_form("hello", "en", "zh-CHS")

    assert form.to_dict() == again.to_dict()
    assert form.curtime == "1700000000"
    assert form.sign == sha256_encode(f"{APP_KEY}hello{form.salt}{form.curtime}{APP_SECRET}")
    assert set(form.to_dict()) == {"q", "from", "to", "appKey", "salt", "sign", "curtime", "signType"}
    assert form.to_dict()["signType"] == "v3"


def test_build_form_signs_truncated_query() -> None:
    query: str = "abcdefghijklmnopqrstuvwxyz"

    form = _engine(StubHttp()).build_form(query, "en", "zh-CHS")

    assert form.q == query
    assert form.sign == sha256_encode(f"{APP_KEY}{truncate(query)}{form.salt}{form.curtime}{APP_SECRET}")


def test_missing_credentials_raise() -> None:
    with pytest.raises(MissingCredentialsError) as exc_info:
        YoudaoTranslation(APP_KEY, "", as_http(StubHttp()))

    assert exc_info.value.missing == ("app_secret",)


@pytest.mark.asyncio
async def test_translate_one_posts_signed_form() -> None:
    stub = StubHttp(_success("你好"))

    result = await _engine(stub).translate_one("hello", Language.CHINESE, Language.ENGLISH)

    assert result.text == "你好"
    assert result.lang == Language.CHINESE
    method, kwargs = stub.calls[0]
    assert method == "POST"
    assert kwargs["url"] == trans_youdao_module.YOUDAO_URL
    assert kwargs["data"]["from"] == "en"
    assert kwargs["data"]["to"] == "zh-CHS"
    assert kwargs["data"]["appKey"] == APP_KEY
    assert APP_SECRET not in kwargs["data"].values()


@pytest.mark.asyncio
async def test_translate_one_without_source_sends_auto() -> None:
    stub = StubHttp(_success("hello"))

    await _engine(stub).translate_one("你好", Language.ENGLISH)

    assert stub.calls[0][1]["data"]["from"] == "auto"


@pytest.mark.asyncio
async def test_classical_chinese_is_not_supported() -> None:
    stub = StubHttp()

    with pytest.raises(NotSupportedLanguagesError):
        await _engine(stub).translate_one("hello", Language.CLASSICAL_CHINESE)

    assert stub.calls == []


@pytest.mark.asyncio
async def test_translate_many_splits_on_newline() -> None:
    stub = StubHttp(_success("一\n二\n三"))

    result = await _engine(stub).translate_many(["one", "two", "three"], Language.CHINESE)

    assert result.text == ["一", "二", "三"]
    assert stub.calls[0][1]["data"]["q"] == "one\ntwo\nthree"


@pytest.mark.asyncio
async def test_translate_many_raises_when_segments_merge() -> None:
    stub = StubHttp(_success("一二"))

    with pytest.raises(BatchSplitError):
        await _engine(stub).translate_many(["one", "two"], Language.CHINESE)


@pytest.mark.asyncio
async def test_error_code_raises_provider_rejected() -> None:
    stub = StubHttp({"errorCode": "202"})

    with pytest.raises(ProviderRejectedError) as exc_info:
        await _engine(stub).translate_one("hello", Language.CHINESE)

    assert exc_info.value.code == "202"
    assert exc_info.value.message == trans_youdao_module.ERROR_MESSAGES["202"]


@pytest.mark.asyncio
async def test_unknown_error_code_uses_generic_message() -> None:
    stub = StubHttp({"errorCode": "999"})

    with pytest.raises(ProviderRejectedError) as exc_info:
        await _engine(stub).translate_one("hello", Language.CHINESE)

    assert exc_info.value.message == trans_youdao_module.GENERIC_ERROR


@pytest.mark.asyncio
async def test_missing_translation_raises_empty_result() -> None:
    stub = StubHttp({"errorCode": "0"})

    with pytest.raises(EmptyResultError):
        await _engine(stub).translate_one("hello", Language.CHINESE)
