from __future__ import annotations

import hashlib
import logging
import random
from typing import Any

import pytest

from core.trans.engines import trans_baidu as trans_baidu_module
from core.trans.engines.trans_baidu import BaiduTranslation, make_sign, solution
from core.trans.interface import (
    BatchSplitError,
    EmptyResultError,
    MissingCredentialsError,
    NotSupportedLanguagesError,
    ProviderRejectedError,
    ResponseFormatError,
    TranslationQuotaExceededError,
    TranslationRateLimitError,
    TranslationTransportError,
    UndecodableLanguageError,
)
from core.trans.languages import Language
from handlers.async_comm import AsyncCommError
from models.translation_models import ProviderKind
from tests.stub_http import StubHttp, as_http

APP_ID = "20240101000000001"
KEY = "baidu-secret-key"


def _engine(stub: StubHttp, seed: int = 0) -> BaiduTranslation:
    return BaiduTranslation(APP_ID, KEY, as_http(stub), rng=random.Random(seed))


def _success(*pairs: tuple[str, str], src: str = "en", dst: str = "zh") -> dict[str, Any]:
    return {"from": src, "to": dst, "trans_result": [{"src": s, "dst": d} for s, d in pairs]}


def test_make_sign_is_lowercase_md5_of_concatenation() -> None:
    expected: str = hashlib.md5(f"{APP_ID}apple1435660288{KEY}".encode()).hexdigest()  # noqa: S324

    assert make_sign(APP_ID, "apple", "1435660288", KEY) == expected
    assert make_sign(APP_ID, "apple", "1435660288", KEY) == make_sign(APP_ID, "apple", "1435660288", KEY)


def test_make_sign_changes_with_every_input() -> None:
    base: str = make_sign(APP_ID, "apple", "1435660288", KEY)

    assert make_sign(APP_ID + "0", "apple", "1435660288", KEY) != base
    assert make_sign(APP_ID, "apples", "1435660288", KEY) != base
    assert make_sign(APP_ID, "apple", "1435660289", KEY) != base
    assert make_sign(APP_ID, "apple", "1435660288", KEY + "x") != base


def test_solution_falls_back_for_unknown_codes() -> None:
    assert "Signature" in solution("54001")
    assert solution("99999") == "Unknown error"


@pytest.mark.parametrize(
    ("app_id", "key", "missing"),
    [("", KEY, ("app_id",)), (APP_ID, "", ("key",)), ("", "", ("app_id", "key"))],
)
def test_missing_credentials_raise_before_io(app_id: str, key: str, missing: tuple[str, ...]) -> None:
    with pytest.raises(MissingCredentialsError) as exc_info:
        BaiduTranslation(app_id, key, as_http(StubHttp()))

    assert exc_info.value.missing == missing
    assert KEY not in str(exc_info.value)


def test_engine_attributes_and_repr_hide_credentials() -> None:
    engine: BaiduTranslation = _engine(StubHttp())

    assert engine.engine_name == ProviderKind.BAIDU
    assert engine.engine_attributes.supports_native_batch is False
    assert engine.is_local() is False
    assert KEY not in repr(engine)
    assert APP_ID not in repr(engine)


def test_build_form_uses_seeded_salt_and_signature() -> None:
    engine: BaiduTranslation = _engine(StubHttp(), seed=42)
    expected_salt: str = str(random.Random(42).randint(32768, 65536))

    form = engine.build_form("apple", "en", "zh")

    assert form.salt == expected_salt
    assert form.sign == make_sign(APP_ID, "apple", expected_salt, KEY)
    assert form.to_dict() == {
        "q": "apple",
        "from": "en",
        "to": "zh",
        "appid": APP_ID,
        "salt": expected_salt,
        "sign": form.sign,
    }
    assert form.sign not in repr(form)


@pytest.mark.asyncio
async def test_translate_one_posts_form_and_decodes_target_language() -> None:
    stub = StubHttp(_success(("apple", "苹果")))
    engine: BaiduTranslation = _engine(stub)

    result = await engine.translate_one("apple", Language.CHINESE, Language.ENGLISH)

    assert result.text == "苹果"
    assert result.lang == Language.CHINESE
    assert result.metadata == {"engine": "baidu"}
    method, kwargs = stub.calls[0]
    assert method == "POST"
    assert kwargs["url"] == trans_baidu_module.BAIDU_URL
    assert kwargs["data"]["from"] == "en"
    assert kwargs["data"]["to"] == "zh"


@pytest.mark.asyncio
async def test_translate_one_without_source_sends_auto() -> None:
    stub = StubHttp(_success(("りんご", "apple"), src="jp", dst="en"))
    engine: BaiduTranslation = _engine(stub)

    result = await engine.translate_one("りんご", Language.ENGLISH)

    assert result.text == "apple"
    assert stub.calls[0][1]["data"]["from"] == "auto"


@pytest.mark.asyncio
async def test_translate_one_joins_multiline_results() -> None:
    stub = StubHttp(_success(("one", "一"), ("two", "二")))

    result = await _engine(stub).translate_one("one\ntwo", Language.CHINESE)

    assert result.text == "一\n二"


@pytest.mark.asyncio
async def test_translate_one_rejects_unsupported_language_without_request() -> None:
    stub = StubHttp()

    with pytest.raises(NotSupportedLanguagesError) as exc_info:
        await _engine(stub).translate_one("Salem", Language.ENGLISH, Language.KAZAKH)

    assert exc_info.value.language == Language.KAZAKH
    assert stub.calls == []


@pytest.mark.asyncio
async def test_undecodable_target_code_raises() -> None:
    stub = StubHttp(_success(("apple", "?"), dst="xyz"))

    with pytest.raises(UndecodableLanguageError) as exc_info:
        await _engine(stub).translate_one("apple", Language.CHINESE)

    assert exc_info.value.code == "xyz"


@pytest.mark.asyncio
async def test_translate_many_preserves_count_and_order() -> None:
    stub = StubHttp(_success(("one", "一"), ("two", "二"), ("three", "三")))

    result = await _engine(stub).translate_many(["one", "two", "three"], Language.CHINESE, Language.ENGLISH)

    assert result.text == ["一", "二", "三"]
    assert len(result) == 3
    assert stub.calls[0][1]["data"]["q"] == "one\ntwo\nthree"


@pytest.mark.asyncio
async def test_translate_many_empty_input_makes_no_request() -> None:
    stub = StubHttp()

    result = await _engine(stub).translate_many([], Language.CHINESE)

    assert result.text == []
    assert stub.calls == []


@pytest.mark.asyncio
async def test_translate_many_raises_on_count_mismatch() -> None:
    stub = StubHttp(_success(("one two", "一二")))

    with pytest.raises(BatchSplitError) as exc_info:
        await _engine(stub).translate_many(["one", "two"], Language.CHINESE)

    assert exc_info.value.expected == 2
    assert exc_info.value.actual == 1


@pytest.mark.asyncio
async def test_translate_many_resplits_embedded_newline() -> None:
    stub = StubHttp(_success(("one\ntwo", "一\n二")))

    result = await _engine(stub).translate_many(["one", "two"], Language.CHINESE)

    assert result.text == ["一", "二"]


@pytest.mark.asyncio
async def test_translate_one_empty_trans_result_raises() -> None:
    stub = StubHttp({"from": "en", "to": "zh", "trans_result": []})

    with pytest.raises(EmptyResultError) as exc_info:
        await _engine(stub).translate_one("hello", Language.CHINESE)

    assert exc_info.value.provider == ProviderKind.BAIDU


@pytest.mark.asyncio
async def test_translate_many_empty_trans_result_raises() -> None:
    stub = StubHttp({"from": "en", "to": "zh", "trans_result": []})

    with pytest.raises(EmptyResultError):
        await _engine(stub).translate_many(["hello"], Language.CHINESE)


@pytest.mark.asyncio
async def test_error_shape_raises_provider_rejected_with_remediation() -> None:
    stub = StubHttp({"error_code": "54001", "error_msg": "Invalid Sign"})

    with pytest.raises(ProviderRejectedError) as exc_info:
        await _engine(stub).translate_one("apple", Language.CHINESE)

    assert exc_info.value.code == "54001"
    assert exc_info.value.message == solution("54001")
    assert exc_info.value.provider == ProviderKind.BAIDU


@pytest.mark.asyncio
async def test_unknown_error_code_maps_to_generic_message() -> None:
    stub = StubHttp({"error_code": "12345", "error_msg": "???"})

    with pytest.raises(ProviderRejectedError) as exc_info:
        await _engine(stub).translate_one("apple", Language.CHINESE)

    assert exc_info.value.message == "Unknown error"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("code", "error_type"),
    [
        ("54003", TranslationRateLimitError),
        ("54005", TranslationRateLimitError),
        ("54004", TranslationQuotaExceededError),
    ],
)
async def test_rate_and_quota_codes_raise_subclasses(code: str, error_type: type[ProviderRejectedError]) -> None:
    stub = StubHttp({"error_code": code, "error_msg": ""})

    with pytest.raises(error_type):
        await _engine(stub).translate_one("apple", Language.CHINESE)


@pytest.mark.asyncio
@pytest.mark.parametrize("payload", [{"unexpected": True}, ["not", "a", "dict"], None])
async def test_unrecognized_body_raises_response_format_error(payload: Any) -> None:
    with pytest.raises(ResponseFormatError):
        await _engine(StubHttp(payload)).translate_one("apple", Language.CHINESE)


@pytest.mark.asyncio
async def test_transport_failure_is_wrapped() -> None:
    error = AsyncCommError("The server could not be reached.")

    with pytest.raises(TranslationTransportError) as exc_info:
        await _engine(StubHttp(error)).translate_one("apple", Language.CHINESE)

    assert exc_info.value.__cause__ is error


@pytest.mark.asyncio
async def test_credentials_never_logged(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG)
    stub = StubHttp({"error_code": "54001", "error_msg": "Invalid Sign"})

    with pytest.raises(ProviderRejectedError):
        await _engine(stub).translate_one("apple", Language.CHINESE)

    assert KEY not in caplog.text
    assert stub.calls[0][1]["data"]["sign"] not in caplog.text
