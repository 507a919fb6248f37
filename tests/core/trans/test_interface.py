from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import aiohttp
import pytest

import core.trans.engines  # noqa: F401
from core.trans.interface import (
    BatchSplitError,
    EngineAttributes,
    ProviderRejectedError,
    ResponseFormatError,
    TransInterface,
    TranslateExceptionError,
    TranslationQuotaExceededError,
    TranslationRateLimitError,
    TranslationTransportError,
)
from core.trans.languages import Language
from handlers.async_comm import AsyncCommError, AsyncCommInvalidContentTypeError
from models.translation_models import ProviderKind, TranslationListOutput, TranslationOutput
from tests.stub_http import StubHttp, as_http

if TYPE_CHECKING:
    from collections.abc import Sequence


class EchoEngine(TransInterface):
    """Unregistered engine that echoes its input, optionally rewriting it first."""

    def __init__(self, http: StubHttp, rewrite: dict[str, str] | None = None) -> None:
        super().__init__(EngineAttributes(name=ProviderKind.MYMEMORY, input_limit=10), as_http(http))
        self.rewrite: dict[str, str] = rewrite or {}
        self.requests: list[str] = []

    async def translate_one(
        self, content: str, tgt_lang: Language, src_lang: Language | None = None
    ) -> TranslationOutput:
        self.requests.append(content)
        return TranslationOutput(text=self.rewrite.get(content, content.upper()), lang=tgt_lang)

    async def translate_many(
        self, contents: Sequence[str], tgt_lang: Language, src_lang: Language | None = None
    ) -> TranslationListOutput:
        return await self._translate_joined(contents, tgt_lang, src_lang, "|")


def test_every_provider_is_registered() -> None:
    assert set(TransInterface.registered) == set(ProviderKind)
    assert EchoEngine not in TransInterface.registered.values()


def test_duplicate_registration_raises() -> None:
    with pytest.raises(ValueError, match="already registered"):

        class _Duplicate(EchoEngine):
            @staticmethod
            def fetch_engine_name() -> ProviderKind:
                return ProviderKind.BAIDU


def test_error_hierarchy() -> None:
    assert issubclass(TranslationRateLimitError, ProviderRejectedError)
    assert issubclass(TranslationQuotaExceededError, ProviderRejectedError)
    assert issubclass(ProviderRejectedError, TranslateExceptionError)
    assert issubclass(TranslationTransportError, TranslateExceptionError)

    err = ProviderRejectedError(ProviderKind.BAIDU, "54001", "Signature error.")
    assert str(err) == "baidu API error [54001]: Signature error."


def test_input_limit_counts_utf8_bytes() -> None:
    engine = EchoEngine(StubHttp())

    engine._check_input_limit("a" * 10)
    with pytest.raises(TranslateExceptionError):
        engine._check_input_limit("你" * 4)


def test_source_code_uses_auto_detect_only_when_absent() -> None:
    engine = EchoEngine(StubHttp())

    assert engine._source_code(None) == "Autodetect"
    assert engine._source_code(Language.ENGLISH) == "en-GB"


@pytest.mark.asyncio
async def test_translate_joined_preserves_order() -> None:
    engine = EchoEngine(StubHttp())

    result = await engine.translate_many(["a", "b", "c"], Language.ENGLISH)

    assert result.text == ["A", "B", "C"]
    assert engine.requests == ["a|b|c"]


@pytest.mark.asyncio
async def test_translate_joined_empty_input_skips_request() -> None:
    engine = EchoEngine(StubHttp())

    result = await engine.translate_many([], Language.ENGLISH)

    assert result.text == []
    assert engine.requests == []


@pytest.mark.asyncio
async def test_translate_joined_raises_on_lost_delimiter() -> None:
    engine = EchoEngine(StubHttp(), rewrite={"a|b": "A B"})

    with pytest.raises(BatchSplitError) as exc_info:
        await engine.translate_many(["a", "b"], Language.ENGLISH)

    assert (exc_info.value.expected, exc_info.value.actual) == (2, 1)


@pytest.mark.asyncio
async def test_call_maps_transport_errors(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.ERROR)
    response_error = aiohttp.ClientResponseError(None, (), status=503)  # type: ignore[arg-type]
    cause = AsyncCommError("Error response from the server.", response=response_error)
    engine = EchoEngine(StubHttp(cause))

    with pytest.raises(TranslationTransportError) as exc_info:
        await engine._call(engine._http.get(url="https://example.invalid"))

    assert exc_info.value.status == 503
    assert exc_info.value.__cause__ is cause
    assert "mymemory" in caplog.text


@pytest.mark.asyncio
async def test_call_maps_undecodable_body() -> None:
    engine = EchoEngine(StubHttp(AsyncCommInvalidContentTypeError("Unknown Content-Type 'image/png'")))

    with pytest.raises(ResponseFormatError):
        await engine._call(engine._http.get(url="https://example.invalid"))


@pytest.mark.asyncio
async def test_context_manager_closes_http() -> None:
    stub = StubHttp()

    async with EchoEngine(stub) as engine:
        assert engine.is_local() is False

    assert stub.closed is True
