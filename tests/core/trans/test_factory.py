from __future__ import annotations

import pytest

from core.trans.engines import (
    AlibabaTranslation,
    BaiduTranslation,
    CaiyunTranslation,
    MyMemoryTranslation,
    YoudaoTranslation,
)
from core.trans.factory import TranslatorFactory
from core.trans.interface import MissingCredentialsError, UnrecognizedProviderError
from models.config_models import Config
from models.translation_models import ProviderKind
from tests.stub_http import StubHttp, as_http

ENV_NAMES: tuple[str, ...] = (
    "BAIDU_APP_ID",
    "BAIDU_KEY",
    "YOUDAO_APP_KEY",
    "YOUDAO_APP_SECRET",
    "CAIYUN_TOKEN",
    "CAIYUN_REQUEST_ID",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ENV_NAMES:
        monkeypatch.delenv(name, raising=False)


@pytest.mark.parametrize(
    ("name", "credentials", "engine_type"),
    [
        ("baidu", {"app_id": "id", "key": "secret"}, BaiduTranslation),
        ("Youdao", {"app_key": "id", "app_secret": "secret"}, YoudaoTranslation),
        ("彩云", {"token": "secret"}, CaiyunTranslation),
        (" My Memory ", None, MyMemoryTranslation),
        ("ali", None, AlibabaTranslation),
        (ProviderKind.ALIBABA, None, AlibabaTranslation),
    ],
)
def test_create_returns_engine_for_provider(
    name: ProviderKind | str, credentials: dict[str, str] | None, engine_type: type
) -> None:
    engine = TranslatorFactory.create(name, credentials, http=as_http(StubHttp()))

    assert isinstance(engine, engine_type)


def test_create_rejects_unknown_provider() -> None:
    with pytest.raises(UnrecognizedProviderError) as exc_info:
        TranslatorFactory.create("google")

    assert exc_info.value.name == "google"


def test_create_reports_missing_fields_without_values() -> None:
    with pytest.raises(MissingCredentialsError) as exc_info:
        TranslatorFactory.create("baidu", {"app_id": "my-app-id", "key": ""})

    assert exc_info.value.provider == ProviderKind.BAIDU
    assert exc_info.value.missing == ("key",)
    assert "my-app-id" not in str(exc_info.value)


def test_create_passes_timeout_to_new_client() -> None:
    engine = TranslatorFactory.create(ProviderKind.MYMEMORY, timeout=3.5)

    assert engine._http.total_timeout == 3.5


def test_create_keeps_injected_client() -> None:
    stub = StubHttp()

    engine = TranslatorFactory.create(ProviderKind.MYMEMORY, http=as_http(stub))

    assert engine._http is stub


def test_create_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CAIYUN_TOKEN", "env-token")

    engine = TranslatorFactory.create_from_env("caiyun", http=as_http(StubHttp()))

    assert isinstance(engine, CaiyunTranslation)
    assert engine._request_id == "demo"


def test_create_from_env_reads_request_id(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CAIYUN_TOKEN", "env-token")
    monkeypatch.setenv("CAIYUN_REQUEST_ID", "my-app")

    engine = TranslatorFactory.create_from_env("caiyun", http=as_http(StubHttp()))

    assert isinstance(engine, CaiyunTranslation)
    assert engine._request_id == "my-app"


def test_create_from_env_missing_variables() -> None:
    with pytest.raises(MissingCredentialsError) as exc_info:
        TranslatorFactory.create_from_env("youdao")

    assert exc_info.value.missing == ("app_key", "app_secret")


def test_create_from_config_uses_section_credentials() -> None:
    config = Config()
    config.TRANSLATION.PROVIDER = "youdao"
    config.TRANSLATION.TIMEOUT = 4.0
    config.YOUDAO.APP_KEY = "cfg-key"
    config.YOUDAO.APP_SECRET = "cfg-secret"

    engine = TranslatorFactory.create_from_config(config)

    assert isinstance(engine, YoudaoTranslation)
    assert engine._http.total_timeout == 4.0


def test_create_from_config_falls_back_to_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BAIDU_KEY", "env-key")
    config = Config()
    config.TRANSLATION.PROVIDER = "baidu"
    config.BAIDU.APP_ID = "cfg-id"

    engine = TranslatorFactory.create_from_config(config, http=as_http(StubHttp()))

    assert isinstance(engine, BaiduTranslation)


def test_create_from_config_without_credentials_raises() -> None:
    config = Config()
    config.TRANSLATION.PROVIDER = "baidu"

    with pytest.raises(MissingCredentialsError):
        TranslatorFactory.create_from_config(config)
