"""Construction of translation engines from a provider name and credentials.

Engines register themselves with ``TransInterface`` when their module is imported; the factory
looks them up there, checks the credentials the provider needs, and hands the engine an HTTP
client configured with the caller's timeout.
"""

from __future__ import annotations

import os
from dataclasses import fields
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Final

from core.trans.engines import (
    AlibabaTranslation,  # noqa: F401
    BaiduTranslation,  # noqa: F401
    CaiyunTranslation,  # noqa: F401
    MyMemoryTranslation,  # noqa: F401
    YoudaoTranslation,  # noqa: F401
)
from core.trans.interface import MissingCredentialsError, TransInterface, UnrecognizedProviderError
from handlers.async_comm import DEFAULT_TIMEOUT, AsyncHttp
from models.translation_models import ProviderKind
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Mapping

    from models.config_models import Config

__all__: list[str] = ["TranslatorFactory"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

REQUIRED_CREDENTIALS: Final[Mapping[ProviderKind, tuple[str, ...]]] = MappingProxyType({
    ProviderKind.BAIDU: ("app_id", "key"),
    ProviderKind.YOUDAO: ("app_key", "app_secret"),
    ProviderKind.CAIYUN: ("token",),
    ProviderKind.MYMEMORY: (),
    ProviderKind.ALIBABA: (),
})
OPTIONAL_CREDENTIALS: Final[Mapping[ProviderKind, tuple[str, ...]]] = MappingProxyType({
    ProviderKind.CAIYUN: ("request_id",),
})

ENV_VARIABLES: Final[Mapping[ProviderKind, Mapping[str, str]]] = MappingProxyType({
    ProviderKind.BAIDU: {"app_id": "BAIDU_APP_ID", "key": "BAIDU_KEY"},
    ProviderKind.YOUDAO: {"app_key": "YOUDAO_APP_KEY", "app_secret": "YOUDAO_APP_SECRET"},
    ProviderKind.CAIYUN: {"token": "CAIYUN_TOKEN", "request_id": "CAIYUN_REQUEST_ID"},
})
ENV_DEFAULTS: Final[Mapping[str, str]] = MappingProxyType({"CAIYUN_REQUEST_ID": "demo"})


class TranslatorFactory:
    """Builds one translation engine per call, hidden behind ``TransInterface``."""

    @staticmethod
    def resolve_kind(kind: ProviderKind | str) -> ProviderKind:
        """Resolve a provider kind or a provider name/alias.

        Raises:
            UnrecognizedProviderError: If the name matches no provider.
        """
        if isinstance(kind, ProviderKind):
            return kind
        resolved: ProviderKind | None = ProviderKind.parse(kind)
        if resolved is None:
            raise UnrecognizedProviderError(kind)
        return resolved

    @classmethod
    def create(
        cls,
        kind: ProviderKind | str,
        credentials: Mapping[str, str] | None = None,
        *,
        http: AsyncHttp | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> TransInterface:
        """Create an engine for the given provider.

        Credentials are validated before anything touches the network; the error names the missing
        fields only.

        Args:
            kind (ProviderKind | str): Provider, or a provider name such as "baidu" or "彩云".
            credentials (Mapping[str, str] | None): Credential fields the provider needs, e.g.
                ``{"app_id": ..., "key": ...}`` for Baidu. Ignored by providers without authentication.
            http (AsyncHttp | None): HTTP client to use. If omitted, one is created with ``timeout``.
            timeout (float): Total request timeout in seconds for a newly created client.

        Returns:
            TransInterface: The engine.

        Raises:
            UnrecognizedProviderError: If the provider name is unknown.
            MissingCredentialsError: If a required credential is absent or empty.
        """
        provider: ProviderKind = cls.resolve_kind(kind)
        credentials = credentials or {}

        required: tuple[str, ...] = REQUIRED_CREDENTIALS[provider]
        missing: list[str] = [name for name in required if not credentials.get(name)]
        if missing:
            raise MissingCredentialsError(provider, missing)

        kwargs: dict[str, Any] = {name: credentials[name] for name in required}
        kwargs.update(
            {name: credentials[name] for name in OPTIONAL_CREDENTIALS.get(provider, ()) if credentials.get(name)}
        )

        engine_class: type[TransInterface] = TransInterface.registered[provider]
        logger.debug("Creating '%s' engine (%s)", provider, engine_class.__name__)
        return engine_class(**kwargs, http=http if http is not None else AsyncHttp(total_timeout=timeout))

    @classmethod
    def create_from_env(
        cls, kind: ProviderKind | str, *, http: AsyncHttp | None = None, timeout: float = DEFAULT_TIMEOUT
    ) -> TransInterface:
        """Create an engine with credentials read from the environment.

        Raises:
            UnrecognizedProviderError: If the provider name is unknown.
            MissingCredentialsError: If a required variable is unset or empty.
        """
        provider: ProviderKind = cls.resolve_kind(kind)
        return cls.create(provider, cls.credentials_from_env(provider), http=http, timeout=timeout)

    @classmethod
    def create_from_config(cls, config: Config, *, http: AsyncHttp | None = None) -> TransInterface:
        """Create the engine selected by ``[TRANSLATION] PROVIDER``.

        Credentials come from the provider's own section; empty ones fall back to the environment.

        Raises:
            UnrecognizedProviderError: If the configured provider is unknown.
            MissingCredentialsError: If a required credential is set in neither place.
        """
        provider: ProviderKind = cls.resolve_kind(config.TRANSLATION.PROVIDER)
        credentials: dict[str, str] = cls.credentials_from_env(provider)

        section: Any = getattr(config, provider.upper(), None)
        if section is not None:
            for key in fields(section):
                value: str = getattr(section, key.name)
                if value:
                    credentials[key.name.lower()] = value

        return cls.create(provider, credentials, http=http, timeout=config.TRANSLATION.TIMEOUT)

    @staticmethod
    def credentials_from_env(provider: ProviderKind) -> dict[str, str]:
        credentials: dict[str, str] = {}
        for name, variable in ENV_VARIABLES.get(provider, {}).items():
            value: str = os.environ.get(variable, ENV_DEFAULTS.get(variable, ""))
            if value:
                credentials[name] = value
        return credentials
