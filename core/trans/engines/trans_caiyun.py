"""Caiyun (LingoCloud) translation engine.

JSON POST authenticated with a token header. The only provider here with a native list API, so batches
go out as one request without joining.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final

from core.trans.interface import (
    BatchSplitError,
    EmptyResultError,
    EngineAttributes,
    MissingCredentialsError,
    ProviderRejectedError,
    ResponseFormatError,
    TransInterface,
)
from models.provider_models import CaiyunRequest, CaiyunResponse
from models.translation_models import ProviderKind, TranslationListOutput, TranslationOutput
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Sequence

    from core.trans.languages import Language
    from handlers.async_comm import AsyncHttp

__all__: list[str] = ["CaiyunTranslation"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

CAIYUN_URL: Final[str] = "https://api.interpreter.caiyunai.com/v1/translator"
DEFAULT_REQUEST_ID: Final[str] = "demo"


class CaiyunTranslation(TransInterface):
    def __init__(self, token: str, request_id: str = DEFAULT_REQUEST_ID, http: AsyncHttp | None = None) -> None:
        """Initialize the engine.

        Args:
            token (str): API access token.
            request_id (str): Caller identifier sent with each request.
            http (AsyncHttp | None): HTTP client to use.

        Raises:
            MissingCredentialsError: If the token is empty.
        """
        if not token:
            raise MissingCredentialsError(ProviderKind.CAIYUN, ["token"])
        super().__init__(EngineAttributes(name=ProviderKind.CAIYUN, supports_native_batch=True), http)
        self.__token: str = token
        self._request_id: str = request_id or DEFAULT_REQUEST_ID

    @staticmethod
    def fetch_engine_name() -> ProviderKind:
        return ProviderKind.CAIYUN

    async def translate_one(
        self, content: str, tgt_lang: Language, src_lang: Language | None = None
    ) -> TranslationOutput:
        texts: list[str] = await self._translate([content], tgt_lang, src_lang)
        return TranslationOutput(text=texts[0], lang=tgt_lang, metadata={"engine": str(self.engine_name)})

    async def translate_many(
        self, contents: Sequence[str], tgt_lang: Language, src_lang: Language | None = None
    ) -> TranslationListOutput:
        if not contents:
            return TranslationListOutput(text=[], lang=tgt_lang)
        texts: list[str] = await self._translate(list(contents), tgt_lang, src_lang)
        return TranslationListOutput(text=texts, lang=tgt_lang, metadata={"engine": str(self.engine_name)})

    def build_request(self, source: list[str], tgt_lang: Language, src_lang: Language | None) -> CaiyunRequest:
        """Build the request body. ``detect`` is set only when the source language is left to the service."""
        src_code: str = self._source_code(src_lang)
        tgt_code: str = self._target_code(tgt_lang)
        return CaiyunRequest(
            trans_type=f"{src_code}2{tgt_code}",
            source=source,
            request_id=self._request_id,
            detect=True if src_lang is None else None,
        )

    async def _translate(self, source: list[str], tgt_lang: Language, src_lang: Language | None) -> list[str]:
        logger.debug("'content': '%s', 'src_lang': '%s', 'tgt_lang': '%s'", source, src_lang, tgt_lang)
        body: CaiyunRequest = self.build_request(source, tgt_lang, src_lang)
        headers: dict[str, str] = {
            "content-type": "application/json",
            "x-authorization": f"token {self.__token}",
        }

        data: Any = await self._call(self._http.post(url=CAIYUN_URL, json_body=body.to_dict(), headers=headers))
        if not isinstance(data, dict):
            msg: str = f"Unexpected response from {self.engine_name}: {type(data).__name__}"
            raise ResponseFormatError(msg)
        try:
            response: CaiyunResponse = CaiyunResponse.from_dict(data)
        except (KeyError, TypeError, ValueError, AttributeError) as err:
            msg = f"Unexpected response shape from {self.engine_name}"
            raise ResponseFormatError(msg) from err

        if response.target is None:
            if response.message:
                logger.error("Caiyun API error: %s", response.message)
                raise ProviderRejectedError(self.engine_name, "message", response.message)
            raise EmptyResultError(self.engine_name)
        if len(response.target) != len(source):
            raise BatchSplitError(len(source), len(response.target))

        logger.info("translation completed (%s)", body.trans_type)
        return list(response.target)
