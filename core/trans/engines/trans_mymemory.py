"""MyMemory translation engine.

Unauthenticated URL-query GET against the public MyMemory endpoint. Requests are limited to 500 bytes;
the service has no list API, so batches are joined with a delimiter and split afterwards.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final

from core.trans.interface import (
    EmptyResultError,
    EngineAttributes,
    ProviderRejectedError,
    ResponseFormatError,
    TransInterface,
)
from models.provider_models import MyMemoryResponse
from models.translation_models import ProviderKind, TranslationOutput
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Sequence

    from core.trans.languages import Language
    from handlers.async_comm import AsyncHttp
    from models.translation_models import TranslationListOutput

__all__: list[str] = ["MyMemoryTranslation"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

MYMEMORY_URL: Final[str] = "https://api.mymemory.translated.net/get"
MYMEMORY_REFERER: Final[str] = "https://mymemory.translated.net"
INPUT_LIMIT: Final[int] = 500
BATCH_DELIMITER: Final[str] = "_._._"


class MyMemoryTranslation(TransInterface):
    def __init__(self, http: AsyncHttp | None = None) -> None:
        super().__init__(EngineAttributes(name=ProviderKind.MYMEMORY, input_limit=INPUT_LIMIT), http)

    @staticmethod
    def fetch_engine_name() -> ProviderKind:
        return ProviderKind.MYMEMORY

    async def translate_one(
        self, content: str, tgt_lang: Language, src_lang: Language | None = None
    ) -> TranslationOutput:
        logger.debug("'content': '%s', 'src_lang': '%s', 'tgt_lang': '%s'", content, src_lang, tgt_lang)
        self._check_input_limit(content)
        src_code: str = self._source_code(src_lang)
        tgt_code: str = self._target_code(tgt_lang)

        data: Any = await self._call(
            self._http.get(
                url=MYMEMORY_URL,
                params={"q": content, "langpair": f"{src_code}|{tgt_code}"},
                headers={"Referer": MYMEMORY_REFERER},
            )
        )
        text: str = self._extract_text(data)
        logger.info("translation completed (%s > %s)", src_code, tgt_code)
        return TranslationOutput(text=text, lang=tgt_lang, metadata={"engine": str(self.engine_name)})

    async def translate_many(
        self, contents: Sequence[str], tgt_lang: Language, src_lang: Language | None = None
    ) -> TranslationListOutput:
        return await self._translate_joined(contents, tgt_lang, src_lang, BATCH_DELIMITER)

    def _extract_text(self, data: Any) -> str:
        if not isinstance(data, dict):
            msg: str = f"Unexpected response from {self.engine_name}: {type(data).__name__}"
            raise ResponseFormatError(msg)
        try:
            response: MyMemoryResponse = MyMemoryResponse.from_dict(data)
        except (KeyError, TypeError, ValueError, AttributeError) as err:
            msg = f"Unexpected response shape from {self.engine_name}"
            raise ResponseFormatError(msg) from err

        if response.response_status is not None and str(response.response_status) != "200":
            raise ProviderRejectedError(
                self.engine_name, str(response.response_status), response.response_details or "Unknown error"
            )
        if response.response_data is None or response.response_data.translated_text is None:
            raise EmptyResultError(self.engine_name)
        return response.response_data.translated_text
