"""Alibaba translation engine.

Uses the unauthenticated web endpoint of Alibaba Translate. Same 500-byte limit and null-result handling
as MyMemory; only the host, the query parameter names and the language vocabulary differ.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final

from core.trans.interface import EmptyResultError, EngineAttributes, ResponseFormatError, TransInterface
from models.provider_models import AlibabaResponse
from models.translation_models import ProviderKind, TranslationOutput
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Sequence

    from core.trans.languages import Language
    from handlers.async_comm import AsyncHttp
    from models.translation_models import TranslationListOutput

__all__: list[str] = ["AlibabaTranslation"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

ALIBABA_URL: Final[str] = "https://translate.alibaba.com/api/translate/text"
ALIBABA_DOMAIN: Final[str] = "general"
INPUT_LIMIT: Final[int] = 500
BATCH_DELIMITER: Final[str] = "_._._"


class AlibabaTranslation(TransInterface):
    def __init__(self, http: AsyncHttp | None = None) -> None:
        super().__init__(EngineAttributes(name=ProviderKind.ALIBABA, input_limit=INPUT_LIMIT), http)

    @staticmethod
    def fetch_engine_name() -> ProviderKind:
        return ProviderKind.ALIBABA

    async def translate_one(
        self, content: str, tgt_lang: Language, src_lang: Language | None = None
    ) -> TranslationOutput:
        logger.debug("'content': '%s', 'src_lang': '%s', 'tgt_lang': '%s'", content, src_lang, tgt_lang)
        self._check_input_limit(content)
        src_code: str = self._source_code(src_lang)
        tgt_code: str = self._target_code(tgt_lang)

        data: Any = await self._call(
            self._http.get(
                url=ALIBABA_URL,
                params={"domain": ALIBABA_DOMAIN, "query": content, "srcLang": src_code, "tgtLang": tgt_code},
            )
        )
        if not isinstance(data, dict):
            msg: str = f"Unexpected response from {self.engine_name}: {type(data).__name__}"
            raise ResponseFormatError(msg)
        try:
            response: AlibabaResponse = AlibabaResponse.from_dict(data)
        except (KeyError, TypeError, ValueError, AttributeError) as err:
            msg = f"Unexpected response shape from {self.engine_name}"
            raise ResponseFormatError(msg) from err

        if response.data is None or response.data.translate_text is None:
            raise EmptyResultError(self.engine_name)

        logger.info("translation completed (%s > %s)", src_code, tgt_code)
        return TranslationOutput(
            text=response.data.translate_text, lang=tgt_lang, metadata={"engine": str(self.engine_name)}
        )

    async def translate_many(
        self, contents: Sequence[str], tgt_lang: Language, src_lang: Language | None = None
    ) -> TranslationListOutput:
        return await self._translate_joined(contents, tgt_lang, src_lang, BATCH_DELIMITER)
