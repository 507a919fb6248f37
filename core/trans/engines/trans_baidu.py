"""Baidu translation engine.

Form-encoded POST signed with ``md5(appid + q + salt + key)``. The MD5 digest is dictated by Baidu's
protocol. A response is either the success shape or the error shape; there is no discriminating
tag, so the success shape is tried first and the error shape is the fallback.
"""

from __future__ import annotations

import hashlib
import random
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Final

from core.trans.interface import (
    EmptyResultError,
    EngineAttributes,
    MissingCredentialsError,
    ProviderRejectedError,
    ResponseFormatError,
    TransInterface,
    TranslationQuotaExceededError,
    TranslationRateLimitError,
    UndecodableLanguageError,
)
from core.trans.languages import from_provider_code
from models.provider_models import BaiduErrorResponse, BaiduTranslateForm, BaiduTranslateResponse
from models.translation_models import ProviderKind, TranslationListOutput, TranslationOutput
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Mapping, Sequence

    from core.trans.languages import Language
    from handlers.async_comm import AsyncHttp

__all__: list[str] = ["BaiduTranslation", "make_sign", "solution"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

BAIDU_URL: Final[str] = "https://fanyi-api.baidu.com/api/trans/vip/translate"

# Remediation texts published with Baidu's error codes.
ERROR_SOLUTIONS: Final[Mapping[str, str]] = MappingProxyType({
    "52000": "Success.",
    "52001": "Request timed out. Retry the request.",
    "52002": "System error. Retry the request.",
    "52003": "Unauthorized user. Check that the appid is correct and that the service is enabled.",
    "54000": "A required parameter is empty. Check that all required parameters are sent.",
    "54001": "Signature error. Check how the signature is generated.",
    "54003": "Access frequency limited. Lower the call frequency, or upgrade after identity verification.",
    "54004": "Insufficient account balance. Top up in the management console.",
    "54005": "Long queries sent too frequently. Lower the frequency of long queries and retry after 3 seconds.",
    "58000": "Illegal client IP. Check the IP address registered in the developer information.",
    "58001": "Translation direction not supported. Check that the target language is in the language list.",
    "58002": "The service is offline. Enable it in the management console.",
    "58003": (
        "The IP sent requests with several APPIDs on the same day and is blocked until tomorrow. "
        "Do not enter your APPID and key into third-party software."
    ),
    "90107": "Authentication failed or expired. Check the authentication status.",
    "20003": "The request text appears to contain subversive, violent or similar content.",
})
UNKNOWN_ERROR: Final[str] = "Unknown error"

RATE_LIMIT_CODES: Final[frozenset[str]] = frozenset({"54003", "54005"})
QUOTA_CODES: Final[frozenset[str]] = frozenset({"54004"})

LINE_SEPARATOR: Final[str] = "\n"


def make_sign(appid: str, query: str, salt: str, key: str) -> str:
    """Compute the request signature: lowercase hex MD5 of appid, query, salt and key concatenated."""
    return hashlib.md5(f"{appid}{query}{salt}{key}".encode(), usedforsecurity=False).hexdigest()


def solution(code: str) -> str:
    """Return the published remediation text for an error code; unknown codes get a generic entry."""
    return ERROR_SOLUTIONS.get(code, UNKNOWN_ERROR)


class BaiduTranslation(TransInterface):
    """Baidu Translate (general text API).

    Multi-line queries come back as one ``trans_result`` entry per line, which is what batches rely on:
    texts are newline-joined, so a text that itself contains a newline cannot be batched.
    """

    def __init__(
        self,
        app_id: str,
        key: str,
        http: AsyncHttp | None = None,
        *,
        rng: random.Random | None = None,
    ) -> None:
        """Initialize the engine.

        Args:
            app_id (str): Baidu open platform APPID.
            key (str): Secret key paired with the APPID.
            http (AsyncHttp | None): HTTP client to use.
            rng (random.Random | None): Source of request salts. Tests pass a seeded instance.

        Raises:
            MissingCredentialsError: If either credential is empty.
        """
        missing: list[str] = [name for name, value in (("app_id", app_id), ("key", key)) if not value]
        if missing:
            raise MissingCredentialsError(ProviderKind.BAIDU, missing)
        super().__init__(EngineAttributes(name=ProviderKind.BAIDU), http)
        self.__app_id: str = app_id
        self.__key: str = key
        self._rng: random.Random = rng if rng is not None else random.Random()  # noqa: S311

    @staticmethod
    def fetch_engine_name() -> ProviderKind:
        return ProviderKind.BAIDU

    async def translate_one(
        self, content: str, tgt_lang: Language, src_lang: Language | None = None
    ) -> TranslationOutput:
        response, lang = await self._translate(content, tgt_lang, src_lang)
        return TranslationOutput(
            text=LINE_SEPARATOR.join(sentence.dst for sentence in response.trans_result),
            lang=lang,
            metadata={"engine": str(self.engine_name)},
        )

    async def translate_many(
        self, contents: Sequence[str], tgt_lang: Language, src_lang: Language | None = None
    ) -> TranslationListOutput:
        if not contents:
            return TranslationListOutput(text=[], lang=tgt_lang)
        response, lang = await self._translate(LINE_SEPARATOR.join(contents), tgt_lang, src_lang)
        texts: list[str] = [sentence.dst for sentence in response.trans_result]
        if len(texts) != len(contents):
            # only helps when a dst entry carries an embedded newline; raises if the count still differs
            texts = self._split_batch(LINE_SEPARATOR.join(texts), LINE_SEPARATOR, len(contents))
        return TranslationListOutput(text=texts, lang=lang, metadata={"engine": str(self.engine_name)})

    def build_form(self, query: str, src_code: str, tgt_code: str) -> BaiduTranslateForm:
        salt: str = str(self._rng.randint(32768, 65536))
        return BaiduTranslateForm(
            q=query,
            from_lang=src_code,
            to=tgt_code,
            appid=self.__app_id,
            salt=salt,
            sign=make_sign(self.__app_id, query, salt, self.__key),
        )

    async def _translate(
        self, query: str, tgt_lang: Language, src_lang: Language | None
    ) -> tuple[BaiduTranslateResponse, Language]:
        logger.debug("'content': '%s', 'src_lang': '%s', 'tgt_lang': '%s'", query, src_lang, tgt_lang)
        src_code: str = self._source_code(src_lang)
        tgt_code: str = self._target_code(tgt_lang)
        form: BaiduTranslateForm = self.build_form(query, src_code, tgt_code)

        data: Any = await self._call(self._http.post(url=BAIDU_URL, data=form.to_dict()))
        response: BaiduTranslateResponse = self.decode_response(data)
        if not response.trans_result:
            raise EmptyResultError(self.engine_name)

        lang: Language | None = from_provider_code(response.to, self.engine_name)
        if lang is None:
            raise UndecodableLanguageError(response.to, self.engine_name)
        logger.info("translation completed (%s > %s)", response.from_lang, response.to)
        return response, lang

    def decode_response(self, data: Any) -> BaiduTranslateResponse:
        """Decode a response body as the success shape, falling back to the error shape.

        Raises:
            ProviderRejectedError: If the body is the error shape (or one of its subclasses for
                rate-limit and balance codes).
            ResponseFormatError: If the body matches neither shape.
        """
        if not isinstance(data, dict):
            msg: str = f"Unexpected response from {self.engine_name}: {type(data).__name__}"
            raise ResponseFormatError(msg)

        try:
            response: BaiduTranslateResponse = BaiduTranslateResponse.from_dict(data)
        except (KeyError, TypeError, ValueError, AttributeError):
            logger.debug("Response is not the success shape, trying the error shape")
        else:
            if isinstance(response.to, str) and isinstance(response.trans_result, list):
                return response

        try:
            error: BaiduErrorResponse = BaiduErrorResponse.from_dict(data)
        except (KeyError, TypeError, ValueError, AttributeError) as err:
            msg = f"Unexpected response shape from {self.engine_name}"
            raise ResponseFormatError(msg) from err

        code: str = str(error.error_code)
        logger.error("Baidu API error [%s]: %s", code, error.error_msg)
        if code in RATE_LIMIT_CODES:
            raise TranslationRateLimitError(self.engine_name, code, solution(code))
        if code in QUOTA_CODES:
            raise TranslationQuotaExceededError(self.engine_name, code, solution(code))
        raise ProviderRejectedError(self.engine_name, code, solution(code))
