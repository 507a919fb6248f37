"""Youdao translation engine.

Form-encoded POST signed with the v3 scheme:
``sha256(appKey + truncate(q) + salt + curtime + appSecret)``, where ``salt`` is a version-1 UUID.
The UUID is assembled here from an injectable clock and random source, so a request is fully
reproducible in tests.
"""

from __future__ import annotations

import hashlib
import random
import time
import uuid
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Final

from core.trans.interface import (
    EmptyResultError,
    EngineAttributes,
    MissingCredentialsError,
    ProviderRejectedError,
    ResponseFormatError,
    TransInterface,
)
from models.provider_models import YoudaoResponse, YoudaoTranslateForm
from models.translation_models import ProviderKind, TranslationListOutput, TranslationOutput
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Callable, Mapping, Sequence

    from core.trans.languages import Language
    from handlers.async_comm import AsyncHttp

__all__: list[str] = ["YoudaoTranslation", "generate_nonce", "generate_node", "sha256_encode", "truncate"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

YOUDAO_URL: Final[str] = "https://openapi.youdao.com/api"
SEGMENT_SEPARATOR: Final[str] = "\n"

# 100-ns intervals between the Gregorian reform (1582-10-15) and the Unix epoch
UUID_EPOCH_OFFSET: Final[int] = 0x01B21DD213814000

ERROR_MESSAGES: Final[Mapping[str, str]] = MappingProxyType({
    "101": "Missing required parameter.",
    "102": "Unsupported language type.",
    "103": "Translation text is too long.",
    "108": "Invalid application ID.",
    "110": "No valid instance is bound to the application.",
    "202": "Signature verification failed.",
    "206": "Invalid timestamp.",
    "207": "Replayed request.",
    "401": "Account is overdue.",
    "411": "Access frequency limited. Retry later.",
})
GENERIC_ERROR: Final[str] = "Request rejected. See the Youdao error code reference."


def truncate(q: str) -> str:
    """Shorten a query for signing.

    Queries of up to 20 characters are used as is; longer ones become the first 10 characters,
    the length, and the last 10 characters.

    Args:
        q (str): Query text.

    Returns:
        str: The text that goes into the signature.
    """
    size: int = len(q)
    return q if size <= 20 else f"{q[:10]}{size}{q[-10:]}"


def sha256_encode(text: str) -> str:
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def generate_node(rng: random.Random) -> int:
    """Random 48-bit node, marked as a locally administered unicast address."""
    node: bytearray = bytearray(rng.randbytes(6))
    node[0] = (node[0] | 0x02) & 0xFE
    return int.from_bytes(node, "big")


def generate_nonce(now_ns: int, node: int, clock_seq: int) -> str:
    """Build a version-1 UUID string from a Unix timestamp in nanoseconds.

    Args:
        now_ns (int): Wall-clock time in nanoseconds since the Unix epoch.
        node (int): 48-bit node identifier.
        clock_seq (int): 14-bit clock sequence.

    Returns:
        str: The UUID in its canonical hyphenated form.
    """
    timestamp: int = now_ns // 100 + UUID_EPOCH_OFFSET
    time_low: int = timestamp & 0xFFFFFFFF
    time_mid: int = (timestamp >> 32) & 0xFFFF
    time_hi_version: int = ((timestamp >> 48) & 0x0FFF) | (1 << 12)
    clock_seq_low: int = clock_seq & 0xFF
    clock_seq_hi_variant: int = ((clock_seq >> 8) & 0x3F) | 0x80
    return str(
        uuid.UUID(fields=(time_low, time_mid, time_hi_version, clock_seq_hi_variant, clock_seq_low, node))
    )


class YoudaoTranslation(TransInterface):
    def __init__(
        self,
        app_key: str,
        app_secret: str,
        http: AsyncHttp | None = None,
        *,
        rng: random.Random | None = None,
        clock: Callable[[], int] = time.time_ns,
    ) -> None:
        """Initialize the engine.

        Args:
            app_key (str): Youdao application ID.
            app_secret (str): Application secret.
            http (AsyncHttp | None): HTTP client to use.
            rng (random.Random | None): Source of the nonce's node and clock sequence.
            clock (Callable[[], int]): Wall clock in nanoseconds since the Unix epoch.

        Raises:
            MissingCredentialsError: If either credential is empty.
        """
        missing: list[str] = [
            name for name, value in (("app_key", app_key), ("app_secret", app_secret)) if not value
        ]
        if missing:
            raise MissingCredentialsError(ProviderKind.YOUDAO, missing)
        super().__init__(EngineAttributes(name=ProviderKind.YOUDAO), http)
        self.__app_key: str = app_key
        self.__app_secret: str = app_secret
        self._rng: random.Random = rng if rng is not None else random.Random()  # noqa: S311
        self._clock: Callable[[], int] = clock

    @staticmethod
    def fetch_engine_name() -> ProviderKind:
        return ProviderKind.YOUDAO

    async def translate_one(
        self, content: str, tgt_lang: Language, src_lang: Language | None = None
    ) -> TranslationOutput:
        logger.debug("'content': '%s', 'src_lang': '%s', 'tgt_lang': '%s'", content, src_lang, tgt_lang)
        src_code: str = self._source_code(src_lang)
        tgt_code: str = self._target_code(tgt_lang)
        form: YoudaoTranslateForm = self.build_form(content, src_code, tgt_code)

        data: Any = await self._call(self._http.post(url=YOUDAO_URL, data=form.to_dict()))
        response: YoudaoResponse = self.decode_response(data)
        if not response.translation:
            raise EmptyResultError(self.engine_name)

        logger.info("translation completed (%s)", response.lang_pair or f"{src_code}2{tgt_code}")
        return TranslationOutput(
            text=SEGMENT_SEPARATOR.join(response.translation),
            lang=tgt_lang,
            metadata={"engine": str(self.engine_name)},
        )

    async def translate_many(
        self, contents: Sequence[str], tgt_lang: Language, src_lang: Language | None = None
    ) -> TranslationListOutput:
        return await self._translate_joined(contents, tgt_lang, src_lang, SEGMENT_SEPARATOR)

    def build_form(self, query: str, src_code: str, tgt_code: str) -> YoudaoTranslateForm:
        now_ns: int = self._clock()
        salt: str = generate_nonce(now_ns, generate_node(self._rng), self._rng.getrandbits(14))
        curtime: str = str(now_ns // 1_000_000_000)
        sign: str = sha256_encode(f"{self.__app_key}{truncate(query)}{salt}{curtime}{self.__app_secret}")
        return YoudaoTranslateForm(
            q=query,
            from_lang=src_code,
            to=tgt_code,
            app_key=self.__app_key,
            salt=salt,
            sign=sign,
            curtime=curtime,
        )

    def decode_response(self, data: Any) -> YoudaoResponse:
        if not isinstance(data, dict):
            msg: str = f"Unexpected response from {self.engine_name}: {type(data).__name__}"
            raise ResponseFormatError(msg)
        try:
            response: YoudaoResponse = YoudaoResponse.from_dict(data)
        except (KeyError, TypeError, ValueError, AttributeError) as err:
            msg = f"Unexpected response shape from {self.engine_name}"
            raise ResponseFormatError(msg) from err

        code: str = str(response.error_code)
        if code != "0":
            logger.error("Youdao API error [%s]", code)
            raise ProviderRejectedError(self.engine_name, code, ERROR_MESSAGES.get(code, GENERIC_ERROR))
        return response
