"""Translation engine implementations.

This package contains concrete implementations of the TransInterface for each supported provider.
These classes handle the communication with the provider APIs, manage request/response formats,
and map provider-specific failures onto the common error classes.
Importing the package registers every engine with TransInterface.

Modules:
- AlibabaTranslation: Alibaba Translate web endpoint (no credentials).
- BaiduTranslation: Baidu Translate, MD5-signed form POST.
- CaiyunTranslation: Caiyun (LingoCloud), token-authenticated JSON POST with native batching.
- MyMemoryTranslation: MyMemory public endpoint (no credentials).
- YoudaoTranslation: Youdao, SHA-256 (v3) signed form POST.
"""

from core.trans.engines.trans_alibaba import AlibabaTranslation
from core.trans.engines.trans_baidu import BaiduTranslation
from core.trans.engines.trans_caiyun import CaiyunTranslation
from core.trans.engines.trans_mymemory import MyMemoryTranslation
from core.trans.engines.trans_youdao import YoudaoTranslation

__all__: list[str] = [
    "AlibabaTranslation",
    "BaiduTranslation",
    "CaiyunTranslation",
    "MyMemoryTranslation",
    "YoudaoTranslation",
]
