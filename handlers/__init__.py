"""Network communication utilities for the translator.

This package provides the asynchronous HTTP client every translation engine sends its requests through.
"""

from handlers.async_comm import AsyncCommError, AsyncCommInvalidContentTypeError, AsyncCommTimeoutError, AsyncHttp

__all__: list[str] = ["AsyncCommError", "AsyncCommInvalidContentTypeError", "AsyncCommTimeoutError", "AsyncHttp"]
