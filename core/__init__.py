"""Core components of the translator.

This package contains the translation engine interface, the provider adapters, the language
vocabulary shared by all of them, and the factory that builds an adapter from a provider name.
"""

from core.version import VERSION

__all__: list[str] = ["VERSION"]
