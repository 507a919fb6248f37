"""Unit tests for the translator.

This package contains test modules for all components of the translator.
Tests use pytest with asyncio support and replace the HTTP client with a recording stub.
"""
