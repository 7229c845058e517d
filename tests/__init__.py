"""Unit tests for the POEditor client.

Tests use pytest with asyncio support; HTTP traffic is replaced with in-process fakes via
monkeypatch or by swapping the client's transport.
"""
