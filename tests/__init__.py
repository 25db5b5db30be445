"""Test suite for binance-futures-request.

Contains:
- tests/unit/ : Unit tests; HTTP is served by httpx.MockTransport
"""
