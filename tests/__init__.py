"""
Test suite for the wallet Decimal codec

Contains:
- tests/unit/          : Unit tests for the codec, the Wallet model and contracts
"""
