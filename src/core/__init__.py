"""
Core domain models, codecs, and contracts of the wallet service.

This module contains the foundational building blocks that are independent
of external systems (HTTP handlers, repositories, databases).
"""
