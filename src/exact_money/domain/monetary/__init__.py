"""Monetary domain package.

This package contains the `Money` value type and its collaborators: `Currency` definitions
with the predefined ISO 4217 registry, the `CurrencyPolicy` that decides which currencies
are usable, and the error hierarchy raised by monetary operations.
"""
