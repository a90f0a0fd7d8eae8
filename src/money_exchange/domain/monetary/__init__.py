"""Monetary domain package.

This package contains the supported Currency members, the immutable Money
value object with its per-currency constructors, and the static exchange
table used to combine amounts across currencies.
"""
