"""Paypack mobile-money provider adapter."""

from .client import PaypackClient

__all__ = ["PaypackClient"]
