"""
Database models for the shortener.
"""

from .url import ShortLink

__all__ = ["ShortLink"]
