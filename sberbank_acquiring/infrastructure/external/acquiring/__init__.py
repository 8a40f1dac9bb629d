"""
Sberbank acquiring gateway client.
"""
from .client import AcquiringClient

__all__ = ["AcquiringClient"]
