"""Observability helpers"""

from deepseek_sdk.observability.logging import setup_logging

__all__ = ["setup_logging"]
