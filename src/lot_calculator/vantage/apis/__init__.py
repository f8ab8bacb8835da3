from .base import API_BASE
from .forex import FOREX

__all__ = ["API_BASE", "FOREX"]
