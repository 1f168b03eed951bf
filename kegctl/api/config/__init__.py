"""Config module - kegctl configuration loading."""

from .KegConfig import KegConfig

__all__ = ["KegConfig"]
