"""Core enums: error codes and runtime environments."""

from src.core.enums.environment import Environment
from src.core.enums.error_code import ErrorCode

__all__ = ["Environment", "ErrorCode"]
