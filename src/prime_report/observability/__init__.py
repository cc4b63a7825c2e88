from .logging import LEVELS, LogMessage, level_enabled

__all__ = ["LEVELS", "LogMessage", "level_enabled"]
