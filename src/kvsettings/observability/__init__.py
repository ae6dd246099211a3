from .logging import LEVELS, LogMessage, StoreLogger

__all__ = ["LEVELS", "LogMessage", "StoreLogger"]
