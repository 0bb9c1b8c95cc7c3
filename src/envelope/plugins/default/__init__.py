from .logging import LoggingPlugin

__all__ = ["LoggingPlugin"]
