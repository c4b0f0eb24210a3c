from .analytics import AnalyticsMiddleware
from .logging import LoggingMiddleware

__all__ = ["LoggingMiddleware", "AnalyticsMiddleware"]
