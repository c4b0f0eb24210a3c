from .gate import (
    Authorization,
    Decision,
    authorize,
    format_denial,
    holds,
    permission_display_name,
)

__all__ = [
    "Authorization",
    "Decision",
    "authorize",
    "format_denial",
    "holds",
    "permission_display_name",
]
