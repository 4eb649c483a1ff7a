from .context import (
    RUN_CONTEXT,
    EscapePoint,
    MessageBuffer,
    RunContext,
    get_run_context,
    get_user,
    last_message,
    run_context_scope,
    set_user,
)

__all__ = [
    "RUN_CONTEXT",
    "EscapePoint",
    "MessageBuffer",
    "RunContext",
    "get_run_context",
    "get_user",
    "last_message",
    "run_context_scope",
    "set_user",
]
