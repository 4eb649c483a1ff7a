from microunit.tracing.lifecycle import (
    clear_traces,
    get_trace_output_path,
    get_tracer,
    init_tracing,
    set_trace_output_path,
)
from microunit.tracing.tracer import RunTracer

__all__ = [
    "RunTracer",
    "clear_traces",
    "get_trace_output_path",
    "get_tracer",
    "init_tracing",
    "set_trace_output_path",
]
