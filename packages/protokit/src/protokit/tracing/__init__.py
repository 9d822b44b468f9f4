from .tracing import filter_trace_attrs, get_tracer, registration_span

__all__ = ["filter_trace_attrs", "get_tracer", "registration_span"]
