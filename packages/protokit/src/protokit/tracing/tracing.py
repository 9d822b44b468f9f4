import logging
from collections.abc import Mapping, Sequence
from contextlib import contextmanager
from typing import Any, Iterator

from opentelemetry import trace
from opentelemetry.trace import Span, SpanKind, Status, StatusCode, Tracer

logger = logging.getLogger(__name__)

_DEFAULT_TRACER_NAME = "protokit"

# Attribute keys kept at each trace level; keys outside the ``protokit.``
# prefix always pass through.
_INFO_KEYS = frozenset({
    "protokit.type",
    "protokit.protocols",
    "protokit.partial",
    "protokit.overrides",
    "protokit.defaults",
})
_MINIMAL_KEYS = frozenset({"protokit.type", "protokit.protocols"})


def get_tracer(name: str | None = None) -> Tracer:
    """Return an OpenTelemetry tracer for this package."""
    return trace.get_tracer(name or _DEFAULT_TRACER_NAME)


def filter_trace_attrs(attrs: Mapping[str, Any], level: str) -> dict[str, Any]:
    level = (level or "info").strip().lower()
    if level == "debug":
        return dict(attrs)
    keep = _MINIMAL_KEYS if level == "minimal" else _INFO_KEYS
    return {k: v for k, v in attrs.items() if k in keep or not k.startswith("protokit.")}


def _apply_attributes(span: Span, attrs: Mapping[str, Any] | None) -> None:
    if not attrs:
        return
    # OpenTelemetry accepts bool, str, bytes, int, float, or sequences of those.
    allowed = (bool, str, bytes, int, float)
    for k, v in attrs.items():
        if v is None:
            continue
        if isinstance(v, allowed):
            span.set_attribute(k, v)
        elif isinstance(v, Sequence) and not isinstance(v, (str, bytes)):
            cleaned = [x for x in v if isinstance(x, allowed)]
            if cleaned:
                span.set_attribute(k, cleaned)


def _record_exception(span: Span, err: BaseException) -> None:
    span.record_exception(err)
    span.set_status(Status(StatusCode.ERROR, description=str(err)))
    span.set_attribute("exception.type", type(err).__name__)


@contextmanager
def registration_span(name: str, *, attributes: Mapping[str, Any] | None = None) -> Iterator[Span]:
    """Span wrapping one protocol registration.

    Usage:
        with registration_span("protokit.implement (Point)", attributes={"protokit.type": "Point"}):
            ...
    """
    tracer = get_tracer()
    with tracer.start_as_current_span(name, kind=SpanKind.INTERNAL) as span:
        _apply_attributes(span, attributes)
        try:
            yield span
            span.set_attribute("ok", True)
        except Exception as e:
            span.set_attribute("ok", False)
            _record_exception(span, e)
            raise


__all__ = [
    "filter_trace_attrs",
    "get_tracer",
    "registration_span",
]
