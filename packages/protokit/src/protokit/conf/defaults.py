"""Default configuration values for protokit."""

DEFAULTS: dict[str, object] = {
    # Dispatch
    "AUTO_CURRY": True,
    "DISPATCH_CACHE": True,
    # Registration
    "LOG_REGISTRATIONS": True,
    "FREEZE_ON_FINALIZE": True,
    # Tracing
    "TRACE_REGISTRATION": True,
    "TRACE_LEVEL": "info",
}
