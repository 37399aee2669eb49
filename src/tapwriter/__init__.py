# Lightweight package init: rich/pydantic load only when first used.
__all__ = ["LineWriter", "PlanAlreadyWrittenError", "TapReporter", "ReporterConfig", "create_writer"]

def __getattr__(name):
    if name in ("LineWriter", "PlanAlreadyWrittenError"):
        from .reporters import line_writer
        return getattr(line_writer, name)
    if name == "TapReporter":
        from .reporters.tap import TapReporter as _TapReporter
        return _TapReporter
    if name in ("ReporterConfig", "create_writer"):
        from . import config
        return getattr(config, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
