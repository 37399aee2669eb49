from pydantic import BaseModel, Field
from typing import Optional, List
import sys, yaml, pathlib

from .reporters.console import ConsoleSink, OutputSink
from .reporters.line_writer import LineWriter
from .utils.paths import DEFAULT_INTERNALS, internals_predicate
from .utils.styling import make_styler
from .logging import setup_logging

class ReporterConfig(BaseModel):
    root: str = Field(".", description="Directory that suite and frame paths are shown relative to")
    color: Optional[bool] = Field(None, description="Force styling on/off; None detects it from stdout")
    internals: List[str] = Field(default_factory=lambda: list(DEFAULT_INTERNALS),
                                 description="Leading path segments of dependency/runtime frames")
    log_level: str = Field("WARNING")

def load_config(path: str) -> ReporterConfig:
    data = yaml.safe_load(pathlib.Path(path).read_text()) or {}
    return ReporterConfig.model_validate(data)

def create_writer(cfg: ReporterConfig, sink: Optional[OutputSink] = None) -> LineWriter:
    setup_logging(cfg.log_level)
    if sink is None:
        sink = ConsoleSink()
    stream = getattr(sink, "stdout", sys.stdout)
    return LineWriter(
        sink,
        str(pathlib.Path(cfg.root).resolve()),
        styler=make_styler(stream, cfg.color),
        is_internal=internals_predicate(cfg.internals),
    )
