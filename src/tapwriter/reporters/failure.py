from dataclasses import dataclass
from typing import Callable, List, Optional
import logging, re

from ..utils.paths import InternalsPredicate, internals_predicate
from ..utils.styling import Styler

log = logging.getLogger(__name__)

ERROR_PREFIX = re.compile(r"^\s*Error:\s*")
INDENT = "  "
TRACE_INDENT = "    "

@dataclass
class TraceFrame:
    description: str
    file: str
    row: str
    column: str

def is_trace_line(line: str) -> bool:
    return line.lstrip().startswith("at")

def _is_number(text: str) -> bool:
    return text.isascii() and text.isdigit()

def parse_trace_line(line: str) -> Optional[TraceFrame]:
    """
    Parse `<description>(<file>:<row>:<column>)` at the end of a line.
    Returns None when the line does not have that shape.
    """
    if not line.endswith(")"):
        return None
    parts = line[:-1].rsplit(":", 2)
    if len(parts) != 3:
        return None
    location, row, column = parts
    if not (_is_number(row) and _is_number(column)):
        return None
    # the file part may itself contain "(", so prefer the last one that leaves a file name
    paren = location.rfind("(")
    while paren != -1 and paren == len(location) - 1:
        paren = location.rfind("(", 0, paren)
    if paren == -1:
        return None
    description = location[:paren].lstrip()
    if not description:
        return None
    return TraceFrame(description, location[paren + 1:], row, column)

class FailureFormatter:
    """Turns raw failure text (headline + stack trace) into an indented block of TAP comments."""

    def __init__(self, styler: Styler, relativize: Callable[[str], str],
                 is_internal: InternalsPredicate = internals_predicate()):
        self.styler = styler
        self.relativize = relativize
        self.is_internal = is_internal

    def comment(self, line: str) -> str:
        return f"{self.styler.style('conceal', '#')} {line}"

    def _frame(self, frame: TraceFrame, relative_path: str) -> str:
        s = self.styler.style
        return (f"{frame.description}({s('cyan', relative_path)}:"
                f"{s('black bold', frame.row)}:{s('black bold', frame.column)})")

    def _trace(self, line: str, dim: bool = False) -> str:
        if dim:
            line = self.styler.style("dim", line)
        return TRACE_INDENT + self.styler.style("bright_black", line)

    def lines(self, message: str) -> List[str]:
        """Unescaped output lines for one message, blanks included."""
        first_line, *rest = message.split("\n")
        out = ["", ERROR_PREFIX.sub("", first_line, count=1), ""]

        internals_started = False
        trace_started = False
        for line in rest:
            if not is_trace_line(line):
                out.append(line)
                continue
            if not trace_started:
                trace_started = True
                if out[-1] != "":
                    out.append("")
                out.append(self.styler.style("bold dim", "Stack trace:"))
                out.append("")

            frame = parse_trace_line(line)
            if frame is None:
                log.debug("Unparsed trace line kept as-is: %r", line)
                out.append(self._trace(line))
                continue
            relative_path = self.relativize(frame.file)
            if self.is_internal(relative_path):
                internals_started = True
            out.append(self._trace(self._frame(frame, relative_path), dim=internals_started))

        out.append("")
        return out

    def format(self, message: str) -> str:
        return "\n".join(self.comment(INDENT + line) for line in self.lines(message))
