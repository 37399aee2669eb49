from typing import List, Optional, Sequence, Tuple
import logging, os

from .console import OutputSink
from .failure import FailureFormatter
from ..utils.paths import InternalsPredicate, internals_predicate, relative_to_root
from ..utils.styling import PlainStyler, Styler

log = logging.getLogger(__name__)

MDASH = "—"
CIRCLE = "●"
KEY_WIDTH = 12

# (label, style tag, number)
Entry = Tuple[str, str, int]

class PlanAlreadyWrittenError(RuntimeError):
    def __init__(self):
        super().__init__("TAP test plan can be written only once.")

class LineWriter:
    """
    Writes one test run as TAP lines: `ok`/`not ok` results numbered from 1,
    `#` comments for banners, summaries and failures, and a single `1..N` plan
    at the end. Comment markers are concealed so a terminal shows plain text.
    """

    def __init__(self, sink: OutputSink, root: str, styler: Optional[Styler] = None,
                 is_internal: InternalsPredicate = internals_predicate()):
        self.sink = sink
        self.root = root
        self.styler = styler or PlainStyler()
        self.counter = 0
        self.plan_written = False
        self.failures = FailureFormatter(self.styler, self.relative_path, is_internal)

    # ---------- protocol state ----------
    def next_number(self) -> int:
        self.counter += 1
        return self.counter

    def plan(self, count: Optional[int] = None) -> None:
        if self.plan_written:
            raise PlanAlreadyWrittenError()
        if count is None:
            count = self.counter
        self.sink.log(self.styler.style("reverse", f"1..{count}"))
        self.plan_written = True
        log.debug("TAP plan written for %d result(s)", count)

    # ---------- comments ----------
    def blank(self) -> None:
        self.sink.info("")

    def comment(self, line: str) -> None:
        self.sink.info(self.failures.comment(line))

    def comment_light(self, line: str) -> None:
        self.comment(self.styler.style("dim", line))

    def start(self, num_suites: Optional[int] = None) -> None:
        self.blank()
        self.blank()
        self.comment(self.styler.style("green", "Starting..."))
        if num_suites:
            self.comment_light(f"{num_suites} test suites found.")

    def key_value(self, key: str, value: str) -> None:
        key_formatted = f"{key}:".ljust(KEY_WIDTH)
        self.comment(f"{self.styler.style('bold', key_formatted)} {value}")

    def key_value_list(self, key: str, entries: Sequence[Entry]) -> None:
        value = ", ".join(self.styler.style(style, f"{num} {label}") for label, style, num in entries)
        self.key_value(key, value)

    # ---------- summaries ----------
    def stats(self, name: str, failed: int, skipped: int, passed: int, total: int) -> None:
        entries: List[Entry] = []
        if total:
            if failed:
                entries.append(("failed", "red bold", failed))
            if skipped:
                entries.append(("skipped", "yellow bold", skipped))
            if passed:
                entries.append(("passed", "green bold", passed))
        entries.append(("total", "none", total))
        self.key_value_list(name, entries)

    def snapshots(self, failed: int, updated: int, added: int, passed: int, total: int) -> None:
        if not total:
            return
        entries: List[Entry] = []
        if failed:
            entries.append(("failed", "red bold", failed))
        if updated:
            entries.append(("updated", "yellow bold", updated))
        if added:
            entries.append(("added", "green bold", added))
        if passed:
            entries.append(("passed", "green bold", passed))
        entries.append(("total", "none", total))
        self.key_value_list("Snapshots", entries)

    # ---------- results ----------
    def result(self, ok_not_ok: str, title: str) -> None:
        number = self.styler.style("bright_black dim", str(self.next_number()))
        self.sink.log(f"{ok_not_ok} {number} {title}")

    def passed(self, title: str) -> None:
        self.result(self.styler.style("green", "ok"), f"{MDASH} {title}" if title else "")

    def failed(self, title: str) -> None:
        self.result(self.styler.style("red", "not ok"), self.styler.style("red bold", f"{CIRCLE} {title}"))

    def pending(self, title: str) -> None:
        s = self.styler.style
        self.result(s("yellow", "ok"), f"{s('yellow', '#')} {s('yellow bold', 'SKIP')} {title}")

    # ---------- suites & failures ----------
    def relative_path(self, path: str) -> str:
        return relative_to_root(self.root, path)

    def suite(self, is_fail: bool, directory: str, base: str) -> None:
        if is_fail:
            label = self.styler.style("reverse bold red", " FAIL ")
        else:
            label = self.styler.style("reverse bold green", " PASS ")
        folder = self.styler.style("bright_black", self.relative_path(directory) + os.sep)
        self.comment(f"{label} {folder}{self.styler.style('bold', base)}")

    def format_failure_message(self, message: str) -> str:
        return self.failures.format(message)

    def errors(self, messages: Sequence[str]) -> None:
        if not messages:
            return
        self.sink.error("\n".join(self.format_failure_message(m) for m in messages))
