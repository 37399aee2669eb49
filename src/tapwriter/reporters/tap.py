from typing import List, Optional
import logging, os

from .line_writer import LineWriter
from ..results import RunSummary, Status, SuiteResult

log = logging.getLogger(__name__)

class TapReporter:
    """Feeds a LineWriter in lifecycle order: start, per-suite blocks, summary, plan."""
    def __init__(self, writer: LineWriter):
        self.writer = writer

    def on_run_start(self, num_suites: Optional[int] = None) -> None:
        self.writer.start(num_suites)

    def on_suite_result(self, suite: SuiteResult) -> None:
        w = self.writer
        directory, base = os.path.split(suite.path)
        w.suite(suite.is_failing, directory, base)
        messages: List[str] = []
        for case in suite.cases:
            if case.status is Status.FAILED:
                w.failed(case.title)
                messages.extend(case.failure_messages)
            elif case.status is Status.SKIPPED:
                w.pending(case.title)
            else:
                w.passed(case.title)
        log.debug("Suite %s: %d passed, %d failed, %d skipped", suite.path,
                  suite.passed_count, suite.failed_count, suite.skipped_count)
        w.errors(messages)

    def on_run_complete(self, summary: RunSummary) -> None:
        w = self.writer
        s, t, snap = summary.suites, summary.tests, summary.snapshots
        w.blank()
        w.stats("Test Suites", s.failed, s.skipped, s.passed, s.total)
        w.stats("Tests", t.failed, t.skipped, t.passed, t.total)
        w.snapshots(snap.failed, snap.updated, snap.added, snap.passed, snap.total)
        w.blank()
        w.plan()
