from dataclasses import dataclass, field
from enum import Enum
from typing import List

class Status(str, Enum):
    PASSED = "passed"
    FAILED = "failed"
    SKIPPED = "skipped"

@dataclass
class TestCaseResult:
    __test__ = False

    title: str
    status: Status = Status.PASSED
    failure_messages: List[str] = field(default_factory=list)

@dataclass
class SuiteResult:
    path: str
    cases: List[TestCaseResult] = field(default_factory=list)
    failed: bool = False  # e.g. the suite could not be loaded at all
    @property
    def passed_count(self) -> int: return sum(c.status is Status.PASSED for c in self.cases)
    @property
    def failed_count(self) -> int: return sum(c.status is Status.FAILED for c in self.cases)
    @property
    def skipped_count(self) -> int: return sum(c.status is Status.SKIPPED for c in self.cases)
    @property
    def is_failing(self) -> bool: return self.failed or self.failed_count > 0

@dataclass
class Counts:
    failed: int = 0
    skipped: int = 0
    passed: int = 0
    total: int = 0

@dataclass
class SnapshotCounts:
    failed: int = 0
    updated: int = 0
    added: int = 0
    passed: int = 0
    total: int = 0

@dataclass
class RunSummary:
    suites: Counts = field(default_factory=Counts)
    tests: Counts = field(default_factory=Counts)
    snapshots: SnapshotCounts = field(default_factory=SnapshotCounts)
