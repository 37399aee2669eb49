from typing import Optional, Protocol, TextIO
import sys

class OutputSink(Protocol):
    def info(self, line: str) -> None: ...
    def log(self, line: str) -> None: ...
    def error(self, text: str) -> None: ...

class ConsoleSink:
    """info/log go to stdout, error to stderr; one print per call."""
    def __init__(self, stdout: Optional[TextIO] = None, stderr: Optional[TextIO] = None):
        self.stdout = stdout or sys.stdout
        self.stderr = stderr or sys.stderr

    def info(self, line: str) -> None:
        print(line, file=self.stdout, flush=True)

    def log(self, line: str) -> None:
        print(line, file=self.stdout, flush=True)

    def error(self, text: str) -> None:
        print(text, file=self.stderr, flush=True)
