import logging
from rich.console import Console
from rich.logging import RichHandler
def setup_logging(level: str = "WARNING"):
    """Diagnostics go to stderr so stdout carries nothing but TAP lines."""
    log = logging.getLogger("tapwriter")
    log.setLevel(level)
    if not any(isinstance(h, RichHandler) for h in log.handlers):
        handler = RichHandler(console=Console(stderr=True), rich_tracebacks=True)
        handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
        log.addHandler(handler)
    return log
