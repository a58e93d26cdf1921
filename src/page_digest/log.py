from __future__ import annotations
import logging
from rich.logging import RichHandler

def setup_logging(level: str | int = "INFO", rich: bool = True) -> None:
    handlers: list[logging.Handler] = [RichHandler(rich_tracebacks=True, show_path=False)] if rich else [logging.StreamHandler()]
    logging.basicConfig(
        level=level,
        format="%(message)s" if rich else "%(asctime)s %(levelname)s %(name)s %(message)s",
        handlers=handlers,
        force=True,
    )
