import os
from functools import lru_cache
from shared.config import settings

BUNDLED_REPORT = os.path.join(os.path.dirname(__file__), "trillium_report.md")

def report_path() -> str:
    return settings.report_path or BUNDLED_REPORT

@lru_cache(maxsize=1)
def load_document() -> str:
    """Read the fixed report once per process; callers must treat it as read-only."""
    with open(report_path(), "r", encoding="utf-8") as f:
        return f.read()
