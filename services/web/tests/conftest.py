import sys
from pathlib import Path

import pytest


WEB_SRC = Path(__file__).resolve().parents[1] / "src"
if str(WEB_SRC) not in sys.path:
    sys.path.insert(0, str(WEB_SRC))


@pytest.fixture(autouse=True)
def _quiet_metrics(monkeypatch) -> None:
    """Keep the metrics thread off and counters fresh for every test."""

    from ssrdemo_web import metrics_log
    from ssrdemo_web.config import settings

    monkeypatch.setattr(settings, "metrics_log_interval", 0)
    metrics_log.reset()
