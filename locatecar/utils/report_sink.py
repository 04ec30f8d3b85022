"""Append-only text artifacts for receipts and reports."""

from __future__ import annotations

import os
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

import pytz
from werkzeug.utils import secure_filename

from locatecar.logging_config import get_logger
from locatecar.utils.constants import DEFAULT_TIMEZONE, REPORT_STAMP_FMT
from locatecar.utils.filters import as_utc, utcnow


class ReportSink:
    """
    Writes each report to `<reports_dir>/<name>_<YYYYMMDD_HHMMSS>.txt`, stamped
    in `timezone` like the report bodies.
    Fire-and-forget: failures are logged and `emit` returns None.
    """

    def __init__(self, reports_dir: str | os.PathLike, clock: Callable[[], datetime] = utcnow,
                 timezone: str = DEFAULT_TIMEZONE):
        self.reports_dir = Path(reports_dir)
        self.timezone = timezone
        self._clock = clock
        self._logger = get_logger(self.__class__.__name__)

    def _target(self, report_name: str) -> Path:
        safe = secure_filename(report_name) or "report"
        local = as_utc(self._clock()).astimezone(pytz.timezone(self.timezone))
        stamp = local.strftime(REPORT_STAMP_FMT)
        path = self.reports_dir / f"{safe}_{stamp}.txt"
        n = 1
        # Artifacts are never overwritten
        while path.exists():
            path = self.reports_dir / f"{safe}_{stamp}_{n}.txt"
            n += 1
        return path

    def emit(self, report_name: str, body: str) -> Optional[Path]:
        try:
            self.reports_dir.mkdir(parents=True, exist_ok=True)
            path = self._target(report_name)
            with open(path, "x", encoding="utf-8") as f:
                f.write(body)
        except OSError as e:
            self._logger.warning("Could not save report %r: %s", report_name, e)
            return None
        self._logger.info("Report saved to %s", path)
        return path


class NullReportSink:
    """Discards every report."""

    def emit(self, report_name: str, body: str) -> Optional[Path]:
        return None
