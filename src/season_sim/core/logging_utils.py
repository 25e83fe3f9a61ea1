"""Logging helpers scoped to the season diagram package."""
from __future__ import annotations

import csv
import json
import time
from datetime import datetime
from pathlib import Path
from typing import Optional, Sequence

from .config import LOG_CFG


class SessionLogger:
    """Buffered logger that stores interaction data of one session to CSV files.

    Parameters
    ----------
    root_dir:
        Root directory where session folders are created.
    session_id:
        Optional custom identifier. If omitted a timestamp based identifier in
        the form ``YYYYmmdd_HHMMSS_session`` is used.
    timeseries_flush_threshold:
        Number of buffered drag samples before an automatic flush to disk.
    events_flush_threshold:
        Number of buffered event rows before an automatic flush to disk.
    """

    TIMESERIES_HEADER = ["t", "angle", "season", "elevation"]
    EVENTS_HEADER = ["t", "type", "season", "angle", "details"]

    def __init__(
        self,
        root_dir: str | Path = LOG_CFG.root_dir,
        session_id: Optional[str] = None,
        *,
        timeseries_flush_threshold: int = LOG_CFG.timeseries_flush_threshold,
        events_flush_threshold: int = LOG_CFG.events_flush_threshold,
    ) -> None:
        self.root_dir = Path(root_dir)
        self.root_dir.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")

        def make_candidate(suffix: Optional[int] = None) -> str:
            base = session_id or f"{timestamp}_session"
            if suffix is None:
                return base
            if session_id:
                return f"{session_id}_{suffix}"
            return f"{base}_{suffix:02d}"

        candidate_id = make_candidate()
        suffix = 1
        while (self.root_dir / candidate_id).exists():
            candidate_id = make_candidate(suffix)
            suffix += 1

        self.session_id = candidate_id
        self.session_dir = self.root_dir / self.session_id
        self.session_dir.mkdir(parents=True, exist_ok=False)

        self.timeseries_path = self.session_dir / "timeseries.csv"
        self.events_path = self.session_dir / "events.csv"
        self.meta_path = self.session_dir / "meta.json"

        self._ts_file = self.timeseries_path.open("w", newline="", encoding="utf-8")
        self._ts_writer = csv.writer(self._ts_file)
        self._ts_writer.writerow(self.TIMESERIES_HEADER)
        try:
            self._ev_file = self.events_path.open("w", newline="", encoding="utf-8")
        except OSError:
            self._ts_file.close()
            raise
        self._ev_writer = csv.writer(self._ev_file)
        self._ev_writer.writerow(self.EVENTS_HEADER)

        self._ts_buffer: list[list[str]] = []
        self._ev_buffer: list[list[str]] = []
        self._ts_threshold = max(1, timeseries_flush_threshold)
        self._ev_threshold = max(1, events_flush_threshold)
        self._start = time.perf_counter()
        self._closed = False

        last_session_marker = self.root_dir / "last_session.txt"
        last_session_marker.write_text(self.session_id, encoding="utf-8")

    @property
    def closed(self) -> bool:
        return self._closed

    def elapsed(self) -> float:
        return time.perf_counter() - self._start

    def write_meta(self, meta: dict) -> None:
        with self.meta_path.open("w", encoding="utf-8") as fh:
            json.dump(meta, fh, indent=2, sort_keys=True)

    def log_sample(self, angle: float, season: str, elevation: float) -> None:
        self.log_ts([self.elapsed(), angle, season, elevation])

    def log_ts(self, values: Sequence[object]) -> None:
        self._ts_buffer.append([self._format_value(v) for v in values])
        if len(self._ts_buffer) >= self._ts_threshold:
            self._flush_timeseries()

    def log_event(
        self,
        event_type: str,
        season: str,
        angle: float,
        details: Optional[dict] = None,
    ) -> None:
        row = [self.elapsed(), event_type, season, angle, details or ""]
        self._ev_buffer.append([self._format_value(v) for v in row])
        if len(self._ev_buffer) >= self._ev_threshold:
            self._flush_events()

    def flush(self) -> None:
        self._flush_timeseries()
        self._flush_events()

    def close(self) -> None:
        if self._closed:
            return
        self.flush()
        self._ts_file.close()
        self._ev_file.close()
        self._closed = True

    def _flush_timeseries(self) -> None:
        if self._ts_buffer:
            self._ts_writer.writerows(self._ts_buffer)
            self._ts_file.flush()
            self._ts_buffer.clear()

    def _flush_events(self) -> None:
        if self._ev_buffer:
            self._ev_writer.writerows(self._ev_buffer)
            self._ev_file.flush()
            self._ev_buffer.clear()

    @staticmethod
    def _format_value(value: object) -> str:
        if isinstance(value, bool):
            return str(value)
        if isinstance(value, (int, float)):
            return f"{value:.10g}"
        if isinstance(value, dict):
            return json.dumps(value, sort_keys=True)
        return str(value)

    def __enter__(self) -> "SessionLogger":
        return self

    def __exit__(self, exc_type, exc, tb) -> Optional[bool]:
        self.close()
        return None


__all__ = ["SessionLogger"]
