"""Tests for the buffered session logger."""
import csv
import json
from pathlib import Path

import pytest

from season_sim.core.controller import SimulationController
from season_sim.core.logging_utils import SessionLogger
from season_sim.data.seasons import AxialTilt, Season


def _read_csv(path):
    with path.open(newline="", encoding="utf-8") as fh:
        return list(csv.DictReader(fh))


class TestSessionLogger:

    def test_creates_session_layout(self, tmp_path):
        with SessionLogger(tmp_path, session_id="demo") as logger:
            assert logger.session_dir == tmp_path / "demo"
        assert (tmp_path / "demo" / "timeseries.csv").exists()
        assert (tmp_path / "demo" / "events.csv").exists()
        assert (tmp_path / "last_session.txt").read_text(encoding="utf-8") == "demo"

    def test_headers(self, tmp_path):
        with SessionLogger(tmp_path, session_id="demo") as logger:
            pass
        first_ts = logger.timeseries_path.read_text(encoding="utf-8").splitlines()[0]
        first_ev = logger.events_path.read_text(encoding="utf-8").splitlines()[0]
        assert first_ts == ",".join(SessionLogger.TIMESERIES_HEADER)
        assert first_ev == ",".join(SessionLogger.EVENTS_HEADER)

    def test_duplicate_id_gets_suffix(self, tmp_path):
        SessionLogger(tmp_path, session_id="demo").close()
        second = SessionLogger(tmp_path, session_id="demo")
        second.close()
        assert second.session_id == "demo_1"

    def test_default_id_uses_timestamp(self, tmp_path):
        with SessionLogger(tmp_path) as logger:
            assert logger.session_id.endswith("_session")

    def test_buffers_until_threshold(self, tmp_path):
        logger = SessionLogger(tmp_path, session_id="demo", timeseries_flush_threshold=3)
        logger.log_sample(10.0, "winter", 36.5)
        logger.log_sample(11.0, "winter", 36.5)
        assert len(_read_csv(logger.timeseries_path)) == 0
        logger.log_sample(12.0, "winter", 36.5)
        rows = _read_csv(logger.timeseries_path)
        assert [row["angle"] for row in rows] == ["10", "11", "12"]
        logger.close()

    def test_event_details_are_json(self, tmp_path):
        with SessionLogger(tmp_path, session_id="demo") as logger:
            logger.log_event("snap", "summer", 180.0, {"from_angle": 171.25})
            logger.log_event("select_tilt", "summer", 180.0)
        rows = _read_csv(logger.events_path)
        assert rows[0]["type"] == "snap"
        assert json.loads(rows[0]["details"]) == {"from_angle": 171.25}
        assert rows[1]["details"] == ""

    def test_close_is_idempotent(self, tmp_path):
        logger = SessionLogger(tmp_path, session_id="demo")
        logger.close()
        logger.close()
        assert logger.closed

    def test_failed_events_open_closes_timeseries(self, tmp_path, monkeypatch):
        opened = []
        real_open = Path.open

        def open_or_fail(self, *args, **kwargs):
            if self.name == "events.csv":
                raise PermissionError("denied")
            handle = real_open(self, *args, **kwargs)
            opened.append(handle)
            return handle

        monkeypatch.setattr(Path, "open", open_or_fail)
        with pytest.raises(PermissionError):
            SessionLogger(tmp_path, session_id="demo")
        assert opened
        assert all(handle.closed for handle in opened)

    def test_write_meta(self, tmp_path):
        with SessionLogger(tmp_path, session_id="demo") as logger:
            logger.write_meta({"b": 1, "a": [1, 2]})
        assert json.loads(logger.meta_path.read_text(encoding="utf-8")) == {"a": [1, 2], "b": 1}


class TestControllerLogging:

    def test_controller_records_session(self, tmp_path):
        logger = SessionLogger(tmp_path, session_id="demo")
        controller = SimulationController(logger=logger)
        controller.select_tilt(AxialTilt.NONE)
        controller.select_season(Season.SUMMER)
        controller.begin_drag()
        controller.drag_to(190.0)
        controller.drag_to(200.0)
        controller.commit_snap()
        logger.close()

        meta = json.loads(logger.meta_path.read_text(encoding="utf-8"))
        assert meta["initial_season"] == "spring"
        assert meta["observer_latitude"] == 30.0

        events = _read_csv(logger.events_path)
        assert [row["type"] for row in events] == ["select_tilt", "select_season", "drag_start", "snap"]
        assert events[-1]["season"] == "summer"
        assert json.loads(events[-1]["details"]) == {"from_angle": 200.0}

        samples = _read_csv(logger.timeseries_path)
        assert [row["angle"] for row in samples] == ["190", "200"]
        assert samples[0]["elevation"] == "60"

    def test_drag_samples_can_be_disabled(self, tmp_path):
        logger = SessionLogger(tmp_path, session_id="demo")
        controller = SimulationController(logger=logger, log_drag_samples=False)
        controller.begin_drag()
        controller.drag_to(10.0)
        logger.close()
        assert _read_csv(logger.timeseries_path) == []
