"""Tests for the simulation controller and its read model."""
import math

import pytest

from season_sim.core.compositor import rotate
from season_sim.core.config import OrbitCfg
from season_sim.core.controller import SimulationController
from season_sim.core.model import RenderModel, SimState
from season_sim.data.seasons import SEASONS, TILT_EXPLANATIONS, AxialTilt, Season


# ── Initial state ──────────────────────────────────────────────────

class TestInitialState:

    def test_defaults(self, controller):
        state = controller.state
        assert state.tilt is AxialTilt.EARTH
        assert state.season is Season.SPRING
        assert state.orbital_angle == 90.0
        assert state.is_dragging is False

    def test_state_property_is_a_copy(self, controller):
        state = controller.state
        state.orbital_angle = 12.0
        assert controller.orbital_angle == 90.0

    def test_custom_initial_state(self):
        controller = SimulationController(state=SimState(tilt=AxialTilt.NONE, season=Season.WINTER, orbital_angle=0.0))
        assert controller.tilt is AxialTilt.NONE
        assert controller.body_position() == pytest.approx((520.0, 150.0))


# ── Controls ───────────────────────────────────────────────────────

class TestControls:

    def test_select_season_sets_angle_atomically(self, controller):
        controller.select_season(Season.AUTUMN)
        assert controller.season is Season.AUTUMN
        assert controller.orbital_angle == 270.0

    def test_select_tilt_keeps_angle(self, controller):
        controller.select_tilt(AxialTilt.NONE)
        assert controller.tilt is AxialTilt.NONE
        assert controller.orbital_angle == 90.0
        assert controller.season is Season.SPRING

    def test_select_accepts_raw_values(self, controller):
        controller.select_tilt(0.0)
        controller.select_season("summer")
        assert controller.tilt is AxialTilt.NONE
        assert controller.season is Season.SUMMER

    def test_unknown_season_raises(self, controller):
        with pytest.raises(ValueError):
            controller.select_season("monsoon")


# ── Dragging ───────────────────────────────────────────────────────

class TestDragging:

    def test_live_angle_is_normalised(self, controller):
        controller.begin_drag()
        controller.drag_to(365.0)
        assert controller.orbital_angle == pytest.approx(5.0)
        controller.drag_to(-10.0)
        assert controller.orbital_angle == pytest.approx(350.0)

    def test_live_season_follows_angle(self, controller):
        controller.begin_drag()
        controller.drag_to(170.0)
        assert controller.season is Season.SUMMER
        assert controller.elevation() == 83.5
        assert controller.orbital_angle == 170.0

    def test_live_season_near_wrap(self, controller):
        controller.begin_drag()
        controller.drag_to(359.0)
        assert controller.season is Season.WINTER

    def test_commit_snap(self, controller):
        controller.begin_drag()
        controller.drag_to(260.0)
        assert controller.commit_snap() is Season.AUTUMN
        assert controller.orbital_angle == 270.0
        assert not controller.is_dragging

    def test_drag_to_without_drag_keeps_rest_state(self, controller):
        controller.drag_to(123.0)
        state = controller.state
        assert not state.is_dragging
        assert state.orbital_angle == 90.0
        assert state.season is Season.SPRING

    def test_commit_without_drag_is_silent(self, controller):
        models = []
        controller.subscribe(models.append)
        assert controller.commit_snap() is Season.SPRING
        assert controller.orbital_angle == 90.0
        assert models == []

    def test_commit_on_canonical_angle_is_unchanged(self, controller):
        controller.begin_drag()
        assert controller.commit_snap() is Season.SPRING
        assert controller.orbital_angle == 90.0


# ── Read model ─────────────────────────────────────────────────────

class TestReadModel:

    def test_read_model_has_no_side_effects(self, controller):
        controller.begin_drag()
        controller.drag_to(44.0)
        before = controller.state
        controller.read_model()
        controller.read_model()
        assert controller.state == before

    def test_default_model(self, controller):
        model = controller.read_model()
        assert isinstance(model, RenderModel)
        assert model.body_position == pytest.approx((300.0, 250.0))
        assert model.body_rotation == 23.5
        assert model.elevation == 60.0
        assert model.elevation_label == "60.0°"
        assert model.indicator_start == (300.0, 150.0)
        assert model.indicator_end == model.site_position
        assert model.explanation == TILT_EXPLANATIONS[AxialTilt.EARTH]
        assert model.season_description == SEASONS[Season.SPRING].description
        assert model.season_selection_enabled

    def test_site_is_rotated_then_translated(self, controller):
        model = controller.read_model()
        dx, dy = rotate((0.0, -7.5), 23.5)
        assert model.site_position == pytest.approx((300.0 + dx, 250.0 + dy))
        rad = math.radians(23.5)
        assert model.site_position == pytest.approx((300.0 + 7.5 * math.sin(rad), 250.0 - 7.5 * math.cos(rad)))

    def test_summer_site_without_tilt(self, controller):
        controller.select_tilt(AxialTilt.NONE)
        controller.select_season(Season.SUMMER)
        model = controller.read_model()
        assert model.site_position == pytest.approx((80.0 + 30.0 * math.cos(math.radians(30.0)), 135.0))

    def test_no_tilt_hides_season_text(self, controller):
        controller.select_tilt(AxialTilt.NONE)
        model = controller.read_model()
        assert model.season_description is None
        assert not model.season_selection_enabled
        assert model.elevation == 60.0
        assert model.body_rotation == 0.0

    def test_elevation_label_rounds_to_one_decimal(self, controller):
        controller.select_season(Season.WINTER)
        assert controller.read_model().elevation_label == "36.5°"

    def test_model_is_frozen(self, controller):
        model = controller.read_model()
        with pytest.raises(AttributeError):
            model.elevation = 1.0

    def test_custom_config(self):
        cfg = OrbitCfg(center_x=0.0, center_y=0.0, radius_x=10.0, radius_y=5.0, body_radius=2.0)
        controller = SimulationController(cfg)
        model = controller.read_model()
        assert model.body_position == pytest.approx((0.0, 5.0), abs=1e-12)
        assert model.indicator_start == (0.0, 0.0)


# ── Subscriptions ──────────────────────────────────────────────────

class TestSubscriptions:

    def test_each_mutation_notifies(self, controller):
        models = []
        controller.subscribe(models.append)
        controller.select_tilt(AxialTilt.NONE)
        controller.select_season(Season.SUMMER)
        controller.begin_drag()
        controller.drag_to(200.0)
        controller.commit_snap()
        assert len(models) == 5
        assert models[-1].orbital_angle == 180.0
        assert models[3].is_dragging

    def test_unsubscribe(self, controller):
        models = []
        unsubscribe = controller.subscribe(models.append)
        unsubscribe()
        unsubscribe()
        controller.select_season(Season.WINTER)
        assert models == []

    def test_reads_do_not_notify(self, controller):
        models = []
        controller.subscribe(models.append)
        controller.read_model()
        controller.body_position()
        controller.elevation()
        assert models == []


class TestConfig:

    def test_invalid_radii(self):
        with pytest.raises(ValueError):
            OrbitCfg(radius_x=0.0)
        with pytest.raises(ValueError):
            OrbitCfg(body_radius=-1.0)

    def test_frozen(self):
        with pytest.raises(AttributeError):
            OrbitCfg().radius_x = 1.0
