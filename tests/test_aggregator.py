"""Tests for profile aggregation."""
import pytest

from quad_taste.catalog.library import Quad, QuadLibrary
from quad_taste.core.config import ScoringConfig
from quad_taste.core.taxonomy import ALL_AXES, ATTRIBUTE_AXES, Axis, Category
from quad_taste.scoring.aggregator import ProfileAggregator
from quad_taste.scoring.profile import TasteProfile
from quad_taste.selections.models import Selection


@pytest.fixture
def single_library(warmth_quad):
    return QuadLibrary([warmth_quad])


@pytest.fixture
def aggregator(single_library):
    return ProfileAggregator(single_library)


def _flat_quad(quad_id, values):
    return Quad(
        quad_id=quad_id,
        category=Category.KITCHENS,
        images=tuple(f"{quad_id}_{i}_AS5.jpg" for i in range(1, 5)),
        attributes={axis: values for axis in ATTRIBUTE_AXES},
    )


def _sel(quad_id="LS-900", f1=3, f2=1, least=0, session_id="s1", skipped=False):
    return Selection(session_id, quad_id, favorite1=f1, favorite2=f2, least_favorite=least, skipped=skipped)


# ── Weighted aggregation ────────────────────────────────────────────


class TestAggregation:

    def test_no_selections_gives_midpoint(self, library):
        profile = ProfileAggregator(library).aggregate("s1", [])
        assert all(profile.score(axis) == 5.0 for axis in ALL_AXES)
        assert profile.completed_quads == 0
        assert profile.skipped_quads == 0
        assert profile.total_quads == 110

    def test_weighted_warmth(self, aggregator):
        # (9*2 + 5*1 + 2*-2) / 5 = 3.8 -> 8.8
        profile = aggregator.aggregate("s1", [_sel()])
        assert profile.score(Axis.WARMTH) == pytest.approx(8.8)
        assert profile.completed_quads == 1

    def test_lower_favorite_lowers_warmth(self, aggregator):
        original = aggregator.aggregate("s1", [_sel(f1=3)])
        changed = aggregator.aggregate("s1", [_sel(f1=2)])
        assert changed.score(Axis.WARMTH) < original.score(Axis.WARMTH)
        assert changed.score(Axis.WARMTH) == pytest.approx(7.6)

    def test_least_favorite_pulls_away(self, aggregator):
        rejects_cool = aggregator.aggregate("s1", [_sel(f1=2, f2=1, least=0)])
        rejects_warm = aggregator.aggregate("s1", [_sel(f1=2, f2=1, least=3)])
        assert rejects_cool.score(Axis.WARMTH) > rejects_warm.score(Axis.WARMTH)

    def test_openness_and_art_focus_stay_at_midpoint(self, aggregator):
        profile = aggregator.aggregate("s1", [_sel()])
        assert profile.score(Axis.OPENNESS) == 5.0
        assert profile.score(Axis.ART_FOCUS) == 5.0

    def test_idempotent(self, library):
        aggregator = ProfileAggregator(library)
        selections = [
            Selection("s1", q.quad_id, favorite1=i % 4, favorite2=(i + 1) % 4, least_favorite=(i + 2) % 4)
            for i, q in enumerate(library.quads[:40])
        ]
        first = aggregator.aggregate("s1", selections)
        second = aggregator.aggregate("s1", selections)
        assert first == second

    def test_input_order_does_not_matter(self, library):
        aggregator = ProfileAggregator(library)
        selections = [
            Selection("s1", q.quad_id, favorite1=3, favorite2=2, least_favorite=0)
            for q in library.quads[:25]
        ]
        assert aggregator.aggregate("s1", selections) == aggregator.aggregate("s1", selections[::-1])

    def test_skipped_counted_not_scored(self, aggregator):
        profile = aggregator.aggregate("s1", [_sel(skipped=True)])
        assert profile.skipped_quads == 1
        assert profile.completed_quads == 0
        assert profile.score(Axis.WARMTH) == 5.0

    def test_unresolved_selection_ignored(self, aggregator):
        partial = Selection("s1", "LS-900", favorite1=3)
        profile = aggregator.aggregate("s1", [partial])
        assert profile.completed_quads == 0
        assert profile.score(Axis.WARMTH) == 5.0

    def test_unknown_quad_excluded(self, aggregator):
        profile = aggregator.aggregate("s1", [_sel(), _sel(quad_id="ZZ-404")])
        assert profile.completed_quads == 1
        assert profile.score(Axis.WARMTH) == pytest.approx(8.8)

    def test_skip_for_unknown_quad_not_counted(self, aggregator):
        profile = aggregator.aggregate("s1", [_sel(skipped=True), _sel(quad_id="ZZ-404", skipped=True)])
        assert profile.skipped_quads == 1
        assert profile.completed_quads == 0

    def test_other_sessions_ignored(self, aggregator):
        profile = aggregator.aggregate("s1", [_sel(session_id="s2")])
        assert profile.completed_quads == 0

    def test_total_quads_is_catalog_size(self, library):
        selections = [Selection("s1", "EA-001", favorite1=0, favorite2=1, least_favorite=2)]
        profile = ProfileAggregator(library).aggregate("s1", selections)
        assert profile.total_quads == len(library)
        assert profile.completed_quads == 1

    def test_top_materials_empty(self, aggregator):
        assert aggregator.aggregate("s1", [_sel()]).top_materials == []


# ── Scale mapping ───────────────────────────────────────────────────


class TestScale:

    def test_clamped_high(self, single_library):
        aggregator = ProfileAggregator(single_library, ScoringConfig(scale_factor=10.0))
        profile = aggregator.aggregate("s1", [_sel()])
        assert profile.score(Axis.WARMTH) == 10.0

    def test_clamped_low(self, single_library):
        aggregator = ProfileAggregator(single_library, ScoringConfig(scale_offset=-20.0))
        profile = aggregator.aggregate("s1", [_sel()])
        assert profile.score(Axis.WARMTH) == 1.0

    def test_rounding_precision(self, single_library):
        aggregator = ProfileAggregator(single_library, ScoringConfig(score_precision=0))
        assert aggregator.scale(3.8) == 9.0

    def test_ties_round_up(self, aggregator):
        assert aggregator.scale(0.25) == 5.3
        assert aggregator.scale(0.75) == 5.8
        assert aggregator.scale(-0.25) == 4.8

    def test_tie_from_aggregation(self):
        # Each quad adds 2a + b - 2c at weight 5: 1 + 1 + 1 + 2 over 20 = 0.25
        quads = [_flat_quad(f"KT-90{i}", (1, 1, 1, 1)) for i in range(3)]
        quads.append(_flat_quad("KT-903", (1, 2, 1, 1)))
        aggregator = ProfileAggregator(QuadLibrary(quads))
        selections = [Selection("s1", q.quad_id, favorite1=0, favorite2=1, least_favorite=2) for q in quads]

        profile = aggregator.aggregate("s1", selections)
        assert profile.score(Axis.WARMTH) == 5.3
        assert profile.persisted_scores()[Axis.WARMTH] == 53

    def test_custom_weights(self, single_library):
        config = ScoringConfig(favorite1_weight=1.0, favorite2_weight=0.5, least_favorite_weight=-1.0)
        aggregator = ProfileAggregator(single_library, config)
        # (9 + 2.5 - 2) / 2.5 = 3.8 -> 8.8
        assert aggregator.aggregate("s1", [_sel()]).score(Axis.WARMTH) == pytest.approx(8.8)


# ── TasteProfile ────────────────────────────────────────────────────


class TestTasteProfile:

    def test_persisted_scores(self, aggregator):
        profile = aggregator.aggregate("s1", [_sel()])
        persisted = profile.persisted_scores()
        assert persisted[Axis.WARMTH] == 88
        assert persisted[Axis.OPENNESS] == 50
        assert all(10 <= v <= 100 for v in persisted.values())

    def test_dict_round_trip(self, aggregator):
        profile = aggregator.aggregate("s1", [_sel()])
        data = profile.to_dict()
        assert data["warmth_score"] == 88
        assert data["art_focus_score"] == 50
        assert data["top_materials"] == []
        assert TasteProfile.from_dict(data) == profile

    def test_top_materials_json_string(self):
        data = {f"{axis.value}_score": 50 for axis in ALL_AXES}
        data.update({"session_id": "s1", "top_materials": "[]"})
        assert TasteProfile.from_dict(data).top_materials == []

    def test_missing_axis_rejected(self):
        with pytest.raises(ValueError, match="missing scores"):
            TasteProfile("s1", scores={Axis.WARMTH: 5.0})

    def test_style_label_from_tradition(self):
        scores = {axis: 5.0 for axis in ALL_AXES}
        assert TasteProfile("s1", scores=scores).style_label() == "Transitional"
        scores[Axis.TRADITION] = 3.0
        assert TasteProfile("s1", scores=scores).style_label() == "Contemporary"
        scores[Axis.TRADITION] = 8.0
        assert TasteProfile("s1", scores=scores).style_label() == "Traditional"
