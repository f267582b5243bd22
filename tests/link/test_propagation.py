"""Tests for the range rule, decay curves and BandTable."""

from __future__ import annotations

import math

import numpy as np
import pytest

from domain.link.config import DEFAULT_BAND_TABLE, STOCK_SECTIONS
from domain.link.propagation import (
    BandTable,
    PiecewiseLinearDecay,
    SmoothstepDecay,
    max_distance,
)
from domain.link.value_objects import DistanceBand, DistanceSection

CURVES = [
    SmoothstepDecay(),
    PiecewiseLinearDecay(),
    PiecewiseLinearDecay(knee_fraction=0.3, knee_strength=0.9),
]


def _table(decay=None) -> BandTable:
    if decay is None:
        return DEFAULT_BAND_TABLE
    return DEFAULT_BAND_TABLE.model_copy(update={"decay": decay})


# ===========================================================================
# max_distance
# ===========================================================================
def test_max_distance_known_value():
    assert max_distance(100, 400) == pytest.approx(200.0)


@pytest.mark.parametrize("a,b", [(1e200, 1e200), (1e308, 1e10), (1e300, 1e-300)])
def test_max_distance_large_powers_do_not_overflow(a, b):
    result = max_distance(a, b)

    assert math.isfinite(result)
    assert result == pytest.approx(math.sqrt(a) * math.sqrt(b))


def test_max_distance_huge_equal_powers():
    assert max_distance(1e200, 1e200) == pytest.approx(1e200)


@pytest.mark.parametrize("a,b", [(0, 0), (1, 2), (5e3, 250e9), (1e-6, 1e12)])
def test_max_distance_is_symmetric(a, b):
    assert max_distance(a, b) == max_distance(b, a)


@pytest.mark.parametrize("a", [0, 1, 5e3, 1e30])
def test_max_distance_with_zero_power_is_zero(a):
    assert max_distance(a, 0) == 0
    assert max_distance(0, a) == 0


def test_max_distance_default_link():
    # DSN Lv.3 to a command module
    assert max_distance(250e9, 5e3) == pytest.approx(math.sqrt(1.25e15))


@pytest.mark.parametrize("a,b", [(-1, 1), (1, -1), (math.inf, 1), (math.nan, 1)])
def test_max_distance_rejects_invalid_power(a, b):
    with pytest.raises(ValueError):
        max_distance(a, b)


# ===========================================================================
# strength_at
# ===========================================================================
@pytest.mark.parametrize("decay", CURVES)
@pytest.mark.parametrize("d", [1.0, 35_355_339.06, 1e12])
def test_strength_is_one_at_zero_and_zero_at_max(decay, d):
    table = _table(decay)

    assert table.strength_at(0, d) == 1.0
    assert table.strength_at(d, d) == 0.0


@pytest.mark.parametrize("x", [0, 1, 1e9])
def test_strength_not_applicable_without_link(x):
    assert DEFAULT_BAND_TABLE.strength_at(x, 0) is None


@pytest.mark.parametrize("decay", CURVES)
def test_strength_beyond_max_distance_is_zero(decay):
    assert _table(decay).strength_at(2_000, 1_000) == 0.0


@pytest.mark.parametrize("decay", CURVES)
def test_strength_is_monotonic_non_increasing(decay):
    table = _table(decay)
    d = 1_000.0

    strengths = [table.strength_at(x, d) for x in np.linspace(0, 1.2 * d, 241)]

    assert all(a >= b for a, b in zip(strengths, strengths[1:]))
    assert all(0.0 <= s <= 1.0 for s in strengths)


def test_smoothstep_values():
    table = _table(SmoothstepDecay())

    assert table.strength_at(250, 1000) == pytest.approx(0.84375)
    assert table.strength_at(500, 1000) == pytest.approx(0.5)
    assert table.strength_at(750, 1000) == pytest.approx(0.15625)


def test_piecewise_is_continuous_at_knee():
    decay = PiecewiseLinearDecay(knee_fraction=0.5, knee_strength=0.75)
    table = _table(decay)

    at_knee = table.strength_at(500, 1000)
    assert at_knee == pytest.approx(0.75)
    assert table.strength_at(500 - 1e-6, 1000) == pytest.approx(at_knee, abs=1e-6)
    assert table.strength_at(500 + 1e-6, 1000) == pytest.approx(at_knee, abs=1e-6)


def test_piecewise_is_gentle_then_steep():
    table = _table(PiecewiseLinearDecay(knee_fraction=0.5, knee_strength=0.75))

    first_half_drop = 1.0 - table.strength_at(500, 1000)
    second_half_drop = table.strength_at(500, 1000) - table.strength_at(1000, 1000)

    assert first_half_drop < second_half_drop


def test_strength_rejects_negative_inputs():
    with pytest.raises(ValueError):
        DEFAULT_BAND_TABLE.strength_at(-1, 100)
    with pytest.raises(ValueError):
        DEFAULT_BAND_TABLE.strength_at(1, -100)


# ===========================================================================
# Band partition invariant
# ===========================================================================
def test_default_bands_partition_unit_interval():
    bands = DEFAULT_BAND_TABLE.bands

    assert bands[0].near_fraction == 0
    assert bands[-1].far_fraction == 1
    for prev, band in zip(bands, bands[1:]):
        assert prev.far_fraction == band.near_fraction


def _band(label: str, near: float, far: float) -> DistanceBand:
    return DistanceBand(label=label, near_fraction=near, far_fraction=far)


@pytest.mark.parametrize(
    "bands",
    [
        (),
        (_band("A", 0.1, 1.0),),
        (_band("A", 0.0, 0.9),),
        (_band("A", 0.0, 0.5), _band("B", 0.6, 1.0)),
        (_band("A", 0.0, 0.6), _band("B", 0.5, 1.0)),
    ],
)
def test_band_table_rejects_gaps_and_overlaps(bands):
    with pytest.raises(ValueError):
        BandTable(bands=bands)


@pytest.mark.parametrize("near,far", [(0.5, 0.5), (0.6, 0.4), (-0.1, 0.5), (0.0, 1.1)])
def test_distance_band_rejects_bad_fractions(near, far):
    with pytest.raises(ValueError):
        _band("X", near, far)


def test_distance_section_rejects_reversed_range():
    with pytest.raises(ValueError):
        DistanceSection(label="X", near_m=10, far_m=5)


def test_band_table_decay_from_mapping():
    table = BandTable.model_validate(
        {
            "bands": [{"label": "All", "near_fraction": 0, "far_fraction": 1}],
            "decay": {"kind": "piecewise", "knee_fraction": 0.4, "knee_strength": 0.8},
        }
    )

    assert isinstance(table.decay, PiecewiseLinearDecay)
    assert table.decay.knee_fraction == 0.4


def test_band_table_defaults_to_smoothstep():
    table = BandTable(bands=(_band("All", 0.0, 1.0),))

    assert isinstance(table.decay, SmoothstepDecay)


# ===========================================================================
# evaluate / evaluate_sections
# ===========================================================================
def test_evaluate_reports_every_band_in_order():
    entries = DEFAULT_BAND_TABLE.evaluate(1_000.0)

    assert [e.label for e in entries] == ["Near", "Mid", "Far", "Edge"]
    assert entries[0].strength_at_near == 1.0
    assert entries[-1].strength_at_far == 0.0
    assert entries[1].strength_at_near == pytest.approx(0.84375)
    assert entries[1].strength_at_far == pytest.approx(0.5)
    for prev, entry in zip(entries, entries[1:]):
        assert prev.strength_at_far == pytest.approx(entry.strength_at_near)


def test_evaluate_without_link_is_not_applicable():
    entries = DEFAULT_BAND_TABLE.evaluate(0.0)

    assert len(entries) == 4
    assert all(e.strength_at_near is None and e.strength_at_far is None for e in entries)


def test_evaluate_sections_absolute_distances():
    sections = (
        DistanceSection(label="Close", near_m=0, far_m=500),
        DistanceSection(label="Out of range", near_m=2_000, far_m=3_000),
    )

    close, far = DEFAULT_BAND_TABLE.evaluate_sections(sections, 1_000.0)

    assert close.strength_at_near == 1.0
    assert close.strength_at_far == pytest.approx(0.5)
    assert far.strength_at_near == 0.0
    assert far.strength_at_far == 0.0


def test_evaluate_sections_empty():
    assert DEFAULT_BAND_TABLE.evaluate_sections((), 1_000.0) == ()


def test_stock_sections_are_ordered_sensibly():
    for section in STOCK_SECTIONS:
        assert 0 <= section.near_m <= section.far_m
