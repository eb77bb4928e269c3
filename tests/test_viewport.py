from __future__ import annotations

import pytest

from worldmap.model.viewport import SizeHints, ViewportScaler


@pytest.fixture
def scaler() -> ViewportScaler:
    return ViewportScaler(1009.0, 665.0)


def test_aspect_ratio(scaler: ViewportScaler) -> None:
    assert scaler.aspect_ratio == pytest.approx(665.0 / 1009.0)


def test_wide_container_is_limited_by_height(scaler: ViewportScaler) -> None:
    box = scaler.fit(2000.0, 500.0)

    assert box is not None
    assert box.height == pytest.approx(500.0)
    assert box.height / box.width == pytest.approx(scaler.aspect_ratio)
    assert box.x + box.width / 2 == pytest.approx(2000.0 / 2)
    assert box.y == pytest.approx(0.0)


def test_tall_container_is_limited_by_width(scaler: ViewportScaler) -> None:
    box = scaler.fit(500.0, 2000.0)

    assert box is not None
    assert box.width == pytest.approx(500.0)
    assert box.height == pytest.approx(500.0 * 665.0 / 1009.0)
    assert box.x == pytest.approx(0.0)
    assert box.y + box.height / 2 == pytest.approx(2000.0 / 2)


def test_exact_fit_has_no_offset(scaler: ViewportScaler) -> None:
    box = scaler.fit(1009.0, 665.0)
    assert box is not None
    assert (box.x, box.y) == pytest.approx((0.0, 0.0))
    assert box.scale == pytest.approx(1.0)


def test_scale_is_relative_to_design_width(scaler: ViewportScaler) -> None:
    box = scaler.fit(2018.0, 1330.0)
    assert box is not None
    assert box.scale == pytest.approx(2.0)


@pytest.mark.parametrize(("w", "h"), [(0.0, 0.0), (0.0, 500.0), (500.0, 0.0), (-10.0, 300.0)])
def test_degenerate_sizes_keep_previous_layout(scaler: ViewportScaler, w: float, h: float) -> None:
    previous = scaler.fit(800.0, 600.0)
    assert scaler.fit(w, h) is None
    assert scaler.content_box == previous


def test_content_box_starts_empty(scaler: ViewportScaler) -> None:
    assert scaler.content_box is None


def test_size_hints_defaults() -> None:
    hints = SizeHints()
    assert hints.minimum == (100.0, 66.0)
    assert hints.preferred == (1009.0, 665.0)
    assert hints.maximum == (2018.0, 1330.0)


def test_size_hints_do_not_clamp_content(scaler: ViewportScaler) -> None:
    box = scaler.fit(5000.0, 5000.0)
    assert box is not None
    assert box.width == pytest.approx(5000.0)


def test_invalid_design_size() -> None:
    with pytest.raises(ValueError):
        ViewportScaler(0.0, 665.0)


def test_integer_container_sizes_give_float_boxes(scaler: ViewportScaler) -> None:
    box = scaler.fit(1000, 200)
    assert box is not None
    for value in (box.x, box.y, box.width, box.height, box.scale):
        assert isinstance(value, float)
