from __future__ import annotations

import pytest

from api.style import WaveStyle, WaveStyleData, list_styles, resolve_style


@pytest.mark.parametrize(
    "style, expected",
    [
        (WaveStyle.CALM, (3, 14.0, 2600.0, 3000.0)),
        (WaveStyle.GENTLE, (5, 20.0, 1500.0, 2000.0)),
        (WaveStyle.ENERGETIC, (7, 28.0, 900.0, 1200.0)),
    ],
)
def test_presets_resolve_to_fixed_tuples(style: WaveStyle, expected: tuple) -> None:
    data = resolve_style(style)
    assert isinstance(data, WaveStyleData)
    assert data.as_tuple() == expected


def test_resolution_is_stable() -> None:
    assert resolve_style(WaveStyle.GENTLE) == resolve_style(WaveStyle.GENTLE)


@pytest.mark.parametrize("name", ["calm", "Calm", "CALM", " calm "])
def test_names_are_case_insensitive(name: str) -> None:
    assert resolve_style(name) == resolve_style(WaveStyle.CALM)


def test_unknown_name_raises_key_error() -> None:
    with pytest.raises(KeyError):
        resolve_style("stormy")


def test_presets_grow_monotonically() -> None:
    calm, gentle, energetic = (resolve_style(s) for s in WaveStyle)
    assert calm.wave_count < gentle.wave_count < energetic.wave_count
    assert calm.wave_amplitude < gentle.wave_amplitude < energetic.wave_amplitude
    # 速度は「1 周の時間」なので小さいほど速い
    assert calm.wave_speed > gentle.wave_speed > energetic.wave_speed
    assert (
        calm.vertical_oscillation_speed
        > gentle.vertical_oscillation_speed
        > energetic.vertical_oscillation_speed
    )


def test_list_styles_in_definition_order() -> None:
    assert list_styles() == ["calm", "gentle", "energetic"]


def test_unknown_name_error_lists_allowed_styles() -> None:
    with pytest.raises(KeyError, match="calm, gentle, energetic"):
        resolve_style("Stormy")
