"""Preset scenes."""

from typing import List

from solar_sim.presets.base import Preset
from solar_sim.presets.solar import SunEarth
from solar_sim.presets.toy import Triple, UnitTwoBody

_PRESETS = {
    "sun_earth": SunEarth,
    "unit_two_body": UnitTwoBody,
    "triple": Triple,
}


def list_presets() -> List[str]:
    return list(_PRESETS)


def get_preset(name: str, context, **kwargs) -> Preset:
    """Get preset by name."""
    preset_class = _PRESETS.get(name.lower())
    if preset_class is None:
        raise ValueError(f"Unknown preset: {name}. Available: {list_presets()}")
    return preset_class(context, **kwargs)


__all__ = ["Preset", "SunEarth", "UnitTwoBody", "Triple", "get_preset", "list_presets"]
