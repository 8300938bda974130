"""Configuration management."""

import json
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from solar_sim.errors import ConfigurationError
from solar_sim.physics.body import Body
from solar_sim.physics.rotation import Spin


@dataclass
class Config:
    """Simulation configuration."""
    # Numerics
    precision: int = 128
    G: Optional[str] = None  # None: use the preset's constant
    dt: str = "1"
    integrator: str = "lagged_euler"

    # Scene: either a preset or an explicit body list
    preset: str = "sun_earth"
    preset_params: Dict[str, Any] = field(default_factory=dict)
    bodies: List[Dict[str, Any]] = field(default_factory=list)
    reference_frame: Optional[str] = None

    # Stepping
    steps: int = 100
    cadence: str = "frame"
    step_rate_hz: float = 30.0
    frame_time: float = 1.0 / 60.0

    # Output
    debug_every: int = 10


def load_config(config_path: str) -> Config:
    """Load configuration from file.

    Args:
        config_path: Path to config file (.json or .yaml)

    Returns:
        Config object
    """
    config_path = Path(config_path)

    with open(config_path, 'r') as f:
        if config_path.suffix in ('.yaml', '.yml'):
            data = yaml.safe_load(f) or {}
        else:
            data = json.load(f)

    known = set(Config.__dataclass_fields__)
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigurationError(f"Unknown config keys: {unknown}")
    return Config(**data)


def save_config(config: Config, output_path: str):
    """Save configuration to file.

    Args:
        config: Config object
        output_path: Output file path (.json or .yaml)
    """
    output_path = Path(output_path)
    data = asdict(config)

    with open(output_path, 'w') as f:
        if output_path.suffix in ('.yaml', '.yml'):
            yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)
        else:
            json.dump(data, f, indent=2)


def _vector(context, values, label: str, body_id: str):
    if values is None:
        return None
    if len(values) != 3:
        raise ConfigurationError(f"Body {body_id!r} {label} needs 3 components, got {values!r}")
    return context.vector(*(_scalar(v) for v in values))


def _scalar(value):
    # YAML reads 1.989e30 as a string; keep strings as-is so mpmath parses
    # them at full precision.
    if isinstance(value, bool):
        raise ConfigurationError(f"Expected a number, got {value!r}")
    return value


def body_from_dict(context, data: Dict[str, Any]) -> Body:
    """Build a Body from a config dictionary.

    Keys: ``id``, ``mass``, ``radius``, ``position`` (3 values), optional
    ``velocity`` (initial acceleration field), ``reference_frame`` (a YAML/JSON
    boolean) and ``angular_rate`` / ``spin_axis``. Numbers may be given as
    strings.

    Raises:
        ConfigurationError: If a required key is missing or any field is malformed
    """
    try:
        body_id = str(data["id"])
        mass = context.mpf(_scalar(data["mass"]))
        radius = context.mpf(_scalar(data["radius"]))
        position = _vector(context, data["position"], "position", body_id)
        velocity = _vector(context, data.get("velocity"), "velocity", body_id)

        spin = None
        if data.get("angular_rate") is not None:
            spin = Spin(
                float(_scalar(data["angular_rate"])),
                tuple(data.get("spin_axis", (0.0, 1.0, 0.0))),
            )
    except KeyError as e:
        raise ConfigurationError(f"Body entry missing required key {e.args[0]!r}: {data!r}") from None
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid body entry {data!r}: {e}") from e

    is_reference_frame = data.get("reference_frame", False)
    if not isinstance(is_reference_frame, bool):
        raise ConfigurationError(
            f"Body {body_id!r} reference_frame must be true or false, got {is_reference_frame!r}"
        )

    return Body(
        body_id=body_id,
        mass=mass,
        estimated_radius=radius,
        position=position,
        acceleration=velocity,
        is_reference_frame=is_reference_frame,
        spin=spin,
    )


def bodies_from_config(config: Config, context) -> List[Body]:
    """Build Bodies from ``config.bodies``."""
    return [body_from_dict(context, entry) for entry in config.bodies]
