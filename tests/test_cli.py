"""Tests for the command-line interface."""

import pytest
import yaml
from solar_sim.cli.main import main


def test_list_presets(capsys):
    """Test preset listing."""
    main(["--list-presets"])
    out = capsys.readouterr().out
    assert "Available presets:" in out
    assert "  - sun_earth" in out


def test_run_preset(capsys):
    """Test a short preset run with a row per step."""
    main(["--preset", "unit_two_body", "--steps", "3", "--debug-every", "1"])
    out = capsys.readouterr().out

    assert "Running simulation: unit_two_body with 2 bodies" in out
    assert "Reference frame: none" in out
    assert "Simulation complete! 3 gravity steps" in out


def test_run_fixed_cadence(capsys):
    """Test that the fixed cadence decouples gravity steps from frames."""
    main(["--preset", "triple", "--steps", "2", "--cadence", "fixed",
          "--rate", "4", "--frame-time", "0.5"])
    out = capsys.readouterr().out

    assert "Cadence: fixed" in out
    assert "Reference frame: Primary" in out
    assert "Simulation complete! 4 gravity steps" in out


def test_run_config_bodies(tmp_path, capsys):
    """Test explicit bodies from a YAML config."""
    path = tmp_path / "scene.yaml"
    path.write_text(yaml.safe_dump({
        "G": "1",
        "steps": 2,
        "bodies": [
            {"id": "left", "mass": 1, "radius": "0.1", "position": [0, 0, 0], "reference_frame": True},
            {"id": "right", "mass": 1, "radius": "0.1", "position": [2, 0, 0]},
        ],
    }))

    main(["--config", str(path)])
    out = capsys.readouterr().out

    assert "Running simulation: config bodies with 2 bodies" in out
    assert "Reference frame: left" in out
    assert "Simulation complete! 2 gravity steps" in out


def test_invalid_config_exits(tmp_path, capsys):
    """Test that configuration errors exit with status 1."""
    path = tmp_path / "scene.yaml"
    path.write_text(yaml.safe_dump({
        "bodies": [
            {"id": "a", "mass": 1, "radius": 1, "position": [0, 0, 0], "reference_frame": True},
            {"id": "b", "mass": 1, "radius": 1, "position": [1, 0, 0], "reference_frame": True},
        ],
    }))

    with pytest.raises(SystemExit) as exc_info:
        main(["--config", str(path)])

    assert exc_info.value.code == 1
    assert "Configuration error" in capsys.readouterr().out


def test_reference_frame_override(capsys):
    """Test that --reference-frame replaces the preset's reference body."""
    main(["--preset", "triple", "--reference-frame", "Inner", "--steps", "1"])
    out = capsys.readouterr().out
    assert "Reference frame: Inner" in out
    assert "Simulation complete! 1 gravity steps" in out

    main(["--preset", "sun_earth", "--reference-frame", "Earth", "--steps", "1"])
    assert "Reference frame: Earth" in capsys.readouterr().out


def test_no_reference_frame(capsys):
    """Test that --no-reference-frame moves every body in absolute coordinates."""
    main(["--preset", "triple", "--no-reference-frame", "--steps", "2"])
    out = capsys.readouterr().out
    assert "Reference frame: none" in out
    assert "Simulation complete! 2 gravity steps" in out
