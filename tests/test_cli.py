import json

import pytest

from spring_animation.cli import parse_args
from spring_animation.config import SpringPresetRegistry, ensure_default_presets_registered
from spring_animation.physics.spring import SpringConfig


def make_presets():
    presets = SpringPresetRegistry()
    ensure_default_presets_registered(presets)
    return presets


def test_default_preset_is_resolved():
    args = parse_args([], make_presets())
    assert args.config == SpringConfig()
    assert not args.debug
    assert args.log_file is None


def test_unknown_preset_is_a_usage_error_listing_presets(capsys):
    with pytest.raises(SystemExit) as excinfo:
        parse_args(["--preset", "wobbly"], make_presets())
    assert excinfo.value.code == 2
    err = capsys.readouterr().err
    assert "unknown preset 'wobbly'" in err
    for name in ("smooth", "snappy", "bouncy"):
        assert name in err


def test_presets_file_can_define_the_chosen_preset(tmp_path):
    path = tmp_path / "presets.json"
    path.write_text(json.dumps({"wobbly": {"duration": 1.0, "damping_ratio": 0.3}}), encoding="utf-8")
    args = parse_args(["--preset", "wobbly", "--presets-file", str(path)], make_presets())
    assert args.config == SpringConfig(duration=1.0, damping_ratio=0.3)


def test_missing_presets_file_is_a_usage_error(tmp_path, capsys):
    with pytest.raises(SystemExit):
        parse_args(["--presets-file", str(tmp_path / "absent.json")], make_presets())
    assert "cannot load presets" in capsys.readouterr().err
