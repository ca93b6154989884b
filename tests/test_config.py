import pytest

from depthalert.config import load_config


def test_defaults():
    cfg = load_config()
    assert cfg.engine.thresholds.critical == 0.5
    assert cfg.engine.thresholds.warning == 1.0
    assert cfg.engine.thresholds.caution == 2.0
    assert cfg.engine.cooldowns.haptic == 0.5
    assert cfg.engine.cooldowns.speech == 3.0
    assert cfg.engine.analyzer.stride == 4
    assert cfg.hardware.source.type == "mock"
    assert cfg.hardware.announcer.type == "mock"


def test_cli_overrides_win():
    cfg = load_config(cli_overrides=["engine.cooldowns.speech=5.0", "loop_hz=10"])
    assert cfg.engine.cooldowns.speech == 5.0
    assert cfg.loop_hz == 10
    assert cfg.engine.cooldowns.haptic == 0.5


def test_hardware_override():
    cfg = load_config(hardware_override="realsense")
    assert cfg.hardware.source.type == "realsense"
    assert cfg.hardware.announcer.type == "pyttsx3"
    assert cfg.hardware.haptics.type == "http"


def test_unknown_hardware_override():
    with pytest.raises(ValueError):
        load_config(hardware_override="does-not-exist")


def test_extra_config_file(tmp_path):
    extra = tmp_path / "extra.yaml"
    extra.write_text("engine:\n  thresholds:\n    caution: 3.0\n")
    cfg = load_config(config_path=str(extra), cli_overrides=["engine.thresholds.caution=2.5"])
    assert cfg.engine.thresholds.caution == 2.5
    assert cfg.engine.thresholds.critical == 0.5
