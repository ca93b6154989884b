"""Configuration loader using OmegaConf."""

from __future__ import annotations

from pathlib import Path
from omegaconf import OmegaConf, DictConfig

CONFIGS_DIR = Path(__file__).resolve().parent / "configs"


def load_config(
    config_path: str | None = None,
    hardware_override: str | None = None,
    cli_overrides: list[str] | None = None,
) -> DictConfig:
    """Load and merge configuration.

    Priority (highest wins): CLI overrides > extra config file > hardware override > default.yaml
    """
    base = OmegaConf.load(CONFIGS_DIR / "default.yaml")

    # Merge referenced sub-configs (e.g. hardware: hardware/mock.yaml)
    for key in ("hardware", "engine"):
        ref = base.get(key)
        if isinstance(ref, str):
            sub_path = CONFIGS_DIR / ref
            if not sub_path.exists():
                raise FileNotFoundError(f"Config for '{key}' not found: {sub_path}")
            base[key] = OmegaConf.load(sub_path)

    # Hardware override (e.g., --hardware realsense selects hardware/realsense.yaml)
    if hardware_override:
        hw_path = CONFIGS_DIR / "hardware" / f"{hardware_override}.yaml"
        if not hw_path.exists():
            raise ValueError(f"Unknown hardware config: {hardware_override}")
        base.hardware = OmegaConf.merge(base.hardware, OmegaConf.load(hw_path))

    # Optional extra config file
    if config_path:
        extra = OmegaConf.load(config_path)
        base = OmegaConf.merge(base, extra)

    # CLI dot-notation overrides (e.g., engine.cooldowns.speech=5.0)
    if cli_overrides:
        cli = OmegaConf.from_dotlist(cli_overrides)
        base = OmegaConf.merge(base, cli)

    return base
