"""YAML configuration loader.

Configuration files live in the package's config/ directory and are
returned as OmegaConf DictConfig objects so callers can merge overrides.
"""

from pathlib import Path
from typing import Any

from omegaconf import DictConfig, OmegaConf
import yaml

from snake_ik.fabrik import FABRIK
from snake_ik.ik_chain import IKChain

_CONFIG_DIR = Path(__file__).resolve().parent / "config"


def get_config_dir() -> Path:
    """Get the absolute path to the config/ directory."""
    return _CONFIG_DIR


def load_yaml(file_path: str | Path) -> dict:
    """Load a YAML file and return as dict.

    Args:
        file_path: Path to the YAML file (absolute or relative to config dir).

    Returns:
        Parsed YAML content as dict.
    """
    path = Path(file_path)
    if not path.is_absolute():
        path = _CONFIG_DIR / path
    with open(path, "r") as f:
        return yaml.safe_load(f) or {}


def load_config(
    config_name: str = "default",
    overrides: dict[str, Any] | None = None,
) -> DictConfig:
    """Load configuration by name with optional overrides.

    Loads config/{config_name}.yaml and merges any specified overrides on top.
    """
    cfg = OmegaConf.create(load_yaml(f"{config_name}.yaml"))
    if overrides:
        cfg = OmegaConf.merge(cfg, OmegaConf.create(overrides))
    return cfg


def load_chain_config(
    chain_name: str,
    overrides: dict[str, Any] | None = None,
    config_name: str = "default",
) -> DictConfig:
    """Load one chain variant (e.g. 'snake', 'arm').

    Raises:
        KeyError: If the chain is not configured.
    """
    cfg = load_config(config_name)
    if chain_name not in cfg.chains:
        raise KeyError(f"unknown chain '{chain_name}', expected one of {list(cfg.chains)}")
    chain_cfg = cfg.chains[chain_name]
    if overrides:
        chain_cfg = OmegaConf.merge(chain_cfg, OmegaConf.create(overrides))
    return chain_cfg


def merge_configs(*configs: DictConfig | dict) -> DictConfig:
    """Merge multiple configurations, later configs take precedence."""
    result = OmegaConf.create({})
    for cfg in configs:
        if isinstance(cfg, dict):
            cfg = OmegaConf.create(cfg)
        result = OmegaConf.merge(result, cfg)
    return result


def build_solver(chain_cfg: DictConfig | dict) -> FABRIK:
    """Build a chain and its FABRIK solver from a chain config section."""
    if isinstance(chain_cfg, dict):
        chain_cfg = OmegaConf.create(chain_cfg)
    chain = IKChain(
        chain_cfg.num_joints,
        chain_cfg.segment_length,
        anchor=list(chain_cfg.get("anchor", [0.0, 0.0, 0.0])),
        direction=list(chain_cfg.get("direction", [1.0, 0.0, 0.0])),
    )
    return FABRIK(
        chain,
        tolerance=chain_cfg.get("tolerance", 0.05),
        max_iter=chain_cfg.get("max_iterations", 20),
    )
