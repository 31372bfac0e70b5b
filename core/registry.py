from typing import Any, Dict, List
from importlib import import_module

# Python 3.11 has tomllib; fall back to toml if needed
try:
    import tomllib  # type: ignore
    _TOML_MODE = "rb"
except Exception:  # pragma: no cover
    import toml as tomllib  # type: ignore
    _TOML_MODE = "r"

from core.types import DashboardTab

CONFIG_PATH = "config.toml"


def load_config(path: str = CONFIG_PATH) -> Dict[str, Any]:
    with open(path, _TOML_MODE) as f:
        return tomllib.load(f)


def enabled_module_names(cfg: Dict[str, Any]) -> List[str]:
    mod_cfg = cfg.get("modules", {})
    ordered = sorted(((m, v.get("order", 999)) for m, v in mod_cfg.items() if v.get("enabled", True)), key=lambda x: x[1])
    return [name for name, _ in ordered]


def load_enabled_modules(cfg: Dict[str, Any]) -> List[DashboardTab]:
    mods = []
    for name in enabled_module_names(cfg):
        mod = import_module(f"modules.{name}.{name}")
        mods.append(mod)
    return mods
