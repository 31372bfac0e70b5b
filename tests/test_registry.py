from pathlib import Path

from core.registry import enabled_module_names, load_config, load_enabled_modules

CONFIG = Path(__file__).resolve().parents[1] / "config.toml"


def test_repo_config():
    cfg = load_config(str(CONFIG))
    assert enabled_module_names(cfg) == ["overview", "patients", "add_patient"]
    assert cfg["source"]["timeout"] == 15


def test_disabled_and_ordering():
    cfg = {"modules": {"patients": {"order": 2}, "overview": {"order": 5}, "add_patient": {"enabled": False}}}
    assert enabled_module_names(cfg) == ["patients", "overview"]


def test_modules_expose_tab_interface():
    cfg = load_config(str(CONFIG))
    mods = load_enabled_modules(cfg)
    assert [m.title for m in mods] == ["Overview", "Patients List", "Add Patient"]
    assert all(callable(m.render) for m in mods)
