"""Shared fixtures: every test gets its own config root and active folder."""

import pytest
from PyQt6.QtCore import QCoreApplication

from aether_manager.bootstrap import build_services
from aether_manager.utils import logger_utils


@pytest.fixture(autouse=True, scope="session")
def _logs_in_tmp(tmp_path_factory):
    """Keep log files out of the package directory."""
    logger_utils.reconfigure_logger(tmp_path_factory.mktemp("logs"))


@pytest.fixture(autouse=True, scope="session")
def _qt_app():
    """One application object for the whole session; destroying it tears down global_signals."""
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


@pytest.fixture
def config_root(tmp_path):
    return tmp_path / "config"


@pytest.fixture
def commands(config_root):
    return build_services(config_root)


@pytest.fixture
def active_dir(tmp_path):
    return tmp_path / "ZZMI" / "Mods"


@pytest.fixture
def configured(commands, active_dir):
    """Commands with the external active folder configured."""
    result = commands.update_settings({"zzmi_mods_path": str(active_dir)})
    assert result["success"], result
    return commands


@pytest.fixture
def make_mod_source(tmp_path):
    """Creates a mod folder with an ini and a nested texture file."""

    def _make(name: str = "Foo"):
        source = tmp_path / "sources" / name
        (source / "textures").mkdir(parents=True)
        (source / "mod.ini").write_text(f"; {name}\n[TextureOverride]\n", encoding="utf-8")
        (source / "textures" / "body.dds").write_bytes(b"DDS " + name.encode())
        return source

    return _make


@pytest.fixture
def install(configured, make_mod_source):
    """Installs a fresh mod and returns the Mod record."""

    def _install(name: str = "Foo", **kwargs):
        result = configured.install_mod(str(make_mod_source(name)), f"{name} title", **kwargs)
        assert result["success"], result
        return result["data"]

    return _install
