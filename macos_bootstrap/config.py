from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .errors import ConfigError

DEFAULT_MANIFEST = Path(__file__).resolve().parent / "manifests" / "default.yaml"

DEFAULT_HOMEBREW_INSTALL_URL = "https://raw.githubusercontent.com/Homebrew/install/HEAD/install.sh"
DEFAULT_NVM_VERSION = "v0.38.0"
DEFAULT_NVM_INSTALL_URL = "https://raw.githubusercontent.com/nvm-sh/nvm/{version}/install.sh"


def _section(raw: Dict[str, Any], key: str) -> Dict[str, Any]:
    value = raw.get(key) or {}
    if not isinstance(value, dict):
        raise ConfigError(f"manifest: '{key}' must be a mapping")
    return value


def _names(value: Any, where: str) -> List[str]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ConfigError(f"manifest: {where} must be a list")
    out: List[str] = []
    for item in value:
        if not isinstance(item, str) or not item.strip():
            raise ConfigError(f"manifest: {where} entries must be non-empty strings, got {item!r}")
        out.append(item.strip())
    return out


@dataclass(frozen=True)
class BootstrapConfig:
    raw: Dict[str, Any]

    @property
    def homebrew_install_url(self) -> str:
        return str(_section(self.raw, "homebrew").get("install_url") or DEFAULT_HOMEBREW_INSTALL_URL)

    @property
    def cask_appdir(self) -> str:
        return str(_section(self.raw, "homebrew").get("cask_appdir") or "/Applications")

    @property
    def homebrew_upgrade(self) -> bool:
        return bool(_section(self.raw, "homebrew").get("upgrade", True))

    @property
    def taps(self) -> List[str]:
        return _names(_section(self.raw, "homebrew").get("taps"), "homebrew.taps")

    @property
    def formulas(self) -> List[str]:
        return _names(self.raw.get("formulas"), "formulas")

    @property
    def fonts_tap(self) -> Optional[str]:
        tap = _section(self.raw, "fonts").get("tap")
        return str(tap) if tap else None

    @property
    def fonts(self) -> List[str]:
        return _names(_section(self.raw, "fonts").get("casks"), "fonts.casks")

    @property
    def quicklook_plugins(self) -> List[str]:
        return _names(_section(self.raw, "quicklook_plugins").get("casks"), "quicklook_plugins.casks")

    @property
    def apps_tap(self) -> Optional[str]:
        tap = _section(self.raw, "apps").get("tap")
        return str(tap) if tap else None

    @property
    def apps(self) -> List[str]:
        return _names(_section(self.raw, "apps").get("casks"), "apps.casks")

    @property
    def go_libraries(self) -> List[str]:
        return _names(_section(self.raw, "go").get("libraries"), "go.libraries")

    @property
    def python_packages(self) -> List[str]:
        return _names(_section(self.raw, "python").get("packages"), "python.packages")

    @property
    def python_sudo(self) -> bool:
        return bool(_section(self.raw, "python").get("sudo", True))

    @property
    def ruby_gems(self) -> List[str]:
        return _names(_section(self.raw, "ruby").get("gems"), "ruby.gems")

    @property
    def ruby_sudo(self) -> bool:
        return bool(_section(self.raw, "ruby").get("sudo", True))

    @property
    def nvm_version(self) -> str:
        return str(_section(self.raw, "nvm").get("version") or DEFAULT_NVM_VERSION)

    @property
    def nvm_install_url(self) -> str:
        template = str(_section(self.raw, "nvm").get("install_url") or DEFAULT_NVM_INSTALL_URL)
        try:
            return template.format(version=self.nvm_version)
        except (KeyError, IndexError, ValueError) as e:
            raise ConfigError(f"manifest: nvm.install_url may only use the {{version}} placeholder: {template!r}") from e

    def validate(self) -> None:
        """Touch every accessor so a malformed manifest fails before any step runs."""
        for name in (
            "homebrew_install_url",
            "cask_appdir",
            "taps",
            "formulas",
            "fonts_tap",
            "fonts",
            "quicklook_plugins",
            "apps_tap",
            "apps",
            "go_libraries",
            "python_packages",
            "ruby_gems",
            "nvm_install_url",
        ):
            getattr(self, name)


def load_config(path: Optional[str] = None) -> BootstrapConfig:
    """Load a YAML manifest (the bundled default when path is None)."""

    p = Path(path) if path else DEFAULT_MANIFEST
    if not p.exists():
        raise ConfigError(f"manifest not found: {p}")

    if p.suffix.lower() not in {".yaml", ".yml"}:
        raise ConfigError(f"manifest must be YAML: {p}")

    try:
        raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"manifest is not valid YAML: {p}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"manifest must contain a mapping/object: {p}")

    cfg = BootstrapConfig(raw=raw)
    cfg.validate()
    return cfg
