# basicfmt/config/__init__.py
# Settings exports

from .settings import BasicfmtSettings, SettingsManager, settings_manager, get_settings

__all__ = ["BasicfmtSettings", "SettingsManager", "settings_manager", "get_settings"]
