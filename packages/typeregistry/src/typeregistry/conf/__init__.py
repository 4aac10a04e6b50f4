from .loader import SettingsLoader, clear_settings_cache, get_settings, import_from_path
from .models import RegistrySettings

__all__ = [
    "RegistrySettings",
    "SettingsLoader",
    "get_settings",
    "clear_settings_cache",
    "import_from_path",
]
