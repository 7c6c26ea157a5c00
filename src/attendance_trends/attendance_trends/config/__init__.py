import importlib
import os


def get_settings_module() -> str:
    # APP_ENV chọn module cấu hình, mặc định là 'development'
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "production"

    if env in {"test", "testing"}:
        return "testing"

    return "development"


def load_settings(name: str | None = None):
    """Import the settings module for ``name`` (or the APP_ENV selection)."""
    return importlib.import_module(f".{name or get_settings_module()}", __name__)
