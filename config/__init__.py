import os

SETTINGS_BY_ENV = {
    "production": "config.production",
    "prod": "config.production",
    "live": "config.production",
    "testing": "config.testing",
    "test": "config.testing",
    "ci": "config.testing",
    "development": "config.development",
    "dev": "config.development",
    "local": "config.development",
}


def get_settings_module() -> str:
    """Map APP_ENV to a settings module; unknown or unset values mean development."""
    env = os.getenv("APP_ENV", "development").strip().lower()
    return SETTINGS_BY_ENV.get(env, "config.development")
