import os


def get_settings_module() -> str:
    # Settings are selected by APP_ENV, default 'development'.
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "eduscan.config.production"

    if env in {"test", "testing"}:
        return "eduscan.config.testing"

    return "eduscan.config.development"
