import os


def get_settings_module() -> str:
    # APP_ENV picks the settings module, 'development' when unset
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "farm_ledger.config.production"

    if env in {"test", "testing"}:
        return "farm_ledger.config.testing"

    return "farm_ledger.config.development"
