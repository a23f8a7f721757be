import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.environ.get("ECONOVA_CONFIG", os.path.join(ROOT_PATH, "env.yaml"))

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./econova.db")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))
    ADMIN_API_KEY = data.get("ADMIN_API_KEY", "test-admin-key-12345")
    DEFAULT_TENANT_SETTINGS = data.get(
        "DEFAULT_TENANT_SETTINGS",
        {
            "timezone": "America/Mexico_City",
            "currency": "MXN",
            "language": "es-MX",
            "units": "metric",
            "reportFormat": "pdf",
        },
    )
    DEFAULT_TENANT_FEATURES = data.get("DEFAULT_TENANT_FEATURES", ["module.waste"])
    DEFAULT_PRIMARY_COLOR = data.get("DEFAULT_PRIMARY_COLOR", "#273949")
    DEFAULT_SECONDARY_COLOR = data.get("DEFAULT_SECONDARY_COLOR", "#b5e951")
    DASHBOARD_URL_TEMPLATE = data.get("DASHBOARD_URL_TEMPLATE", "/{slug}/dashboard")
