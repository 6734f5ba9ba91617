import os

# Defaults match a local single-file deployment; override via env in Docker/Prod
DATABASE_URL = os.environ.get("DATABASE_URL", "sqlite:///./tasks.db")

HOST = os.environ.get("HOST", "0.0.0.0")
PORT = int(os.environ.get("PORT", 8080))

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
