"""Test configuration: route the app's engine to in-memory SQLite before import."""
import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
