"""Root conftest — shared test configuration."""

import os

# Ensure tests don't pick up a developer's CORS or identity settings
os.environ.setdefault("CORS_ENABLED", "false")
os.environ.setdefault("SERVICE_VERSION", "test-version")
os.environ.setdefault("COMMIT_ID", "test-commit")
os.environ.setdefault("LOG_FORMAT", "text")
