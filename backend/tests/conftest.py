"""Root conftest — shared test configuration."""

import os

# Keep the module-level settings cheap and quiet under test
os.environ.setdefault("UNIVERSE_SIZE", "100")
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("LOG_LEVEL", "WARNING")
