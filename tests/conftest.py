"""Global test fixtures."""

import os

import logfire

# Set before any test module builds a Config
os.environ.setdefault("INTAKE_DATABASE__URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("INTAKE_LOGGING__LEVEL", "WARNING")

logfire.configure(send_to_logfire=False, console=False)
