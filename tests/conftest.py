"""Global test fixtures."""

import os

import logfire

# Keep tests hermetic: no YAML/.env overrides leak in from the developer's shell.
# This must happen at module load time, before any test module builds a Config.
os.environ.pop("INTERVIEW_CONFIG_FILE", None)
os.environ.pop("INTERVIEW_LOG_FILE", None)

logfire.configure(send_to_logfire=False, console=False)
