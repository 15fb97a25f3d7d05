from __future__ import annotations

import os
import tempfile

# The engine is built at import time, so point it at a scratch database first.
_TMP_DIR = tempfile.mkdtemp(prefix="studysync-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TMP_DIR, 'studysync-test.db')}"
os.environ["LOG_FILE"] = os.path.join(_TMP_DIR, "app.log")
os.environ["PASSWORD_HASH_METHOD"] = "pbkdf2:sha256:1000"
os.environ["APP_ENV"] = "test"
