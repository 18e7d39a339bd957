"""Root conftest: shared test configuration."""

import os

# Keep tests off Postgres and keep password hashing cheap.
os.environ["ACCOUNT_STORE_BACKEND"] = "memory"
os.environ.setdefault("PASSWORD_HASH_ITERATIONS", "1000")
