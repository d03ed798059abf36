"""Test environment: required settings must exist before coinhub is imported."""

import os

os.environ.setdefault("JWT_SECRET", "test-secret-not-for-production")
os.environ.setdefault("DATABASE_URL", "sqlite://")
# Low bcrypt cost keeps the suite fast; production default is 12.
os.environ.setdefault("BCRYPT_ROUNDS", "4")
for _name in ("ADMIN_USERNAME", "ADMIN_EMAIL", "ADMIN_PASSWORD"):
    os.environ.pop(_name, None)
