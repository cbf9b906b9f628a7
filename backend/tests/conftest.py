import os

# Tests run against in-memory SQLite; keep the module-level engine off Postgres.
os.environ.setdefault("CODEREVIEW_DATABASE_URL", "sqlite://")
