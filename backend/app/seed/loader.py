from pathlib import Path
from typing import Any

import yaml

SEED_DIR = Path(__file__).parent


def load_sample_snippets(path: Path | None = None) -> list[dict[str, Any]]:
    data = yaml.safe_load((path or SEED_DIR / "snippets.yaml").read_text()) or {}
    return list(data.get("snippets") or [])
