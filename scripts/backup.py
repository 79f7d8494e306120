"""Backup every partition's merged view as CSV.

Files are written to ``backups/`` using the export naming
``{partition}_{YYYY-MM-DD}.csv``; they can be re-imported through the
import endpoint.
"""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.hajj_dashboard.hajj_dashboard.container import build_container


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container(
        store_backend=getattr(settings, "STORE_BACKEND", "file"),
        db_config=getattr(settings, "DB_CONFIG", None),
        store_dir=getattr(settings, "STORE_DIR", "instance/store"),
    )

    out_dir = REPO_ROOT / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    for partition in container.reconciliation_engine.partitions():
        export = container.transfer_service.export_csv(partition)
        out_file = out_dir / export.filename
        out_file.write_text(export.content, encoding="utf-8", newline="")
        print(f"OK: Backup created: {out_file}")


if __name__ == "__main__":
    main()
