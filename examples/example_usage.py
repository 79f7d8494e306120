"""Example: use the service layer directly (without Flask).

Controllers are a thin layer; merging, persistence and CSV live in services.
"""

import importlib

from config import get_settings_module

from src.hajj_dashboard.hajj_dashboard.container import build_container
from src.hajj_dashboard.hajj_dashboard.core.constants import ORGANIZERS_PARTITION


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(
        store_backend=getattr(settings, "STORE_BACKEND", "file"),
        db_config=getattr(settings, "DB_CONFIG", None),
        store_dir=getattr(settings, "STORE_DIR", "instance/store"),
    )
    engine = container.reconciliation_engine

    engine.upsert(ORGANIZERS_PARTITION, {"organizerNumber": "ORG-001", "company": "Al-Sheikh Travel (renamed)"})
    for organizer in engine.get_all(ORGANIZERS_PARTITION):
        print(organizer["organizerNumber"], organizer.get("company"))

    print(container.transfer_service.export_csv(ORGANIZERS_PARTITION).filename)


if __name__ == "__main__":
    main()
