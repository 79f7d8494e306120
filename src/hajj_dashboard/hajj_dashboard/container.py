from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .core.constants import DEFAULT_STORE_BACKEND, DEFAULT_STORE_DIR
from .core.enums import StoreBackend
from .core.exceptions import ValidationError
from .database.connection import DBConfig, DatabaseConnection
from .media.uploader import ImageUploader, LocalMediaUploader
from .overlay.file_kv_store import FileKeyValueStore
from .overlay.mysql_kv_store import MySQLKeyValueStore
from .overlay.repository import KeyValueStore
from .overlay.store import OverlayStore
from .reconciliation.service import ReconciliationEngine
from .records.service import RecordTransferService
from .seeds.registry import SeedRegistry


@dataclass(frozen=True)
class Container:
    kv_store: KeyValueStore
    seed_registry: SeedRegistry
    overlay_store: OverlayStore

    reconciliation_engine: ReconciliationEngine
    transfer_service: RecordTransferService
    image_uploader: Optional[ImageUploader] = None


def build_kv_store(
    *,
    backend: str = DEFAULT_STORE_BACKEND,
    db_config: Optional[dict] = None,
    store_dir: str | Path = DEFAULT_STORE_DIR,
) -> KeyValueStore:
    try:
        kind = StoreBackend(str(backend).lower())
    except ValueError:
        raise ValidationError(f"Unsupported store backend: {backend}")

    if kind == StoreBackend.MYSQL:
        if not db_config:
            raise ValidationError("DB_CONFIG is required for the mysql store backend")
        return MySQLKeyValueStore(DatabaseConnection.get_instance(DBConfig.from_dict(db_config)))
    return FileKeyValueStore(store_dir)


def build_container(
    *,
    kv_store: Optional[KeyValueStore] = None,
    store_backend: str = DEFAULT_STORE_BACKEND,
    db_config: Optional[dict] = None,
    store_dir: str | Path = DEFAULT_STORE_DIR,
    seed_registry: Optional[SeedRegistry] = None,
    media_upload_dir: Optional[str] = None,
    media_base_url: str = "/media",
) -> Container:
    if kv_store is None:
        kv_store = build_kv_store(backend=store_backend, db_config=db_config, store_dir=store_dir)
    seed_registry = seed_registry or SeedRegistry.bundled()

    overlay_store = OverlayStore(kv_store, seed_registry)
    reconciliation_engine = ReconciliationEngine(seed_registry, overlay_store)
    transfer_service = RecordTransferService(reconciliation_engine)
    image_uploader = LocalMediaUploader(media_upload_dir, media_base_url) if media_upload_dir else None

    return Container(
        kv_store=kv_store,
        seed_registry=seed_registry,
        overlay_store=overlay_store,
        reconciliation_engine=reconciliation_engine,
        transfer_service=transfer_service,
        image_uploader=image_uploader,
    )
