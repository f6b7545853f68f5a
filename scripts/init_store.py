"""Create the documents table (MySQL backend) and seed default data."""

from __future__ import annotations

import importlib

from dotenv import load_dotenv

from eduscan.config import get_settings_module
from eduscan.container import build_backend
from eduscan.database.bootstrap import apply_schema
from eduscan.database.connection import DBConfig, DatabaseConnection
from eduscan.store.document_store import COLLECTIONS, DocumentStore


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())

    if settings.STORE_BACKEND == "mysql":
        apply_schema(DatabaseConnection.get_instance(DBConfig.from_dict(settings.DB_CONFIG)))

    store = DocumentStore(build_backend(settings))
    store.initialize()

    counts = ", ".join(f"{name}={len(store.list(name))}" for name in COLLECTIONS)
    print(f"OK: store ready ({settings.STORE_BACKEND}) -> {counts}")


if __name__ == "__main__":
    main()
