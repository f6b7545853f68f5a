"""Back up every collection and the session slot to one JSON file."""

from __future__ import annotations

import importlib
import json
from datetime import datetime
from pathlib import Path

from dotenv import load_dotenv

from eduscan.config import get_settings_module
from eduscan.container import build_backend
from eduscan.store.document_store import COLLECTIONS, DocumentStore


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    store = DocumentStore(build_backend(settings))

    out_dir = Path(__file__).resolve().parents[1] / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"eduscan_{ts}.json"

    dump = {name: store.list(name) for name in COLLECTIONS}
    dump["session"] = store.get_session()
    out_file.write_text(json.dumps(dump, ensure_ascii=False, indent=2), encoding="utf-8")
    print(f"OK: Backup created: {out_file}")


if __name__ == "__main__":
    main()
