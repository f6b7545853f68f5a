from __future__ import annotations

from pathlib import Path
from typing import Optional, Protocol


class DocumentBackend(Protocol):
    """Raw key/value persistence of JSON text documents.

    Documents are addressed by logical name and are always read and written
    whole. ``read`` returns None when the document was never written.
    """

    def read(self, name: str) -> Optional[str]:
        raise NotImplementedError

    def write(self, name: str, payload: str) -> None:
        raise NotImplementedError

    def delete(self, name: str) -> None:
        raise NotImplementedError


class InMemoryDocumentBackend(DocumentBackend):
    """Process-local backend, used by tests and throwaway sessions."""

    def __init__(self, documents: Optional[dict[str, str]] = None):
        self.documents: dict[str, str] = dict(documents or {})

    def read(self, name: str) -> Optional[str]:
        return self.documents.get(name)

    def write(self, name: str, payload: str) -> None:
        self.documents[name] = payload

    def delete(self, name: str) -> None:
        self.documents.pop(name, None)


class FileDocumentBackend(DocumentBackend):
    """One ``<prefix>_<name>.json`` file per document inside ``directory``."""

    def __init__(self, directory: str | Path, *, prefix: str = "eduscan"):
        self._dir = Path(directory)
        self._prefix = prefix
        self._dir.mkdir(parents=True, exist_ok=True)

    def _path(self, name: str) -> Path:
        return self._dir / f"{self._prefix}_{name}.json"

    def read(self, name: str) -> Optional[str]:
        path = self._path(name)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def write(self, name: str, payload: str) -> None:
        path = self._path(name)
        # Write then rename so a crash never leaves a half-written document.
        tmp = path.with_suffix(".json.tmp")
        tmp.write_text(payload, encoding="utf-8")
        tmp.replace(path)

    def delete(self, name: str) -> None:
        self._path(name).unlink(missing_ok=True)
