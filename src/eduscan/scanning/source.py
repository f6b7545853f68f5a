from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterator, Optional


class DecodeError(Exception):
    """A frame or image could not be decoded."""


@dataclass(frozen=True)
class ScanResult:
    """Either decoded text or a decode error, never both."""

    text: Optional[str] = None
    error: Optional[DecodeError] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.text is not None


class ScanSource(ABC):
    """Capability: a stream of decoded QR payloads.

    ``start`` acquires whatever the source needs and yields results until the
    source is exhausted or ``stop`` is called; resources are released on every
    exit path.
    """

    @abstractmethod
    def start(self) -> Iterator[ScanResult]:
        raise NotImplementedError

    @abstractmethod
    def stop(self) -> None:
        raise NotImplementedError


def decode_payloads(image) -> list[str]:
    """Decode every QR/barcode symbol in a PIL image or 8-bit grayscale array."""
    # Imported here: pyzbar loads the native zbar library at import time.
    from pyzbar.pyzbar import decode as pyzbar_decode

    return [symbol.data.decode("utf-8").strip() for symbol in pyzbar_decode(image)]
