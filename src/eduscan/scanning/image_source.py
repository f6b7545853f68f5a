from __future__ import annotations

import io
import logging
from typing import BinaryIO, Iterable, Iterator, Union

from PIL import Image, UnidentifiedImageError

from .source import DecodeError, ScanResult, ScanSource, decode_payloads

logger = logging.getLogger(__name__)

ImageInput = Union[bytes, BinaryIO, Image.Image]


class ImageScanSource(ScanSource):
    """Decodes still images (uploads, files) one after another."""

    def __init__(self, images: Iterable[ImageInput]):
        self._images = images
        self._stopped = False

    def _open(self, item: ImageInput) -> Image.Image:
        if isinstance(item, Image.Image):
            return item.convert("RGB")
        stream = io.BytesIO(item) if isinstance(item, bytes) else item
        return Image.open(stream).convert("RGB")

    def start(self) -> Iterator[ScanResult]:
        self._stopped = False
        for item in self._images:
            if self._stopped:
                return
            try:
                payloads = decode_payloads(self._open(item))
            except (UnidentifiedImageError, OSError) as e:
                logger.warning(f"Unreadable image: {e}")
                yield ScanResult(error=DecodeError(f"Unreadable image: {e}"))
                continue

            if not payloads:
                yield ScanResult(error=DecodeError("No QR code found in image"))
                continue
            for text in payloads:
                yield ScanResult(text=text)

    def stop(self) -> None:
        self._stopped = True
