from __future__ import annotations

import logging
import time
from typing import Iterator, Optional

import cv2

from ..core.exceptions import ProviderUnavailable
from .source import DecodeError, ScanResult, ScanSource, decode_payloads

logger = logging.getLogger(__name__)


class CameraScanSource(ScanSource):
    """Reads frames from a local camera and decodes QR codes in them.

    ``fps`` and ``box_size`` mirror the browser scanner settings: frames are
    throttled to ``fps`` and only the centred ``box_size`` square is decoded.
    """

    def __init__(self, *, camera_index: int = 0, fps: int = 10, box_size: int = 250):
        self._camera_index = camera_index
        self._fps = max(int(fps), 1)
        self._box_size = int(box_size)
        self._capture: Optional[cv2.VideoCapture] = None
        self._stopped = False

    def _crop(self, gray):
        h, w = gray.shape[:2]
        size = min(self._box_size, h, w)
        top = (h - size) // 2
        left = (w - size) // 2
        return gray[top : top + size, left : left + size]

    def start(self) -> Iterator[ScanResult]:
        self._stopped = False
        self._capture = cv2.VideoCapture(self._camera_index)
        if not self._capture.isOpened():
            self._release()
            raise ProviderUnavailable("Could not initialize camera.")

        logger.info(f"Camera {self._camera_index} opened")
        try:
            while not self._stopped:
                ok, frame = self._capture.read()
                if not ok:
                    yield ScanResult(error=DecodeError("Camera frame could not be read"))
                    break

                gray = cv2.cvtColor(frame, cv2.COLOR_BGR2GRAY)
                for text in decode_payloads(self._crop(gray)):
                    yield ScanResult(text=text)

                time.sleep(1.0 / self._fps)
        finally:
            self._release()

    def _release(self) -> None:
        if self._capture is not None:
            self._capture.release()
            self._capture = None
            logger.info(f"Camera {self._camera_index} released")

    def stop(self) -> None:
        self._stopped = True
        self._release()
