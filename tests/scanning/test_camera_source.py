from __future__ import annotations

import numpy as np
import pytest

from eduscan.core.exceptions import ProviderUnavailable
from eduscan.scanning import camera_source
from eduscan.scanning.camera_source import CameraScanSource


class FakeCapture:
    def __init__(self, frames, opened=True):
        self.frames = list(frames)
        self.opened = opened
        self.released = False

    def isOpened(self):
        return self.opened

    def read(self):
        if not self.frames:
            return False, None
        return True, self.frames.pop(0)

    def release(self):
        self.released = True


@pytest.fixture
def no_sleep(monkeypatch):
    monkeypatch.setattr(camera_source.time, "sleep", lambda s: None)


def test_frames_are_cropped_and_decoded(monkeypatch, no_sleep):
    capture = FakeCapture([np.zeros((480, 640, 3), dtype=np.uint8)])
    shapes = []

    def fake_decode(gray):
        shapes.append(gray.shape)
        return ["ST-2024-001"]

    monkeypatch.setattr(camera_source.cv2, "VideoCapture", lambda index: capture)
    monkeypatch.setattr(camera_source, "decode_payloads", fake_decode)

    results = list(CameraScanSource(box_size=250).start())

    assert results[0].text == "ST-2024-001"
    assert not results[-1].ok
    assert shapes == [(250, 250)]
    assert capture.released


def test_unopened_camera_raises(monkeypatch):
    capture = FakeCapture([], opened=False)
    monkeypatch.setattr(camera_source.cv2, "VideoCapture", lambda index: capture)

    with pytest.raises(ProviderUnavailable):
        list(CameraScanSource().start())
    assert capture.released


def test_stop_releases_camera(monkeypatch, no_sleep):
    frame = np.zeros((300, 300, 3), dtype=np.uint8)
    capture = FakeCapture([frame, frame, frame])
    monkeypatch.setattr(camera_source.cv2, "VideoCapture", lambda index: capture)
    monkeypatch.setattr(camera_source, "decode_payloads", lambda gray: ["ST-2024-002"])

    source = CameraScanSource()
    stream = source.start()
    assert next(stream).text == "ST-2024-002"
    source.stop()

    assert capture.released
    assert list(stream) == []
