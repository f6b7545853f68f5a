from __future__ import annotations

import io

import pytest
from PIL import Image

from eduscan.scanning.image_source import ImageScanSource
from eduscan.scanning.qr import render_qr_png
from eduscan.scanning.source import DecodeError


def test_render_qr_png_is_png():
    buf = render_qr_png("ST-2024-001")
    img = Image.open(buf)
    assert img.format == "PNG"


def test_qr_image_decodes_to_payload():
    pytest.importorskip("pyzbar.pyzbar")
    source = ImageScanSource([render_qr_png("ST-2024-001").getvalue()])

    results = list(source.start())

    assert [r.text for r in results] == ["ST-2024-001"]


def test_blank_and_garbage_images_yield_errors():
    pytest.importorskip("pyzbar.pyzbar")
    blank = io.BytesIO()
    Image.new("RGB", (64, 64), "white").save(blank, format="PNG")
    source = ImageScanSource([blank.getvalue(), b"not an image"])

    results = list(source.start())

    assert len(results) == 2
    assert all(not r.ok and isinstance(r.error, DecodeError) for r in results)
