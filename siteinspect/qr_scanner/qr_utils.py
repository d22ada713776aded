# siteinspect/qr_scanner/qr_utils.py

"""
Image -> decoded QR text.

pyzbar does the decoding; the inverted image is tried when nothing is
found (light-on-dark codes), and OpenCV's detector is the last resort.
"""

from __future__ import annotations

import io
from typing import Optional

import cv2
import numpy as np
from PIL import Image, ImageOps, UnidentifiedImageError

from ..config import QR_MAX_DIMENSION


def load_image_bytes(image_bytes: bytes) -> Optional[Image.Image]:
    """Loader from raw bytes -> PIL image, None when the bytes are not an image."""
    try:
        img = Image.open(io.BytesIO(image_bytes))
        img.load()
    except (UnidentifiedImageError, OSError):
        return None
    return img


def _downscale(img: Image.Image, max_dim: int = QR_MAX_DIMENSION) -> Image.Image:
    w, h = img.size
    longest = max(w, h)
    if longest <= max_dim:
        return img
    scale = max_dim / longest
    return img.resize((round(w * scale), round(h * scale)))


def _decode_zbar(img: Image.Image) -> Optional[str]:
    # libzbar is a system library; import at call time so the rest of the
    # package stays usable where it is not installed
    from pyzbar.pyzbar import decode as decode_zbar

    for obj in decode_zbar(img):
        text = obj.data.decode("utf-8", errors="replace").strip()
        if text:
            return text
    return None


def _decode_opencv(img: Image.Image) -> Optional[str]:
    arr = cv2.cvtColor(np.array(img.convert("RGB")), cv2.COLOR_RGB2BGR)
    detector = cv2.QRCodeDetector()
    try:
        text, _, _ = detector.detectAndDecode(arr)
    except cv2.error:
        return None
    return text.strip() or None


def decode_pil_image(img: Image.Image) -> Optional[str]:
    gray = _downscale(img).convert("L")
    return _decode_zbar(gray) or _decode_zbar(ImageOps.invert(gray)) or _decode_opencv(gray)


def decode_qr_image(image_bytes: bytes) -> Optional[str]:
    img = load_image_bytes(image_bytes)
    if img is None:
        return None
    return decode_pil_image(img)


def decode_qr_pixels(pixels: bytes, width: int, height: int) -> Optional[str]:
    """Decode an RGBA pixel buffer (4 bytes per pixel, row major)."""
    arr = np.frombuffer(pixels, dtype=np.uint8)
    if width <= 0 or height <= 0 or arr.size != width * height * 4:
        raise ValueError(f"Pixel buffer does not match {width}x{height} RGBA")
    img = Image.fromarray(arr.reshape((height, width, 4)))
    return decode_pil_image(img)
