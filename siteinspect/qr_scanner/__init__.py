# siteinspect/qr_scanner/__init__.py

"""
QR content package.

    analyze_qr_content(content: str) -> AnalysisResult
    decode_qr_image(image_bytes: bytes) -> Optional[str]

Classification is local only: the payload is never fetched or resolved,
so results are always "safe" with no warnings.
"""

from .qr_engine import analyze_qr_content, classify_qr_content
from .qr_utils import decode_qr_image, decode_qr_pixels
