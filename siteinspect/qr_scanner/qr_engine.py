# siteinspect/qr_scanner/qr_engine.py

from __future__ import annotations

import json
import logging
import re
from typing import Callable, List, Optional, Tuple

from ..errors import MissingInput
from ..models import AnalysisResult

logger = logging.getLogger("siteinspect")

LOG_PREVIEW_CHARS = 50
LENGTHY_TEXT_CHARS = 100

PHONE_RE = re.compile(r"\+?[0-9][0-9\s\-()]+")


# ---------------------------------------------------------
# CLASSIFICATION
# ---------------------------------------------------------

def _plain_text_note(content: str) -> str:
    if len(content) > LENGTHY_TEXT_CHARS:
        return "This appears to be plain text content. The content is quite lengthy."
    return "This appears to be plain text content. This is a simple text-based QR code."


# (predicate, content type, explanation) - first match wins
QR_CONTENT_RULES: List[Tuple[Callable[[str], bool], str, str]] = [
    (
        lambda s: "@" in s and "." in s,
        "Email Address",
        "This appears to be an email address for direct contact.",
    ),
    (
        lambda s: PHONE_RE.fullmatch(s) is not None,
        "Phone Number",
        "This is a phone number for calling or messaging.",
    ),
    (
        lambda s: "WIFI:" in s,
        "WiFi Credentials",
        "This contains WiFi network information for automatic connection.",
    ),
    (
        lambda s: "BEGIN:VCARD" in s,
        "Contact Information",
        "This is contact information that can be saved to your address book.",
    ),
]

PLAIN_TEXT = "Plain Text"


def classify_qr_content(content: str) -> Tuple[str, str]:
    """Return (content type, explanation sentence) for a decoded payload."""
    for matches, content_type, explanation in QR_CONTENT_RULES:
        if matches(content):
            return content_type, explanation
    return PLAIN_TEXT, _plain_text_note(content)


# ---------------------------------------------------------
# MAIN ENTRY
# ---------------------------------------------------------

def analyze_qr_content(content: Optional[str]) -> AnalysisResult:
    if not content:
        raise MissingInput("missing content")

    content_type, explanation = classify_qr_content(content)

    logger.info(
        json.dumps(
            {
                "event": "qr_classification",
                "content_type": content_type,
                "content_preview": content[:LOG_PREVIEW_CHARS],
            }
        )
    )

    return AnalysisResult(
        title=f"QR Code: {content_type}",
        description=f'This QR code contains: "{content}". {explanation}',
        type=f"QR Content - {content_type}",
        safety="safe",
        warnings=[],
    )
