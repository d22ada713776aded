# siteinspect/__init__.py

"""
Website & QR content analyzer.

Two entry points:

    analyze_url(url: str) -> AnalysisResult
    analyze_qr_content(content: str) -> AnalysisResult
"""

from .website_analyzer import analyze_url, analyze_scanned_content
from .qr_scanner import analyze_qr_content
