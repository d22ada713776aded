# siteinspect/website_analyzer.py

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from typing import Optional, Union

from .describer import generate_description
from .errors import FetchFailed, MissingInput, ParseFailed
from .extractor import extract_page
from .fetcher import domain_of, fetch_page, normalize_url
from .models import AnalysisMetadata, AnalysisResult, PageElements, PageSummary
from .qr_scanner import analyze_qr_content
from .site_classifier import determine_website_type
from .url_scanner import check_safety

logger = logging.getLogger("siteinspect")

UNKNOWN_WEBSITE = "Unknown Website"

FALLBACK_WARNINGS = (
    "Could not access website content for analysis",
    "Please verify website legitimacy before visiting",
)


# ---------------------------------------------------------
# PAGE OUTCOME
# ---------------------------------------------------------

@dataclass
class PageLoaded:
    summary: PageSummary


@dataclass
class PageUnavailable:
    reason: str


PageOutcome = Union[PageLoaded, PageUnavailable]


def load_page(url: str, domain: str) -> PageOutcome:
    """Fetch + extract; transport and parse errors become PageUnavailable."""
    has_ssl = url.startswith("https://")
    try:
        page = fetch_page(url)
        summary = extract_page(page.html, domain, page.status, has_ssl)
    except (FetchFailed, ParseFailed) as exc:
        logger.warning(json.dumps({"event": "page_unavailable", "url": url, "error": str(exc)}))
        return PageUnavailable(reason=str(exc))
    return PageLoaded(summary=summary)


# ---------------------------------------------------------
# RESULT BUILDERS
# ---------------------------------------------------------

def build_page_result(url: str, domain: str, summary: PageSummary) -> AnalysisResult:
    website_type = determine_website_type(
        summary.title, summary.description, summary.body_text, domain
    )
    safety = check_safety(url, domain)
    description = generate_description(
        summary.title,
        summary.description,
        summary.headings,
        summary.body_text,
        website_type,
        domain,
    )

    logger.info(
        json.dumps(
            {
                "event": "page_classified",
                "domain": domain,
                "type": website_type,
                "safety": safety.safety,
                "links": summary.link_count,
                "images": summary.image_count,
            }
        )
    )

    return AnalysisResult(
        title=f"{summary.title} - Website Analysis",
        description=description,
        type=website_type,
        safety=safety.safety,
        warnings=list(safety.warnings),
        metadata=AnalysisMetadata(
            domain=domain,
            status=summary.status,
            has_ssl=summary.has_ssl,
            page_elements=PageElements(
                links=summary.link_count,
                images=summary.image_count,
                headings=len(summary.headings),
            ),
        ),
    )


def build_fallback_result(url: str, domain: str) -> AnalysisResult:
    """Fixed-template result for pages we could not read. Performs no I/O."""
    has_ssl = url.startswith("https://")
    protocol = "secure HTTPS" if has_ssl else "HTTP"
    description = (
        f"This website ({domain}) could not be fully analyzed due to access restrictions "
        "or technical issues. Based on the domain name, this appears to be a standard "
        f"website. The domain uses {protocol} protocol. Without being able to access the "
        "content, we cannot provide detailed information about the website's purpose or "
        "content. Please visit the site directly to see what it contains, but exercise "
        "caution if you're unsure about its legitimacy."
    )
    return AnalysisResult(
        title=f"{domain} - Basic Analysis",
        description=description,
        type=UNKNOWN_WEBSITE,
        safety="warning",
        warnings=list(FALLBACK_WARNINGS),
        metadata=AnalysisMetadata(domain=domain, status="Unknown", has_ssl=has_ssl),
    )


# ---------------------------------------------------------
# MAIN ENTRY
# ---------------------------------------------------------

def analyze_url(url: Optional[str]) -> AnalysisResult:
    """
    Analyze a website by URL.

    Raises MissingInput for an empty url and InvalidUrl when no host can be
    derived. Unreachable pages still produce a (degraded) result.
    """
    if not url:
        raise MissingInput("missing url")

    clean_url = normalize_url(url)
    domain = domain_of(clean_url)
    logger.info(json.dumps({"event": "analyze_url", "url": clean_url, "domain": domain}))

    outcome = load_page(clean_url, domain)
    if isinstance(outcome, PageLoaded):
        return build_page_result(clean_url, domain, outcome.summary)
    return build_fallback_result(clean_url, domain)


# ---------------------------------------------------------
# SCANNED CONTENT ROUTING
# ---------------------------------------------------------

_SCHEME_RE = re.compile(r"^https?://", re.IGNORECASE)
_WWW_RE = re.compile(r"^www\.", re.IGNORECASE)


def looks_like_url(text: str) -> bool:
    s = text.strip()
    return bool(_SCHEME_RE.match(s) or _WWW_RE.match(s) or ("." in s and "@" not in s))


def analyze_scanned_content(text: Optional[str]) -> AnalysisResult:
    """Route a decoded QR payload: URLs get a page analysis, anything else a content one."""
    if not text:
        raise MissingInput("missing content")

    s = text.strip()
    if looks_like_url(s):
        url = s if _SCHEME_RE.match(s) else "https://" + s
        return analyze_url(url)
    return analyze_qr_content(s)
