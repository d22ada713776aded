# siteinspect/extractor.py

"""
HTML -> PageSummary.

Pure text transformation; missing elements degrade to empty strings / zero
counts. Anything the parser itself chokes on is reported as ParseFailed.
"""

from __future__ import annotations

from typing import List

from bs4 import BeautifulSoup

from .errors import ParseFailed
from .models import PageSummary

MAX_HEADINGS = 5
BODY_SAMPLE_CHARS = 1000


def _meta_content(soup: BeautifulSoup, attrs: dict) -> str:
    tag = soup.find("meta", attrs=attrs)
    if tag is None:
        return ""
    return tag.get("content") or ""


def _title(soup: BeautifulSoup) -> str:
    return "".join(t.get_text() for t in soup.find_all("title")).strip()


def _headings(soup: BeautifulSoup) -> List[str]:
    return [h.get_text().strip() for h in soup.find_all(["h1", "h2", "h3"], limit=MAX_HEADINGS)]


def _body_text(soup: BeautifulSoup) -> str:
    if soup.body is not None:
        return soup.body.get_text()
    # html.parser does not invent a <head>/<body>; drop head content, titles included
    if soup.head is not None:
        soup.head.decompose()
    for title in soup.find_all("title"):
        title.decompose()
    return soup.get_text()


def extract_page(html: str, domain: str, status: int, has_ssl: bool) -> PageSummary:
    try:
        soup = BeautifulSoup(html, "html.parser")
    except Exception as exc:
        raise ParseFailed(str(exc)) from exc

    description = (
        _meta_content(soup, {"name": "description"})
        or _meta_content(soup, {"property": "og:description"})
    )

    title = _title(soup) or domain
    headings = _headings(soup)
    link_count = len(soup.find_all("a", href=True))
    image_count = len(soup.find_all("img", src=True))
    # last: may drop <head> from the tree
    body_text = _body_text(soup)[:BODY_SAMPLE_CHARS]

    return PageSummary(
        title=title,
        description=description,
        headings=headings,
        body_text=body_text,
        link_count=link_count,
        image_count=image_count,
        status=status,
        has_ssl=has_ssl,
    )
