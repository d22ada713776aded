# siteinspect/describer.py

from __future__ import annotations

import re
from typing import List

PREVIEW_CHARS = 200
MIN_PREVIEW_CHARS = 50
MIN_DESCRIPTION_CHARS = 100

TYPE_EXPLANATIONS = {
    "Educational": "This educational website provides learning resources and academic information.",
    "Government": "This government website provides official information and services.",
    "E-commerce": "This is an online shopping website where you can purchase products.",
    "News/Blog": "This website provides news articles and blog content.",
    "Search Engine": "This is a search engine that helps you find information online.",
    "Social Media": "This is a social media platform for connecting and sharing.",
    "General Website": "This appears to be a standard website providing information and services.",
}


def _content_preview(body_text: str) -> str:
    clean = re.sub(r"\s+", " ", body_text).strip()
    preview = clean[:PREVIEW_CHARS]
    if len(preview) <= MIN_PREVIEW_CHARS:
        return ""
    ellipsis = "..." if len(clean) > PREVIEW_CHARS else ""
    return f'Content preview: "{preview}{ellipsis}". '


def generate_description(
    title: str,
    description: str,
    headings: List[str],
    body_text: str,
    website_type: str,
    domain: str,
) -> str:
    """
    Build the user-facing description of a page.

    Sections are appended in a fixed order and skipped when empty:
    title, meta description, top three headings, a body preview and
    finally the sentence explaining the website type. Short results get
    a closing sentence about the domain so they read as a full paragraph.
    """
    result = ""

    if title and title != domain:
        result += f"{title} - "

    if description:
        result += f"{description} "

    if headings:
        result += f"The main sections include: {', '.join(headings[:3])}. "

    if body_text:
        result += _content_preview(body_text)

    result += TYPE_EXPLANATIONS.get(website_type, TYPE_EXPLANATIONS["General Website"])

    if len(result) < MIN_DESCRIPTION_CHARS:
        result += (
            f" The website domain is {domain}, which suggests it serves its intended"
            " audience with relevant content and functionality."
        )

    return result
