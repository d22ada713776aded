# siteinspect/site_classifier.py

from __future__ import annotations

from typing import Callable, List, Tuple

Rule = Callable[[str, str], bool]


def _text_has(*words: str) -> Rule:
    return lambda text, domain: any(w in text for w in words)


def _domain_has(*parts: str) -> Rule:
    return lambda text, domain: any(p in domain for p in parts)


def _either(*rules: Rule) -> Rule:
    return lambda text, domain: any(rule(text, domain) for rule in rules)


# ---------------------------------------------------------
# WEBSITE TYPE RULES (first match wins, order matters)
# ---------------------------------------------------------

WEBSITE_TYPE_RULES: List[Tuple[Rule, str]] = [
    (_either(_domain_has("edu"), _text_has("university", "school")), "Educational"),
    (_either(_domain_has("gov"), _text_has("government")), "Government"),
    (_text_has("shop", "buy", "cart"), "E-commerce"),
    (_text_has("news", "article", "blog"), "News/Blog"),
    (_either(_text_has("search"), _domain_has("google")), "Search Engine"),
    (_either(_text_has("social", "profile"), _domain_has("facebook", "twitter")), "Social Media"),
]

DEFAULT_WEBSITE_TYPE = "General Website"

WEBSITE_TYPES = tuple(label for _, label in WEBSITE_TYPE_RULES) + (DEFAULT_WEBSITE_TYPE,)


def determine_website_type(title: str, description: str, content: str, domain: str) -> str:
    text = f"{title} {description} {content}".lower()
    for rule, label in WEBSITE_TYPE_RULES:
        if rule(text, domain):
            return label
    return DEFAULT_WEBSITE_TYPE
