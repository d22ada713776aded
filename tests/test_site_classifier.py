import pytest

from siteinspect.site_classifier import (
    DEFAULT_WEBSITE_TYPE,
    WEBSITE_TYPES,
    determine_website_type,
)


@pytest.mark.parametrize(
    "title, description, content, domain, expected",
    [
        ("Campus", "", "Apply to our university today", "example.com", "Educational"),
        ("Home", "", "", "cs.stanford.edu", "Educational"),
        ("Portal", "", "", "www.usa.gov", "Government"),
        ("Portal", "Official government services", "", "example.com", "Government"),
        ("Store", "", "Buy now", "example.com", "E-commerce"),
        ("Daily", "", "Read the latest News", "example.com", "News/Blog"),
        ("Find", "", "Search the web", "example.com", "Search Engine"),
        ("Home", "", "", "www.google.com", "Search Engine"),
        ("Me", "", "Edit your profile", "example.com", "Social Media"),
        ("Home", "", "", "www.facebook.com", "Social Media"),
        ("Example Domain", "", "Illustrative examples", "example.com", "General Website"),
    ],
)
def test_each_rule(title, description, content, domain, expected):
    assert determine_website_type(title, description, content, domain) == expected


def test_first_match_wins():
    # university (rule 1) beats shop (rule 3)
    assert determine_website_type("University shop", "", "", "example.com") == "Educational"
    # government (rule 2) beats news (rule 4)
    assert determine_website_type("Government news", "", "", "example.com") == "Government"


def test_matching_is_case_insensitive_on_text():
    assert determine_website_type("BLOG", "", "", "example.com") == "News/Blog"


def test_labels_are_closed_set():
    assert DEFAULT_WEBSITE_TYPE in WEBSITE_TYPES
    assert len(WEBSITE_TYPES) == 7
