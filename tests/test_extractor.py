from siteinspect.extractor import BODY_SAMPLE_CHARS, extract_page

from .conftest import SAMPLE_HTML


def test_extracts_summary():
    page = extract_page(SAMPLE_HTML, "example.com", 200, True)
    assert page.title == "Example Store"
    assert page.description == "Handmade mugs and cups."
    assert page.headings == ["Welcome", "Mugs", "Cups", "About us"]
    assert "handmade mugs" in page.body_text
    assert page.link_count == 2
    assert page.image_count == 1
    assert page.status == 200
    assert page.has_ssl is True


def test_missing_title_falls_back_to_domain():
    page = extract_page("<html><body><p>hi</p></body></html>", "example.com", 200, False)
    assert page.title == "example.com"
    assert page.description == ""
    assert page.headings == []
    assert page.link_count == 0
    assert page.image_count == 0


def test_og_description_used_when_meta_description_empty():
    html = """
    <head>
      <meta name="description" content="">
      <meta property="og:description" content="From open graph">
    </head>
    """
    page = extract_page(html, "example.com", 200, True)
    assert page.description == "From open graph"


def test_headings_limited_and_in_document_order():
    html = "<body>" + "".join(
        f"<h{(i % 3) + 1}> Heading {i} </h{(i % 3) + 1}>" for i in range(8)
    ) + "</body>"
    page = extract_page(html, "example.com", 200, True)
    assert page.headings == [f"Heading {i}" for i in range(5)]


def test_body_text_truncated():
    html = "<body><p>" + "x" * 5000 + "</p></body>"
    page = extract_page(html, "example.com", 200, True)
    assert len(page.body_text) == BODY_SAMPLE_CHARS


def test_malformed_markup_does_not_fail():
    html = "<html><title>Broken</title><body><div><p>unclosed <b>tags<a href='/x'>link"
    page = extract_page(html, "example.com", 500, False)
    assert page.title == "Broken"
    assert page.link_count == 1
    assert "unclosed" in page.body_text


def test_fragment_without_body_tag():
    page = extract_page("<h1>Hello</h1><p>world</p>", "example.com", 200, True)
    assert page.headings == ["Hello"]
    assert "world" in page.body_text


def test_empty_document():
    page = extract_page("", "example.com", 204, True)
    assert page.title == "example.com"
    assert page.body_text == ""


def test_title_kept_out_of_body_sample_without_head_or_body():
    page = extract_page("<title>T</title><p>x</p>", "example.com", 200, True)
    assert page.title == "T"
    assert page.body_text == "x"
