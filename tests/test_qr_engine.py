import json

import pytest

from siteinspect.errors import MissingInput
from siteinspect.qr_scanner import analyze_qr_content, classify_qr_content


@pytest.mark.parametrize(
    "content, expected",
    [
        ("alice@example.com", "Email Address"),
        ("+1 (555) 123-4567", "Phone Number"),
        ("555-0100", "Phone Number"),
        ("+1\u00a0555 1234", "Phone Number"),
        ("\u0661\u0662\u0663\u0664", "Plain Text"),
        ("WIFI:T:WPA;S:home;P:pass;;", "WiFi Credentials"),
        ("BEGIN:VCARD\nVERSION:3.0\nFN:Alice\nEND:VCARD", "Contact Information"),
        ("plain hello world", "Plain Text"),
        ("5", "Plain Text"),
    ],
)
def test_content_types(content, expected):
    content_type, _ = classify_qr_content(content)
    assert content_type == expected


def test_email_rule_precedes_wifi():
    content_type, _ = classify_qr_content("WIFI:S:cafe.net;P:a@b;;")
    assert content_type == "Email Address"


def test_wifi_result():
    result = analyze_qr_content("WIFI:T:WPA;S:home;P:pass;;")
    assert result.type == "QR Content - WiFi Credentials"
    assert result.title == "QR Code: WiFi Credentials"
    assert result.description == (
        'This QR code contains: "WIFI:T:WPA;S:home;P:pass;;". '
        "This contains WiFi network information for automatic connection."
    )
    assert result.safety == "safe"
    assert result.warnings == []


def test_simple_plain_text():
    result = analyze_qr_content("plain hello world")
    assert result.type == "QR Content - Plain Text"
    assert result.description.endswith("This is a simple text-based QR code.")


def test_lengthy_plain_text():
    content = "lorem ipsum " * 10
    result = analyze_qr_content(content)
    assert result.type == "QR Content - Plain Text"
    assert result.description.endswith("The content is quite lengthy.")
    # the whole payload is echoed, not just the logged preview
    assert f'"{content}"' in result.description


def test_no_metadata_in_json():
    data = analyze_qr_content("alice@example.com").to_json()
    assert set(data) == {"title", "description", "type", "safety", "warnings"}


def test_idempotent():
    a = analyze_qr_content("BEGIN:VCARD\nFN:Bob\nEND:VCARD")
    b = analyze_qr_content("BEGIN:VCARD\nFN:Bob\nEND:VCARD")
    assert json.dumps(a.to_json()) == json.dumps(b.to_json())


@pytest.mark.parametrize("content", ["", None])
def test_missing_content(content):
    with pytest.raises(MissingInput):
        analyze_qr_content(content)
