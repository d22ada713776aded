# ---------------------------------------------------------
# URL Safety Checks (rule based, no network)
# ---------------------------------------------------------

from __future__ import annotations

import re

from .models import SafetyVerdict


# ---------------------------------------------------------
# PATTERNS
# ---------------------------------------------------------

SUSPICIOUS_DOMAIN_TOKENS = ("bit.ly", "tinyurl", "suspicious", "malicious", "phishing")

# unanchored: any dotted quad inside the host counts
IP_LITERAL = re.compile(r"\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3}", re.ASCII)

WARN_NO_HTTPS = "Website does not use secure HTTPS connection"
WARN_SUSPICIOUS_DOMAIN = "Domain may contain suspicious elements"
WARN_IP_ADDRESS = "Website uses IP address instead of domain name"


# ---------------------------------------------------------
# MAIN CHECK
# ---------------------------------------------------------

def check_safety(url: str, domain: str) -> SafetyVerdict:
    """
    Run the three URL checks in a fixed order.

    Every check that fires appends one warning; the verdict is "warning"
    as soon as any of them does.
    """
    verdict = SafetyVerdict()

    # -------------------------
    # HTTPS
    # -------------------------
    if not url.startswith("https://"):
        verdict.flag(WARN_NO_HTTPS)

    # -------------------------
    # Suspicious tokens
    # -------------------------
    for token in SUSPICIOUS_DOMAIN_TOKENS:
        if token in domain:
            verdict.flag(WARN_SUSPICIOUS_DOMAIN)
            break

    # -------------------------
    # IP Address
    # -------------------------
    if IP_LITERAL.search(domain):
        verdict.flag(WARN_IP_ADDRESS)

    return verdict
