"""Final workspace name composition.

The final name is ``{kebab(base)}-{drn}{first letter of domain}``, e.g.
base "Sales Analytics", DRN "DRN001", domain "Finance" gives
``sales-analytics-DRN001f``. Missing pieces give an empty string so no
lookup is ever made for a partial name.
"""

import re

_NON_ALNUM_RE = re.compile(r"[^a-zA-Z0-9]+")
_HYPHEN_RUN_RE = re.compile(r"-+")


def kebabize(value: str | None) -> str:
    """Trim, replace non-alphanumeric runs with one hyphen, strip edge hyphens, lowercase."""
    text = (value or "").strip()
    text = _NON_ALNUM_RE.sub("-", text)
    text = _HYPHEN_RUN_RE.sub("-", text)
    return text.strip("-").lower()


def domain_char(domain: str | None) -> str:
    """First character of domain, lowercased; empty when domain is empty."""
    return domain[0].lower() if domain else ""


def build_final_name(base: str | None, drn: str | None = None, domain: str | None = None) -> str:
    """Compose the final workspace name, or return "" if any part is missing."""
    b = kebabize(base)
    d = (drn or "").strip()
    dc = domain_char(domain)
    if not b or not d or not dc:
        return ""
    return f"{b}-{d}{dc}"
