"""Final workspace name composition."""

import pytest

from devportal.scaffolder.fields import build_final_name, domain_char, kebabize


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("Sales Analytics", "sales-analytics"),
        ("  --My__Data  Lake!! ", "my-data-lake"),
        ("ALPHA", "alpha"),
        ("", ""),
        (None, ""),
        ("***", ""),
    ],
)
def test_kebabize(raw, expected) -> None:
    assert kebabize(raw) == expected


def test_domain_char() -> None:
    assert domain_char("Finance") == "f"
    assert domain_char("") == ""
    assert domain_char(None) == ""


def test_build_final_name() -> None:
    assert build_final_name("Sales Analytics", "DRN001", "Finance") == "sales-analytics-DRN001f"


def test_build_final_name_trims_drn() -> None:
    assert build_final_name("ws", "  DRN002 ", "Cloud") == "ws-DRN002c"


@pytest.mark.parametrize(
    ("base", "drn", "domain"),
    [("", "DRN001", "Finance"), ("ws", "", "Finance"), ("ws", "DRN001", ""), ("!!", "DRN001", "Finance")],
)
def test_missing_piece_gives_empty_name(base, drn, domain) -> None:
    assert build_final_name(base, drn, domain) == ""
