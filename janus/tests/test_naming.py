"""Tests for project name sanitisation."""

from __future__ import annotations

import pytest

from janus.core import TemplateRef, default_project_name, sanitize_project_name


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("My Cool App!", "my-cool-app"),
        ("   ", "my-project"),
        ("", "my-project"),
        ("../etc", "etc"),
        ('a<b>c:d"e|f?g*h', "abcdefgh"),
        ("back\\slash", "backslash"),
        ("--.hidden.--", "hidden"),
        ("Already-Fine", "already-fine"),
        ("nul\x00byte", "nulbyte"),
        ("tab\there\x7f", "tabhere"),
    ],
)
def test_sanitize_examples(raw: str, expected: str) -> None:
    assert sanitize_project_name(raw) == expected


@pytest.mark.parametrize(
    "raw",
    [
        "My Cool App!",
        "   ",
        "../etc",
        " -. x .- ",
        "A  B",
        "Ünïcode Näme",
        "...",
        "-\x00-",
    ],
)
def test_sanitize_is_idempotent(raw: str) -> None:
    once = sanitize_project_name(raw)
    assert sanitize_project_name(once) == once


def test_default_project_name() -> None:
    assert default_project_name(TemplateRef("python", "flask")) == "python-flask-app"
    assert default_project_name(TemplateRef("nextjs")) == "nextjs-app"
