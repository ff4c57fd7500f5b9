"""Neutralize Go-template syntax embedded in helmfile manifests.

Helmfile renders ``helmfile.yaml`` through Go templates before reading it, so
committed files often contain ``{{ ... }}`` directives that are not valid YAML.
The sanitizer does not evaluate anything. It drops lines holding only a
control directive and blanks out inline expressions, leaving text the YAML
loader can read.
"""

from __future__ import annotations

import re

# A whole line holding one control action, with optional trim markers.
_DIRECTIVE_LINE = re.compile(
    r"^[ \t]*\{\{-?[ \t]*"
    r"(?:(?:if|else|end|range|with|define|block)\b|/\*)"
    r"[^{}\n]*\}\}[ \t]*(?:\r?\n|$)",
    re.MULTILINE,
)

# Braces are excluded from the body so matching stays linear on unterminated input.
_INLINE_EXPRESSION = re.compile(r"\{\{[^{}\n]*\}\}")


def strip_directive_lines(content: str) -> str:
    """Delete lines that consist solely of a template control directive.

    Bodies of competing branches are all kept, so a key set in both an
    ``if`` and an ``else`` branch appears twice and the later one wins when
    the mapping is built.
    """
    return _DIRECTIVE_LINE.sub("", content)


def strip_inline_expressions(content: str) -> str:
    """Replace every remaining ``{{ ... }}`` expression with an empty string."""
    return _INLINE_EXPRESSION.sub("", content)


def sanitize_template(content: str) -> str:
    return strip_inline_expressions(strip_directive_lines(content))
