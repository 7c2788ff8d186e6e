"""Masking of card data and credentials in request/response transcripts."""

import re

FILTERED = "[FILTERED]"

_SCRUB_PATTERNS = (
    re.compile(r"(Authorization:\s*Basic\s+)[A-Za-z0-9+/=]+", re.IGNORECASE),
    re.compile(r'("number"\s*:\s*")[^"]*(")'),
    re.compile(r'("cvv"\s*:\s*")[^"]*(")'),
    re.compile(r'("holder_document"\s*:\s*")[^"]*(")'),
)


def _mask(match: "re.Match[str]") -> str:
    closing = match.group(2) if match.re.groups > 1 else ""
    return f"{match.group(1)}{FILTERED}{closing}"


def scrub(transcript: str) -> str:
    for pattern in _SCRUB_PATTERNS:
        transcript = pattern.sub(_mask, transcript)
    return transcript
