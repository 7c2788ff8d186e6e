"""Street line splitting for Mundipagg address blocks."""

import re
from typing import NamedTuple, Optional

_DIGIT_RUN = re.compile(r"\d+")


class StreetAddress(NamedTuple):
    street: Optional[str]
    number: Optional[str]


def parse_street_address(address1: Optional[str]) -> StreetAddress:
    """Split a free-text street line into street name and house number.

    The house number is the first run of digits; the street is whatever is
    left once that run is cut out, trimmed. Later digit runs (apartment,
    suite) stay in the street part.

    >>> parse_street_address("Av. Paulista 900")
    StreetAddress(street='Av. Paulista', number='900')
    """
    if not address1:
        return StreetAddress(None, None)

    match = _DIGIT_RUN.search(address1)
    if match is None:
        return StreetAddress(address1.strip(), None)

    street = (address1[:match.start()] + address1[match.end():]).strip()
    return StreetAddress(street, match.group(0))
