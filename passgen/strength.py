# score, tier
# (heuristic password strength)
#

import re

TIERS = (
    (80, 'Very Strong'),
    (60, 'Strong'),
    (40, 'Medium'),
    (0, 'Weak'),
)

# blessed color names for each tier
TIER_COLORS = {
    'Very Strong': 'green',
    'Strong': 'blue',
    'Medium': 'yellow',
    'Weak': 'red',
}

_LOWER = re.compile(r'[a-z]')
_UPPER = re.compile(r'[A-Z]')
_DIGIT = re.compile(r'[0-9]')
_OTHER = re.compile(r'[^a-zA-Z0-9]')


def score(password: str) -> int:
    """Score `password` from 0 to 100.

    Only length and character composition are considered,
    this is not an entropy estimate.

    """
    length = len(password)
    has_lower = _LOWER.search(password) is not None
    has_upper = _UPPER.search(password) is not None
    has_digit = _DIGIT.search(password) is not None
    has_other = _OTHER.search(password) is not None
    points = 0
    # Length
    if length >= 8:
        points += 20
    if length >= 12:
        points += 15
    if length >= 16:
        points += 15
    # Variety
    if has_lower:
        points += 10
    if has_upper:
        points += 10
    if has_digit:
        points += 10
    if has_other:
        points += 20
    # Complexity
    if length >= 8 and has_lower and has_upper and has_digit and has_other:
        points += 10
    return min(100, points)


def tier(strength: int) -> str:
    """Label for `strength` score."""
    for threshold, label in TIERS:
        if strength >= threshold:
            return label
    return TIERS[-1][1]
