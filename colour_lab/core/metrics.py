"""WCAG relative luminance, contrast ratio and pass/fail grading.

Thresholds are policy constants from WCAG 2.x, not computed:

    AAA normal text   >= 7
    AA normal text    >= 4.5   (also AAA large text)
    AA large text     >= 3
"""

from collections.abc import Sequence

from colour_lab.core.palette import as_rgb
from colour_lab.core.types import WcagCheck

AAA_NORMAL = 7.0
AA_NORMAL = 4.5
AAA_LARGE = AA_NORMAL
AA_LARGE = 3.0

# (title, minimum, description) rows shown by the contrast checker
WCAG_ROWS: tuple[tuple[str, float, str], ...] = (
    ('WCAG AA Normal', AA_NORMAL, 'Body Text'),
    ('WCAG AA Large', AA_LARGE, 'Large Text (18pt+)'),
    ('WCAG AAA Normal', AAA_NORMAL, 'Body Text'),
    ('WCAG AAA Large', AAA_LARGE, 'Large Text (18pt+)'),
)

_WEIGHTS = (0.2126, 0.7152, 0.0722)


def _linearize(c: int) -> float:
    s = c / 255
    return s / 12.92 if s <= 0.03928 else ((s + 0.055) / 1.055) ** 2.4


def relative_luminance(colour: str | Sequence[int]) -> float:
    """WCAG relative luminance in [0, 1]. Accepts RGB or hex."""
    rgb = as_rgb(colour)
    return sum(w * _linearize(c) for w, c in zip(_WEIGHTS, rgb))


def contrast_ratio(a: str | Sequence[int], b: str | Sequence[int]) -> float:
    """(L_lighter + 0.05) / (L_darker + 0.05). Symmetric, in [1, 21]."""
    la = relative_luminance(a)
    lb = relative_luminance(b)
    lighter, darker = (la, lb) if la >= lb else (lb, la)
    return (lighter + 0.05) / (darker + 0.05)


def wcag_level(ratio: float) -> str:
    if ratio >= AAA_NORMAL:
        return 'AAA'
    if ratio >= AA_NORMAL:
        return 'AA'
    if ratio >= AA_LARGE:
        return 'AA Large'
    return 'Fail'


def rating(ratio: float) -> str:
    """One-word verdict shown next to the ratio."""
    if ratio >= AAA_NORMAL:
        return 'Excellent'
    if ratio >= AA_NORMAL:
        return 'Good'
    if ratio >= AA_LARGE:
        return 'Fair'
    return 'Poor'


def wcag_checks(ratio: float) -> tuple[WcagCheck, ...]:
    return tuple(
        WcagCheck(title=title, minimum=minimum, passed=ratio >= minimum, desc=desc)
        for title, minimum, desc in WCAG_ROWS
    )
