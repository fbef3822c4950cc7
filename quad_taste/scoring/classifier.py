"""Qualitative style labels."""

CONTEMPORARY = "Contemporary"
TRANSITIONAL = "Transitional"
TRADITIONAL = "Traditional"

STYLE_LABELS = (CONTEMPORARY, TRANSITIONAL, TRADITIONAL)


def classify_style(
    avg_style_era: float,
    contemporary_below: float = 2.5,
    traditional_above: float = 3.5,
) -> str:
    """
    Map an average style-era metric (1-5 scale) to a style label.

    Both thresholds are exclusive, so 2.5 and 3.5 are Transitional.

    Examples:
        >>> classify_style(2.4)
        'Contemporary'
        >>> classify_style(3.6)
        'Traditional'
    """
    if avg_style_era < contemporary_below:
        return CONTEMPORARY
    if avg_style_era > traditional_above:
        return TRADITIONAL
    return TRANSITIONAL


def classify_tradition(
    tradition_score: float,
    contemporary_below: float = 4.0,
    traditional_above: float = 6.0,
) -> str:
    """Same labels, read off a 1-10 tradition axis score."""
    return classify_style(
        tradition_score,
        contemporary_below=contemporary_below,
        traditional_above=traditional_above,
    )
