"""The 58 California counties and their normalized tokens.

A county is stored as a lowercase, hyphenated token (``los-angeles``)
and shown on court captions in upper case (``LOS ANGELES``).
"""

CALIFORNIA_COUNTIES: tuple[str, ...] = (
    "Alameda", "Alpine", "Amador", "Butte", "Calaveras", "Colusa",
    "Contra Costa", "Del Norte", "El Dorado", "Fresno", "Glenn", "Humboldt",
    "Imperial", "Inyo", "Kern", "Kings", "Lake", "Lassen", "Los Angeles",
    "Madera", "Marin", "Mariposa", "Mendocino", "Merced", "Modoc", "Mono",
    "Monterey", "Napa", "Nevada", "Orange", "Placer", "Plumas", "Riverside",
    "Sacramento", "San Benito", "San Bernardino", "San Diego",
    "San Francisco", "San Joaquin", "San Luis Obispo", "San Mateo",
    "Santa Barbara", "Santa Clara", "Santa Cruz", "Shasta", "Sierra",
    "Siskiyou", "Solano", "Sonoma", "Stanislaus", "Sutter", "Tehama",
    "Trinity", "Tulare", "Tuolumne", "Ventura", "Yolo", "Yuba",
)


def _tokenize(name: str) -> str:
    return "-".join(name.strip().lower().replace("_", " ").replace("-", " ").split())


COUNTY_TOKENS: dict[str, str] = {_tokenize(name): name for name in CALIFORNIA_COUNTIES}


def normalize_county(value: str) -> str:
    """Convert a county name or token to its normalized token.

    Args:
        value: County as typed by a user (``"Los Angeles"``) or as a
            token (``"los-angeles"``).

    Returns:
        The lowercase hyphenated token.

    Raises:
        ValueError: If the value is not a California county.
    """
    token = _tokenize(value)
    if token.endswith("-county"):
        token = token[: -len("-county")]
    if token not in COUNTY_TOKENS:
        raise ValueError(f"Unknown California county: {value!r}")
    return token


def county_display(token: str) -> str:
    """Return the caption form of a county token, e.g. ``LOS ANGELES``."""
    return token.replace("-", " ").upper()
