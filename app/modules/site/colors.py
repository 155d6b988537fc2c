"""Color constants for the site theme.

All colors are HEX values.
"""

from types import MappingProxyType

COLORS = MappingProxyType(
    {
        "main": MappingProxyType(
            {
                "primary": "#333F48",  # dark blue-gray
                "secondary": "#D6D2C4",  # light beige
            }
        ),
        "additional": MappingProxyType(
            {
                "red": "#A45248",  # rust red
                "blue": "#166886",  # steel blue
                "green": "#6A7866",  # sage green
            }
        ),
        "aux": MappingProxyType(
            {
                "cream": "#EFDBB2",
                "peach": "#EACBBB",
                "mint": "#BFCEC2",
                "sky": "#B9C9CC",
                "tan": "#BAA58D",
            }
        ),
    }
)

# CSS custom properties: --color-<category>-<name>
CSS_COLOR_VARS = MappingProxyType(
    {
        f"--color-{category}-{name}": value
        for category, palette in COLORS.items()
        for name, value in palette.items()
    }
)


def get_color(category: str, name: str) -> str:
    """Return a palette color.

    Raises:
        KeyError: If the category or color name is unknown.
    """
    try:
        return COLORS[category][name]
    except KeyError:
        raise KeyError(f"Unknown color: {category}.{name}") from None


def css_root_block() -> str:
    """Render the color variables as a CSS :root rule."""
    declarations = "\n".join(
        f"  {name}: {value};" for name, value in CSS_COLOR_VARS.items()
    )
    return f":root {{\n{declarations}\n}}"
