"""Global site constants: routes, breakpoints, social links and contact."""

from types import MappingProxyType

# Page routes for url paths (relative, without locale prefix)
PAGES = MappingProxyType(
    {
        "HOME": "",
        "ABOUT": "about",
        "CONTACT": "contact",
        "SERVICES": MappingProxyType(
            {
                "BOUQUETS": "services/bouquets",
                "DECORATION": "services/decoration",
                "PLANTS": "services/plants",
                "EVENTS": "services/events",
                "SUBSCRIPTION": "services/subscription",
            }
        ),
        "CONTENT": MappingProxyType(
            {
                "VIDEO_SURVEILLANCE": "vaizdo-stebejimas-savitarnose",
            }
        ),
    }
)

# Breakpoint configuration (px)
BREAKPOINTS = MappingProxyType(
    {
        "xs": 376,
        "sm": 640,
        "md": 768,
        "lg": 1024,
        "xl": 1280,
        "2xl": 1536,
    }
)

# Page size constraints
PAGE_SIZES = MappingProxyType(
    {
        "max": BREAKPOINTS["2xl"],
        "min": BREAKPOINTS["xs"],
    }
)

SOCIAL_MEDIA = MappingProxyType(
    {
        "INSTAGRAM": "https://www.instagram.com/jaukuma",
        "FACEBOOK": "https://www.facebook.com/studija.jaukuma",
    }
)

CONTACT = MappingProxyType(
    {
        "PHONE": "+37066821177",
    }
)
