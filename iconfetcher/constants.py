"""Constants for icon resolution"""

# Classification substring that outranks every other icon.
APPLE_TOUCH_ICON: str = "apple-touch-icon"

# `rel` values accepted exactly. Anything starting with APPLE_TOUCH_ICON is accepted too.
ICON_RELS: frozenset[str] = frozenset({"shortcut icon", "icon"})

PARSER: str = "html.parser"

# Conventional icon filenames requested at the site root, in dispatch order.
APPLE_TOUCH_ICON_SIZES: tuple[int, ...] = (180, 152, 144, 120, 114, 76, 72, 60, 57)
FAVICON_SIZES: tuple[int, ...] = (256, 96, 48, 32, 16)
MSAPPLICATION_SIZES: tuple[int, ...] = (558, 310, 270, 150, 128, 70)
MSTILE_SIZES: tuple[int, ...] = (310, 270, 144, 70)

CONVENTIONAL_ICON_FILENAMES: tuple[str, ...] = (
    *(
        name
        for size in APPLE_TOUCH_ICON_SIZES
        for name in (
            f"apple-touch-icon-{size}x{size}-precomposed.png",
            f"apple-touch-icon-{size}x{size}.png",
        )
    ),
    "apple-touch-icon-precomposed.png",
    "apple-touch-icon.png",
    "touch-icon-192x192.png",
    "touch-icon.png",
    *(
        name
        for size in FAVICON_SIZES
        for name in (f"favicon-{size}x{size}.png", f"favicon-{size}x{size}.ico")
    ),
    "favicon.png",
    "favicon.ico",
    *(f"msapplication-square{size}x{size}logo.png" for size in MSAPPLICATION_SIZES),
    *(f"mstile-{size}x{size}.png" for size in MSTILE_SIZES),
)

# Only an exact 200 counts as a hit.
SUCCESS_STATUS_CODE: int = 200
