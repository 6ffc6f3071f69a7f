"""Theme colors and color utilities for the UI."""


class SpaceColors:
    """Dark space palette."""

    BG_TOP = "#05070F"
    BG_MIDDLE = "#0B1026"
    BG_BOTTOM = "#1A1238"

    PRIMARY = "#4D79FF"
    PRIMARY_LIGHT = "#8FA8FF"

    ORANGE = "#FF9F1C"
    PURPLE = "#B15CFF"
    GREEN = "#3DDC84"
    RED = "#FF5A5F"
    YELLOW = "#FFD166"

    CARD_BG = "rgba(255, 255, 255, 0.08)"
    CARD_BORDER = "rgba(255, 255, 255, 0.22)"

    TEXT_PRIMARY = "#FFFFFF"
    TEXT_SECONDARY = "#C7CCE0"
    TEXT_MUTED = "#8A90A8"

    SELECTED = "#FF9F1C"
    CORRECT = "#3DDC84"
    INCORRECT = "#FF5A5F"


def blend_hex(a: str, b: str, t: float) -> str:
    """Blend two #RRGGBB colors. t=0 -> a, t=1 -> b."""
    try:
        a = a.strip()
        b = b.strip()
        if not (a.startswith("#") and b.startswith("#") and len(a) == 7 and len(b) == 7):
            return a
        t = max(0.0, min(1.0, float(t)))
        ar, ag, ab = int(a[1:3], 16), int(a[3:5], 16), int(a[5:7], 16)
        br, bg, bb = int(b[1:3], 16), int(b[3:5], 16), int(b[5:7], 16)
        r = int(ar + (br - ar) * t)
        g = int(ag + (bg - ag) * t)
        bl = int(ab + (bb - ab) * t)
        return f"#{r:02X}{g:02X}{bl:02X}"
    except ValueError:
        return a


def rgba(hex_color: str, alpha: float) -> str:
    """Turn #RRGGBB into a Qt stylesheet rgba() string."""
    c = hex_color.strip()
    if not (c.startswith("#") and len(c) == 7):
        return hex_color
    alpha = max(0.0, min(1.0, float(alpha)))
    try:
        r, g, b = int(c[1:3], 16), int(c[3:5], 16), int(c[5:7], 16)
    except ValueError:
        return hex_color
    return f"rgba({r}, {g}, {b}, {alpha:.2f})"
