"""
Theme constants — colors, chart layout, Bootstrap overrides.
Import from here instead of hardcoding colors anywhere.
"""

# ── Color Palette ────────────────────────────────────────────────────────────
BG = "#0a0a14"
GREEN = "#2ecc71"
RED = "#e74c3c"
BLUE = "#3498db"
ORANGE = "#f39c12"
PURPLE = "#9b59b6"
TEAL = "#1abc9c"
WHITE = "#ffffff"
GRAY = "#aaaaaa"
CYAN = "#00d4ff"

# ── Status Colors (orders + returns) ─────────────────────────────────────────
STATUS_COLORS = {
    "Pending": ORANGE,
    "Shipped": BLUE,
    "Delivered": GREEN,
    "Cancelled": RED,
    "Received": TEAL,
    "Refunded": PURPLE,
}

# ── Plotly Chart Layout ──────────────────────────────────────────────────────
CHART_LAYOUT = dict(
    template="plotly_dark",
    paper_bgcolor="rgba(0,0,0,0)",
    plot_bgcolor="rgba(0,0,0,0)",
    font={"color": WHITE},
    margin=dict(t=50, b=30, l=60, r=20),
)

# ── Tab trigger classes ──────────────────────────────────────────────────────
# These map to the DARKLY theme + our custom.css overrides
TAB_ACTIVE_CLASS = "tab-trigger tab-trigger-active"
TAB_INACTIVE_CLASS = "tab-trigger"
CARD_CLASS = "shadow-sm"
