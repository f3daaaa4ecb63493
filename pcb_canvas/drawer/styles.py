"""Drawing constants for PCB layers."""

# Copper colors per layer
COPPER_COLORS = {
    "top": "#C83232",       # Red - front copper
    "bottom": "#3232C8",    # Blue - back copper
    "inner1": "#C8C832",    # Yellow - inner layer 1
    "inner2": "#32C8C8",    # Cyan - inner layer 2
}

# Soldermask tint over copper, per layer
SOLDERMASK_OVER_COPPER_COLORS = {
    "top": "#4E8C4A",
    "bottom": "#3F6C8C",
    "inner1": "#4E8C4A",
    "inner2": "#4E8C4A",
}

# Bare board visible through a soldermask opening
SUBSTRATE_COLOR = "#C9A26E"

# Keepout hatch and border
KEEPOUT_COLOR = "#FF6B6B"

# Drilled holes
DRILL_COLOR = "#1a1a1a"

# Background color for the board
BACKGROUND_COLOR = "#1a1a1a"

# Keepout hatch geometry (mm, scaled by the real-to-canvas transform)
KEEPOUT_HATCH_SPACING = 1.0
KEEPOUT_HATCH_WIDTH = 0.15
KEEPOUT_BORDER_WIDTH = 0.3

# Dash pattern for dashed outlines, as multiples of the stroke width
DASH_PATTERN = (3.0, 2.0)
