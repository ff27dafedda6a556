# Settings for the salvage overlay

# Salvage range in tiles, measured from the edge of the shipwreck.
SALVAGE_RANGE = 7

# Shipwrecks occupy a square footprint of this many tiles per side.
SHIPWRECK_SIZE = 2

# Alpha used for the translucent fill of a shipwreck highlight.
HIGHLIGHT_FILL_ALPHA = 50

# Outline width of a shipwreck highlight
HIGHLIGHT_BORDER_WIDTH = 2

# Full opacity for outlines drawn on top of a fill.
OPAQUE = 255
