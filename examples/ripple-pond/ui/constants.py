"""Layout constants and color palettes."""

# Timing
FPS = 60

# Window
SCREEN_W = 960
SCREEN_H = 640
MIN_W = 240
MIN_H = 160

# Controls panel
PANEL_H = 56
PANEL_PAD = 10
PANEL_BG = (235, 235, 240)
PANEL_BORDER = (200, 200, 210)
TEXT_COLOR = (40, 40, 50)
TEXT_DIM = (110, 110, 125)
ERROR_COLOR = (190, 40, 40)
ERROR_SECONDS = 3.0

# Parameter steps
SPEED_STEP = 5.0
FREQUENCY_STEP = 0.5

# Color cycles (first entry is the default)
WAVE_COLORS = ["#004C66", "#C0392B", "#1E8449", "#7D3C98", "#222222"]
BACKGROUND_COLORS = ["#FFFFF0", "#F0F8FF", "#101820", "#FDF2E9"]
