# Colours and fonts shared by the viewer widgets
BG_MAIN = "#f0f2f5"
BG_TOOLBAR = "#2d3e50"
BG_PANEL = "#ffffff"
BG_BUTTON = "#3c6e91"
FG_BUTTON = "#ffffff"
FG_TEXT = "#1d1d1d"
FG_SUBTEXT = "#555555"

FONT_BUTTON = ("Segoe UI", 10, "bold")
FONT_HEADER = ("Segoe UI", 11, "bold")
FONT_TEXT = ("Segoe UI", 10)
FONT_MONO = ("Consolas", 10)
