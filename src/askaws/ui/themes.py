"""Theme definitions for the TUI.

This module hides the design decisions about:
- Color palettes and visual appearance
- Theme variables (borders, scrollbars, etc.)

To add a new theme, define it here and register it in the app.
"""

from textual.theme import Theme

# Dark navy surfaces with an orange accent
SQUID_INK = Theme(
    name="squid-ink",
    primary="#ff9900",      # Orange - main accent, send button, user bubbles
    secondary="#7aa2f7",    # Blue - assistant bubbles
    accent="#ffd479",       # Gold - highlights
    foreground="#e6e9ef",   # Light text
    background="#0b111a",   # Deepest background
    success="#4cc38a",      # Green - connected
    warning="#f5a524",      # Amber - busy
    error="#f2555a",        # Red - offline, error line
    surface="#161e2b",      # Main surface
    panel="#111824",        # Panel backgrounds
    dark=True,
    variables={
        # Input styling
        "input-cursor-background": "#e6e9ef",
        "input-cursor-foreground": "#0b111a",
        "input-selection-background": "#ff9900 30%",

        # Border colors
        "border": "#2c3a4f",
        "border-blurred": "#1f2a3a",

        # Scrollbar styling
        "scrollbar": "#1f2a3a",
        "scrollbar-hover": "#2c3a4f",
        "scrollbar-active": "#ff9900",
        "scrollbar-background": "#111824",
        "scrollbar-corner-color": "#111824",

        # Footer styling
        "footer-foreground": "#c3cad6",
        "footer-background": "#0b111a",
        "footer-key-foreground": "#ffd479",
        "footer-key-background": "#1f2a3a",
        "footer-description-foreground": "#9aa4b5",

        # Text variants
        "text-muted": "#6b778a",
        "text-disabled": "#2c3a4f",

        # Button styling
        "button-foreground": "#e6e9ef",
        "button-color-foreground": "#0b111a",
        "button-focus-text-style": "bold reverse",
    },
)
