"""
Centralized style constants for the Spacecraft Builder UI.

Design tokens shared by all widgets. Use these constants instead of
hardcoded values in stylesheets and painters.
"""

from ..model.catalog import ComponentType

# =============================================================================
# COLOR PALETTE - Semantic roles
# =============================================================================

PRIMARY_ACTION = "#4CAF50"        # Green - Copy, primary buttons
PRIMARY_ACTION_HOVER = "#45a049"

SELECTED_STATE = "#2196F3"

# =============================================================================
# BACKGROUND / TEXT / BORDER
# =============================================================================

BG_DARKEST = "#1e1e1e"
BG_DARK = "#2d2d2d"
BG_LIGHTER = "#444444"
BG_HIGHLIGHT = "#4a4a4a"

TEXT_PRIMARY = "#e0e0e0"
TEXT_SECONDARY = "#c0c0c0"
TEXT_TERTIARY = "#a0a0a0"

BORDER_MEDIUM = "#555555"

# =============================================================================
# TYPOGRAPHY / SPACING
# =============================================================================

FONT_SIZE_XS = "10pt"
FONT_SIZE_SM = "11pt"
FONT_SIZE_MD = "12pt"

SPACING_XS = 4
SPACING_SM = 8
SPACING_MD = 12

BORDER_RADIUS_MD = "4px"
HIT_TARGET_COMFORTABLE = 32

# =============================================================================
# COMPONENT COLORS (stand-ins for component textures)
# =============================================================================

COMPONENT_COLORS = {
    ComponentType.STEEL_BLOCK: "#8a9199",      # Brushed steel
    ComponentType.CENTRAL: "#f2c14e",          # Gold core
    ComponentType.LASER_WEAPON: "#e0475b",     # Red
    ComponentType.MISSILE_LAUNCHER: "#d9822b",  # Orange
    ComponentType.RAPTOR_ENGINE: "#4aa3df",    # Blue exhaust
}

# =============================================================================
# VALIDATION SEVERITY COLORS
# =============================================================================

SEVERITY_ERROR = "#f44336"        # Red
SEVERITY_SUCCESS = "#4caf50"      # Green

# =============================================================================
# STYLESHEET HELPERS
# =============================================================================

SECTION_LABEL_STYLE = f"font-weight: bold; color: {TEXT_SECONDARY}; font-size: {FONT_SIZE_MD};"

BUTTON_STYLE = f"""
    QPushButton {{
        background: {BG_LIGHTER};
        color: {TEXT_PRIMARY};
        border: 1px solid {BORDER_MEDIUM};
        border-radius: {BORDER_RADIUS_MD};
        padding: 4px 8px;
        min-height: {HIT_TARGET_COMFORTABLE - 8}px;
    }}
    QPushButton:hover {{
        background: {BG_HIGHLIGHT};
    }}
    QPushButton:checked {{
        background: {SELECTED_STATE};
        color: white;
    }}
"""
