# itemguard/config/config_display.py
"""
Text formatting codes used in messages delivered to players.
"""

# These will be replaced with appropriate color codes by whatever renders the text
FORMAT_TITLE = "[[TITLE]]"       # Yellow, for headings
FORMAT_CATEGORY = "[[CAT]]"      # Cyan, for categories and labels
FORMAT_HIGHLIGHT = "[[HI]]"      # Green, for important information
FORMAT_SUCCESS = "[[OK]]"        # Green, for success messages
FORMAT_ERROR = "[[ERR]]"         # Red, for error messages
FORMAT_RESET = "[[/]]"           # Reset to default text color

FORMAT_CODES = [FORMAT_TITLE, FORMAT_CATEGORY, FORMAT_HIGHLIGHT, FORMAT_SUCCESS, FORMAT_ERROR, FORMAT_RESET]
