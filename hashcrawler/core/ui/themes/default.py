"""Default theme for HashCrawler console output - Monochrome Edition"""

from rich.markup import escape
from rich.style import Style
from rich.theme import Theme

# Monochrome palette
COLORS = {
    'primary': '#f5f5f5',      # Off-white
    'secondary': '#d4d4d4',    # Light gray
    'success': '#ffffff',      # Pure white
    'warning': '#b3b3b3',      # Medium-light gray
    'error': '#ff0000',        # Bright red
    'info': '#c0c0c0',         # Silver
    'debug': '#909090',
    'muted': '#707070',
    'accent': '#a0a0a0',
    'subtle': '#4a4a4a',
}


# Confidence tiers fade from white to dark gray
CONFIDENCE_COLORS = {
    'high': COLORS['success'],
    'medium': COLORS['accent'],
    'low': COLORS['muted'],
    'unknown': COLORS['subtle']
}


HASHCRAWLER_THEME = Theme({
    'default': Style(color=COLORS['secondary']),
    'primary': Style(color=COLORS['primary'], bold=True),
    'secondary': Style(color=COLORS['secondary']),
    'muted': Style(color=COLORS['muted']),

    # Status styles
    'success': Style(color=COLORS['success'], bold=True),
    'error': Style(color=COLORS['error'], bold=True, italic=True),
    'warning': Style(color=COLORS['warning'], bold=True),
    'info': Style(color=COLORS['info']),
    'debug': Style(color=COLORS['debug'], dim=True, italic=True),

    # Confidence styles
    'confidence.high': Style(color=CONFIDENCE_COLORS['high'], bold=True),
    'confidence.medium': Style(color=CONFIDENCE_COLORS['medium']),
    'confidence.low': Style(color=CONFIDENCE_COLORS['low']),
    'confidence.unknown': Style(color=CONFIDENCE_COLORS['unknown'], dim=True),

    # Components
    'header': Style(color=COLORS['primary'], bold=True, underline=True),
    'hash': Style(color=COLORS['primary'], bold=True),
    'label': Style(color=COLORS['accent'], italic=True),
    'value': Style(color=COLORS['primary']),
    'table.header': Style(color=COLORS['primary'], bold=True, underline=True),
    'table.border': Style(color=COLORS['subtle']),
})


ICONS = {
    'success': '✓',
    'error': '✗',
    'warning': '!',
    'info': 'i',
    'debug': '?',
    'bullet': '•',
}


FORMATS = {
    'status': "[{style}]{icon} {text}[/{style}]",
}


def get_confidence_style(confidence: str) -> str:
    """Get style name for a confidence tier"""
    return f"confidence.{confidence.lower()}"


def get_status_icon(status: str) -> str:
    """Get icon for status"""
    return ICONS.get(status.lower(), ICONS['bullet'])


def format_status(status: str, text: str) -> str:
    """Format a status message; the text itself is never read as markup"""
    return FORMATS["status"].format(style=status.lower(), icon=get_status_icon(status), text=escape(text))
