"""
Theme - Text styles for the clock table
"""
from rich.style import Style


class Theme:
    """
    Styles applied to table cells. Empty string means plain text.
    """
    
    LABEL_STYLE = 'bold'
    TIME_STYLE = ''
    
    # Spacing around every cell, matches a clean borderless table
    CELL_PADDING = (0, 1)
    
    @staticmethod
    def get_label_style() -> Style:
        """Style for the clock name column"""
        return Style.parse(Theme.LABEL_STYLE)
    
    @staticmethod
    def get_time_style() -> Style:
        """Style for the time column"""
        return Style.parse(Theme.TIME_STYLE) if Theme.TIME_STYLE else Style.null()
