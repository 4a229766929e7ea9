"""
Spacing Output Formats
======================

One module per output kind. Each exposes:

    format_entry(...)                 -> CSS text for one entry
    get_entry_styles(builder, row)    -> single-entry CSS (a fragment of get_styles)
    get_styles(builder)               -> full CSS for the builder's table
"""

from . import classes, variables, utilities

__all__ = ["classes", "variables", "utilities"]
