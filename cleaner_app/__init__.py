"""Interactive Dash front end for the GPX cleaner."""

__all__ = [
    "app",
    "callbacks",
    "data_utils",
    "figures",
    "layout",
]
