"""
Expose the UI entry points the app script needs through one module.
Pure UI/UX – no data shaping here.
"""
from .styles import inject_base_css
from .sidebar import sidebar_menu
from .pages.dashboard import render as render_dashboard

__all__ = [
    "inject_base_css",
    "sidebar_menu",
    "render_dashboard",
]
