from .config import dumps, loads, read, write
from .html import render_page, write_pages

__all__ = ["loads", "dumps", "read", "write", "render_page", "write_pages"]
