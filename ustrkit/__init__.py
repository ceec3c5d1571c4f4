"""Code-point aware UTF-8 helpers, strings and string lists."""

__version__ = "0.1.0"
__all__ = ["strlist", "ustr", "utf8"]