from .locale import replace_unicode

__all__ = ["replace_unicode"]
