from .importer import do_import, read_source

__all__ = ["do_import", "read_source"]
