from .core import FileRecord

__all__ = ["FileRecord"]
