from .file_container import FileContainer

__all__ = ["FileContainer"]
