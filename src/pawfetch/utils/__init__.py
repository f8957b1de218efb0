from .directories import AppDirectories

__all__ = ["AppDirectories"]
