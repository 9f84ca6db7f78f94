from .map_editor import MapEditor

__all__ = ["MapEditor"]
