from .json_storage import JsonDirectoryStorage

__all__ = ["JsonDirectoryStorage"]
