"""
Bistro: restaurant directory of customers, staff, suppliers and reservations.
"""
from bistro.domain.directory import Directory, DirectorySnapshot, ReadOnlyDirectory

__all__ = [
    "Directory",
    "DirectorySnapshot",
    "ReadOnlyDirectory",
]
