"""
Import/Export utility modules.
"""
from .upload_manager import UploadManager, UploadTooLargeError

__all__ = [
    "UploadManager",
    "UploadTooLargeError",
]
