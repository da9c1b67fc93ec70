"""Router helper utilities."""

from .upload_utils import cleanup_temp_file, save_upload_to_temp

__all__ = ["cleanup_temp_file", "save_upload_to_temp"]
