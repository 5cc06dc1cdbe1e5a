from .file_extension import FileExtension, ExtensionType

__all__ = [
    "FileExtension",
    "ExtensionType",
]
