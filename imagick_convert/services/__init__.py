# Services package
from .temp_files import TempFileRegistry
from .settings import Settings
from .source_loader import SourceLoader

__all__ = ["TempFileRegistry", "Settings", "SourceLoader"]
