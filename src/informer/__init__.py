"""Public interface for the file informer."""

from .errors import AccessError, InformerError, UnclassifiableKindError
from .render import render_panel
from .report import FileReport

__version__ = "0.1.0"
__all__ = [
    "AccessError",
    "FileReport",
    "InformerError",
    "UnclassifiableKindError",
    "render_panel",
    "__version__",
]
