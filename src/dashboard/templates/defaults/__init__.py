"""Per-trace defaults layered on the base template."""

from .bar import create_bar_defaults
from .scatter import create_scatter_defaults

__all__ = ['create_bar_defaults', 'create_scatter_defaults']
