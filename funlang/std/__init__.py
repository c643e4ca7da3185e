from .prelude import populate_prelude
from .io import BasicIO, populate_io_context

__all__ = ['populate_prelude', 'BasicIO', 'populate_io_context']
