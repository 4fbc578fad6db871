"""Built-in output targets; importing this package registers them."""

from . import dataset as _dataset  # noqa: F401
