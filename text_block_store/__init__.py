"""Block-type host with a text block backed by named child data blocks."""

__version__ = "0.1.0"

from .startup import bootstrap  # noqa: E402

__all__ = ["__version__", "bootstrap"]
