"""Extraction layer.

This package turns loosely-shaped device payloads into
:class:`pyfieldloc.models.Coordinates`. Every extractor returns ``None``
instead of raising when nothing usable is found.
"""

__all__: list[str] = []
