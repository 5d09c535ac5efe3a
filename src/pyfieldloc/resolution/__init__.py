"""Resolution layer.

Ranks per-device candidates by source trust and picks one location per
client; also annotates device lists for multi-device displays.
"""

__all__: list[str] = []
