# delivery_nav/runtime/resources.py
import os
from functools import lru_cache

from delivery_nav.domain.street_graph import StreetRecord
from delivery_nav.io.map_loader import load_streets


@lru_cache(maxsize=8)
def load_map_from_path(file: str, fmt: str) -> tuple[StreetRecord, ...] | None:
    if not os.path.exists(file):
        return None
    return tuple(load_streets(file, fmt))
