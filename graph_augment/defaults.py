"""
Default configuration for the graph-augment library.

Each section mirrors a dataclass in ``graph_augment.core.settings``. Projects
override values through the ``GRAPH_AUGMENT`` Django setting, either at the
top level or in a section keyed by schema name.
"""

from __future__ import annotations

from typing import Any

SETTINGS_NAME = "GRAPH_AUGMENT"


LIBRARY_DEFAULTS: dict[str, Any] = {
    "augmentation_settings": {
        # bool, or {"exclude": [type names]}
        "query": True,
        "mutation": True,
        # bool, or {"hasScope": True, "hasRole": False, ...}
        "auth": False,
    },
}
