"""
AugmentationSettings implementation.
"""

import copy
from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Mapping, Optional, Union

from django.conf import settings as django_settings

from ..defaults import LIBRARY_DEFAULTS, SETTINGS_NAME

SECTION_NAME = "augmentation_settings"

OperationSetting = Union[bool, Dict[str, List[str]]]


def _merge_settings_dicts(*dicts: Optional[Mapping[str, Any]]) -> dict[str, Any]:
    """Merge multiple settings dictionaries with later ones taking precedence."""
    result = {}
    for d in dicts:
        if d:
            result.update(d)
    return result


def _get_library_defaults() -> dict[str, Any]:
    return copy.deepcopy(LIBRARY_DEFAULTS.get(SECTION_NAME, {}))


def _get_global_settings(schema_name: str) -> dict[str, Any]:
    """Get settings from Django settings, preferring a section for ``schema_name``."""
    if not django_settings.configured:
        return {}
    graph_settings = getattr(django_settings, SETTINGS_NAME, {}) or {}
    if schema_name in graph_settings:
        graph_settings = graph_settings.get(schema_name) or {}
    return graph_settings.get(SECTION_NAME, {}) or {}


@dataclass
class AugmentationSettings:
    """Settings controlling which operations are augmented and with which auth."""

    query: OperationSetting = True
    mutation: OperationSetting = True
    auth: Union[bool, Dict[str, bool]] = False
    extra: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_dict(cls, values: Mapping[str, Any]) -> "AugmentationSettings":
        merged = _merge_settings_dicts(_get_library_defaults(), values)
        valid_fields = {f.name for f in fields(cls)} - {"extra"}
        extra = {k: v for k, v in merged.items() if k not in valid_fields}
        return cls(
            **{k: v for k, v in merged.items() if k in valid_fields}, extra=extra
        )

    @classmethod
    def from_schema(cls, schema_name: str = "default") -> "AugmentationSettings":
        return cls.from_dict(_get_global_settings(schema_name))

    @classmethod
    def coerce(
        cls, config: Union[None, Mapping[str, Any], "AugmentationSettings"]
    ) -> "AugmentationSettings":
        if config is None:
            return cls.from_schema()
        if isinstance(config, cls):
            return config
        return cls.from_dict(config)

    def operation_setting(self, root_type: str) -> Any:
        """Return the setting for a lowercased operation name (query, mutation, ...)."""
        if root_type in ("query", "mutation"):
            return getattr(self, root_type)
        return self.extra.get(root_type, False)
