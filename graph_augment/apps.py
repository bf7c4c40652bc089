"""
Django app configuration for graph-augment.
"""

import logging

from django.apps import AppConfig as BaseAppConfig
from django.core.exceptions import ImproperlyConfigured

logger = logging.getLogger(__name__)


class AppConfig(BaseAppConfig):
    """Django app configuration for graph-augment."""

    name = "graph_augment"
    verbose_name = "Graph Augment"
    label = "graph_augment"

    def ready(self):
        self._validate_configuration()
        logger.debug("graph-augment initialized")

    def _validate_configuration(self):
        """Validate the augmentation settings section."""
        from .core.settings import AugmentationSettings

        settings = AugmentationSettings.from_schema()
        for root_type in ("query", "mutation"):
            value = getattr(settings, root_type)
            if isinstance(value, dict):
                exclude = value.get("exclude", [])
                if not isinstance(exclude, (list, tuple)):
                    raise ImproperlyConfigured(
                        f"GRAPH_AUGMENT {root_type}.exclude must be a list of type names"
                    )
            elif not isinstance(value, bool):
                raise ImproperlyConfigured(
                    f"GRAPH_AUGMENT {root_type} must be a bool or a mapping"
                )
        if settings.extra:
            logger.warning(
                f"Ignoring unknown augmentation settings: {sorted(settings.extra)}"
            )
