"""
Applicability rules deciding which operation types get augmented.
"""

from enum import Enum

from ..core.settings import AugmentationSettings


class OperationType(str, Enum):
    QUERY = "Query"
    MUTATION = "Mutation"
    SUBSCRIPTION = "Subscription"


def should_augment_type(
    settings: AugmentationSettings, root_type: str, type_name: str
) -> bool:
    """
    Decide whether ``type_name`` is augmented for ``root_type``.

    A boolean setting applies to every type. A mapping setting augments
    every type except those listed under ``exclude``. Anything else
    disables augmentation.
    """
    setting = settings.operation_setting(root_type)
    if isinstance(setting, bool):
        return setting
    if isinstance(setting, dict):
        return type_name not in setting.get("exclude", [])
    return False


def should_augment_relationship_field(
    settings: AugmentationSettings, root_type: str, from_type: str, to_type: str
) -> bool:
    return should_augment_type(
        settings, root_type, from_type
    ) and should_augment_type(settings, root_type, to_type)
