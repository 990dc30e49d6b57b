"""
Normalization utilities for filter schema settings.

Model and app references in settings may be written in any case and either
as ``"app_label.ModelName"`` or as a bare model name.
"""

from typing import Any, Iterable, List, Optional


def normalize_list(values: Iterable[Any]) -> List[str]:
    """
    Normalize an iterable to a list of lowercase strings.

    Examples:
        >>> normalize_list(["Product", "ORDER", None])
        ["product", "order"]
    """
    if not values:
        return []
    return [str(v).lower() for v in values if v is not None]


def normalize_model_label(value: Any) -> Optional[str]:
    """
    Normalize a model label to "app_label.ModelName".

    Examples:
        >>> normalize_model_label("shop.Order")
        "shop.Order"
        >>> normalize_model_label(Order)
        "shop.Order"
    """
    if value is None:
        return None

    if isinstance(value, str):
        return value

    if hasattr(value, "_meta"):
        meta = value._meta
        return f"{meta.app_label}.{meta.object_name}"

    return str(value)


def model_matches(model: Any, references: Iterable[Any]) -> bool:
    """True when ``model`` is named in ``references`` by label or by bare name."""
    normalized = set(normalize_list(references))
    if not normalized:
        return False
    label = (normalize_model_label(model) or "").lower()
    bare = label.rsplit(".", 1)[-1]
    return label in normalized or bare in normalized
