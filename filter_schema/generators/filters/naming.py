"""
Input type naming for filter schema generation.

Raw entity and scalar names go through a normalizer exactly once. The result
is wrapped in ``NormalizedName`` so composing a name from an already composed
one never applies the normalization prefix a second time.
"""

import re
from typing import Callable, Optional

from ..exceptions import InvalidArgumentError

DEFAULT_INPUT_TYPE_PREFIX = "inp_"
FILTER_CONDITION_SUFFIX = "FilterCondition"
ORDER_BY_SUFFIX = "OrderBy"

_INVALID_NAME_CHARS = re.compile(r"[^_0-9A-Za-z]")


class NormalizedName(str):
    """A type name that already carries the input type prefix."""

    __slots__ = ()

    def __repr__(self) -> str:
        return f"NormalizedName({str.__repr__(self)})"


def normalize_name(raw_name: str, prefix: str = DEFAULT_INPUT_TYPE_PREFIX) -> NormalizedName:
    """
    Default normalizer: replace characters GraphQL names reject and add the prefix.

    Examples:
        >>> normalize_name("sales$Order")
        NormalizedName('inp_sales_Order')
    """
    if isinstance(raw_name, NormalizedName):
        return raw_name
    if not isinstance(raw_name, str) or not raw_name.strip():
        raise InvalidArgumentError(
            f"Type name must be a non-empty string, got {raw_name!r}",
            argument_name="name",
        )
    return NormalizedName(prefix + _INVALID_NAME_CHARS.sub("_", raw_name.strip()))


class InputTypeNamer:
    """
    Composes filter condition and order-by type names.

    Args:
        normalizer: Callable mapping a raw name to its canonical form. Defaults
            to ``normalize_name`` with ``prefix``.
        prefix: Prefix used by the default normalizer.
    """

    def __init__(
        self,
        normalizer: Optional[Callable[[str], str]] = None,
        prefix: str = DEFAULT_INPUT_TYPE_PREFIX,
    ):
        self.prefix = prefix
        self._normalizer = normalizer

    def normalize(self, name: str) -> NormalizedName:
        if isinstance(name, NormalizedName):
            return name
        if not isinstance(name, str) or not name.strip():
            raise InvalidArgumentError(
                f"Type name must be a non-empty string, got {name!r}",
                argument_name="name",
            )
        if self._normalizer is None:
            return normalize_name(name, self.prefix)
        return NormalizedName(self._normalizer(name))

    def compose_filter_type_name(self, name: str, suffix: str) -> NormalizedName:
        """
        Normalize ``name`` and append ``suffix``.

        Only ``NormalizedName`` values are taken as already normalized. A plain
        ``str`` is normalized again even if it happens to carry the prefix, so
        ``"inp_Order"`` becomes ``"inp_inp_Order"`` plus the suffix.
        """
        return NormalizedName(self.normalize(name) + suffix)

    def compose_filter_condition_type_name(self, name: str) -> NormalizedName:
        return self.compose_filter_type_name(name, FILTER_CONDITION_SUFFIX)

    def compose_order_by_type_name(self, name: str) -> NormalizedName:
        return self.compose_filter_type_name(name, ORDER_BY_SUFFIX)


__all__ = [
    "DEFAULT_INPUT_TYPE_PREFIX",
    "FILTER_CONDITION_SUFFIX",
    "ORDER_BY_SUFFIX",
    "NormalizedName",
    "normalize_name",
    "InputTypeNamer",
]
