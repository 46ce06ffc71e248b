"""
Comparison mixin defining scalar threshold masks.

Masks are returned in the receiver's own kind (``1`` where the comparison
holds, ``0`` elsewhere) so they can be multiplied straight into a gradient
without a kind conversion, e.g. ``gy * x.gt_mask(0)`` for ReLU.
"""

from abc import ABC


class DataMixinComparison(ABC):
    """
    Abstract mixin defining elementwise comparisons against a scalar.
    """

    def gt_mask(self, value: float) -> "DataMixinComparison":
        """
        ``1`` where ``x > value``, else ``0``.
        """

    def ge_mask(self, value: float) -> "DataMixinComparison":
        """
        ``1`` where ``x >= value``, else ``0``.
        """

    def lt_mask(self, value: float) -> "DataMixinComparison":
        """
        ``1`` where ``x < value``, else ``0``.
        """

    def le_mask(self, value: float) -> "DataMixinComparison":
        """
        ``1`` where ``x <= value``, else ``0``.
        """
