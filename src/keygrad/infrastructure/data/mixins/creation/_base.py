"""
Creation mixin defining constructors derived from an existing value.

``*_like`` constructors keep the receiver's kind and shape; they are how the
graph engine builds seeds (``ones_like``) and gradient buffers
(``zeros_like``) without ever changing kind.
"""

from abc import ABC


class DataMixinCreation(ABC):
    """
    Abstract mixin defining kind-preserving constructors.
    """

    def zeros_like(self) -> "DataMixinCreation":
        """
        Zeros with the receiver's shape and kind (``False`` for bool).
        """

    def ones_like(self) -> "DataMixinCreation":
        """
        Ones with the receiver's shape and kind.
        """

    def full_like(self, value: float) -> "DataMixinCreation":
        """
        `value` converted to the receiver's kind, with the receiver's shape.
        """

    def eye_like_type(self, n: int) -> "DataMixinCreation":
        """
        ``n x n`` identity matrix in the receiver's kind.
        """
