"""
Arithmetic mixin defining the public VariableData arithmetic API.

This module declares :class:`DataMixinArithmetic`, an abstract mixin that
specifies the *interface and semantics* of elementwise arithmetic on
`VariableData`.

The mixin itself does not implement any numerical logic. Concrete kernels are
registered per element kind through the data control-path manager, so a call
on a kind without a kernel (e.g. `neg` on ``usize``) fails with
`NotImplementedTypeError` instead of silently converting.
"""

from abc import ABC


class DataMixinArithmetic(ABC):
    """
    Abstract mixin defining elementwise arithmetic.

    Notes
    -----
    - Binary methods require both operands to have the same element kind and
      the same shape; broadcasting is always explicit (`broadcast_to`) and is
      handled by the operator layer, never by these kernels.
    - Results always keep the operands' element kind.
    """

    def add(self, other: "DataMixinArithmetic") -> "DataMixinArithmetic":
        """
        Elementwise ``self + other``.

        Raises
        ------
        NotImplementedTypeError
            If the kinds differ or are not numeric.
        DataShapeError
            If the shapes differ.
        """

    def sub(self, other: "DataMixinArithmetic") -> "DataMixinArithmetic":
        """
        Elementwise ``self - other``.
        """

    def mul(self, other: "DataMixinArithmetic") -> "DataMixinArithmetic":
        """
        Elementwise ``self * other``.
        """

    def div(self, other: "DataMixinArithmetic") -> "DataMixinArithmetic":
        """
        Elementwise ``self / other``.

        Integer kinds truncate toward zero.
        """

    def maximum(self, other: "DataMixinArithmetic") -> "DataMixinArithmetic":
        """
        Elementwise maximum of two operands of the same kind and shape.
        """

    def scalar_add(self, value: float) -> "DataMixinArithmetic":
        """
        Add a Python scalar, converted to this kind first.
        """

    def scalar_mul(self, value: float) -> "DataMixinArithmetic":
        """
        Multiply by a Python scalar, converted to this kind first.
        """

    def neg(self) -> "DataMixinArithmetic":
        """
        Elementwise negation (signed kinds only).
        """

    def square(self) -> "DataMixinArithmetic":
        """
        Elementwise ``self * self``.
        """

    def pow(self, c: float) -> "DataMixinArithmetic":
        """
        Elementwise power ``self ** c``.

        Integer kinds require a non-negative integral exponent.

        Raises
        ------
        InvalidArgumentError
            If the kind is an integer kind and `c` is negative or not
            integral.
        """
