"""
Linear-algebra mixin defining the public VariableData matmul API.
"""

from abc import ABC


class DataMixinLinalg(ABC):
    """
    Abstract mixin defining matrix multiplication.
    """

    def matmul(self, other: "DataMixinLinalg") -> "DataMixinLinalg":
        """
        Matrix product of two 2-D operands of the same kind.

        Raises
        ------
        NotImplementedTypeError
            If the operand kinds differ or are not numeric.
        DataDimensionError
            If either operand is not 2-D.
        DataShapeError
            If the inner dimensions do not match.
        """
