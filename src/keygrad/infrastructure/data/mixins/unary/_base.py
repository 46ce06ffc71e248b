"""
Unary mixin defining the transcendental VariableData API.

This module declares :class:`DataMixinUnary`. Transcendental kernels are
only meaningful for floating-point data, so implementations are registered
for ``f32`` and ``f64`` only; calls on integer or boolean data raise
`NotImplementedTypeError`.
"""

from abc import ABC


class DataMixinUnary(ABC):
    """
    Abstract mixin defining elementwise transcendental functions.
    """

    def exp(self) -> "DataMixinUnary":
        """
        Elementwise natural exponential.
        """

    def log(self) -> "DataMixinUnary":
        """
        Elementwise natural logarithm.

        Notes
        -----
        Non-positive inputs produce ``-inf`` / ``nan`` like NumPy does; a
        `RuntimeWarning` is emitted when that happens.
        """

    def sin(self) -> "DataMixinUnary":
        """
        Elementwise sine.
        """

    def cos(self) -> "DataMixinUnary":
        """
        Elementwise cosine.
        """

    def tanh(self) -> "DataMixinUnary":
        """
        Elementwise hyperbolic tangent.
        """
