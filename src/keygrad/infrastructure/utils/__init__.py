from ._gradient_check import accuracy, gradient_check, numerical_diff, numerical_grad

__all__ = [
    accuracy.__name__,
    gradient_check.__name__,
    numerical_diff.__name__,
    numerical_grad.__name__,
]
