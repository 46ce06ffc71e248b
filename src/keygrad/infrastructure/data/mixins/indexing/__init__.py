"""
Indexing mixins and kernels for VariableData.

Aggregates the ``slice_with_*`` gathers and their ``add_at_*`` scatter-add
duals. The kernel module is imported for its registration side effects; only
the mixin is exported.
"""

from ._data_indexing import *
from ._base import DataMixinIndexing

__all__ = [
    DataMixinIndexing.__name__,
]
