"""
Placeholder expansion module.
Array templates are expanded once per value list; ``{}`` marks substitution points.
"""

from .arrays import PLACEHOLDER, expand_array, expand_row, row_has_placeholder

__all__ = ['PLACEHOLDER', 'expand_array', 'expand_row', 'row_has_placeholder']
