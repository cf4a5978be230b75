"""
Array template expansion.

A template wrapped in brackets, such as ``[{}.txt]``, is expanded into one
token per value. Any other template passes through as a single token so the
per-value substitution can deal with it later.
"""

from typing import Iterable, List, Sequence


PLACEHOLDER = '{}'


def is_array_template(template: str) -> bool:
    """Return True if ``template`` is enclosed in a leading ``[`` and trailing ``]``."""
    return len(template) >= 2 and template[0] == '[' and template[-1] == ']'


def expand_array(template: str, values: Iterable[str]) -> List[str]:
    """
    Expand a bracketed array template against every value.

    Args:
        template: Argument template, possibly of the form ``[fmt]``
        values: Values substituted for ``{}`` inside ``fmt``, in order

    Returns:
        One string per value for an array template, otherwise ``[template]``

    Example:
        >>> expand_array('[{}.txt]', ['a', 'b'])
        ['a.txt', 'b.txt']
        >>> expand_array('{}.txt', ['a', 'b'])
        ['{}.txt']
    """
    if not is_array_template(template):
        return [template]

    fmt = template[1:-1]
    return [fmt.replace(PLACEHOLDER, value) for value in values]


def expand_row(templates: Iterable[str], values: Sequence[str]) -> List[str]:
    """
    Flatten array expansion over a row of argument templates.

    Args:
        templates: Argument templates in command-line order
        values: Full value list, shared by every array template

    Returns:
        Expanded argument list, token order preserved
    """
    row: List[str] = []
    for template in templates:
        row.extend(expand_array(template, values))
    return row


def row_has_placeholder(row: Iterable[str]) -> bool:
    """Return True if any argument in ``row`` still contains ``{}``."""
    return any(PLACEHOLDER in arg for arg in row)
