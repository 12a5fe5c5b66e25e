"""Logic for merging description mappings with nearest-scope-wins precedence."""

from collections.abc import Sequence

from tago.entry import Mapping


def merge_mappings(mappings: Sequence[Mapping]) -> Mapping:
    """Fold nearest-first mappings into one.

    Farther scopes are applied first so that a key defined in several scopes
    ends up holding the nearest scope's Entry. Entries are replaced whole.
    """
    result: Mapping = {}
    for mapping in reversed(mappings):
        result.update(mapping)
    return result
