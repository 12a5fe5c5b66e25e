"""Logic for rendering a resolved mapping for display."""

import yaml

from tago.entry import Mapping


def render_mapping(mapping: Mapping, indent: int = 4) -> str:
    """Render entries in sorted key order, each followed by its source file.

    Multi-line values are written back as bracketed blocks so the output is
    itself valid description file syntax.
    """
    pad = " " * indent
    out: list[str] = []
    for key in sorted(mapping):
        entry = mapping[key]
        if "\n" not in entry.value:
            out.append(f"{key}: {entry.value}")
        else:
            out.append(f"{key}: [")
            out.extend(f"{pad}{line}" for line in entry.value.split("\n"))
            out.append("]")
        out.append(f'{pad}// "{entry.source}"')
        out.append("")
    return "\n".join(out)


def render_mapping_yaml(mapping: Mapping) -> str:
    """Render entries as a YAML document of key -> {value, source}."""
    data = {
        key: {"value": entry.value, "source": str(entry.source)}
        for key, entry in mapping.items()
    }
    return yaml.safe_dump(data, sort_keys=True, allow_unicode=True)
