"""
Variable Output
===============

Custom properties declared on :root:

    :root {
      --sp-xs: clamp(...);
      --sp-sm: clamp(...);
    }
"""

CUSTOM_PROPERTY_MARKER = "--"


def property_name(prefix: str, name: str) -> str:
    """Names that already look like custom properties are kept verbatim."""
    if name.startswith(CUSTOM_PROPERTY_MARKER):
        return name
    return f"{CUSTOM_PROPERTY_MARKER}{prefix}-{name}"


def format_entry(prefix: str, name: str, clamp: str) -> str:
    return f"  {property_name(prefix, name)}: {clamp};"


def get_entry_styles(builder, row) -> str:
    return format_entry(builder.prefix, row.name, builder.clamp_for(row))


def get_styles(builder) -> str:
    lines = "\n".join(get_entry_styles(builder, row) for row in builder.rows)
    return f":root {{\n{lines}\n}}"
