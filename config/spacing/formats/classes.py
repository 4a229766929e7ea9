"""
Class Output
============

One margin rule per entry:

    .space-md {
      margin: clamp(8px, 6.7952px + 0.3213vw, 12px);
    }
"""


def format_entry(prefix: str, name: str, clamp: str) -> str:
    return f".{prefix}-{name} {{\n  margin: {clamp};\n}}"


def get_entry_styles(builder, row) -> str:
    return format_entry(builder.prefix, row.name, builder.clamp_for(row))


def get_styles(builder) -> str:
    """Generate class rules, separated by a blank line"""
    return "\n\n".join(get_entry_styles(builder, row) for row in builder.rows)
