"""
Utility Output
==============

Tailwind-style directional utilities. Every entry yields seven margin,
seven padding and three gap rules; the rules are grouped by family under a
comment header. The naming prefix is not used.
"""

MARGIN_RULES = (
    ("mt", ("margin-top",)),
    ("mb", ("margin-bottom",)),
    ("ml", ("margin-left",)),
    ("mr", ("margin-right",)),
    ("mx", ("margin-left", "margin-right")),
    ("my", ("margin-top", "margin-bottom")),
    ("m", ("margin",)),
)

PADDING_RULES = (
    ("pt", ("padding-top",)),
    ("pb", ("padding-bottom",)),
    ("pl", ("padding-left",)),
    ("pr", ("padding-right",)),
    ("px", ("padding-left", "padding-right")),
    ("py", ("padding-top", "padding-bottom")),
    ("p", ("padding",)),
)

GAP_RULES = (
    ("gap", ("gap",)),
    ("gap-x", ("column-gap",)),
    ("gap-y", ("row-gap",)),
)

SECTIONS = (
    ("margin", "Tailwind-style Margin utilities", MARGIN_RULES),
    ("padding", "Tailwind-style Padding utilities", PADDING_RULES),
    ("gap", "Tailwind-style Gap utilities", GAP_RULES),
)


def _rule(selector: str, name: str, properties, clamp: str) -> str:
    declarations = " ".join(f"{prop}: {clamp};" for prop in properties)
    return f".{selector}-{name} {{ {declarations} }}"


def format_entry(name: str, clamp: str) -> dict:
    """
    Rules for one entry, keyed by family.

    Returns:
        {"margin": [7 rules], "padding": [7 rules], "gap": [3 rules]}
    """
    return {
        family: [_rule(selector, name, properties, clamp) for selector, properties in rules]
        for family, _, rules in SECTIONS
    }


def _render(formatted_entries) -> str:
    blocks = []
    for family, title, _ in SECTIONS:
        rules = [rule for formatted in formatted_entries for rule in formatted[family]]
        blocks.append(f"/* {title} */\n" + "\n".join(rules))
    return "\n\n".join(blocks)


def get_entry_styles(builder, row) -> str:
    return _render([format_entry(row.name, builder.clamp_for(row))])


def get_styles(builder) -> str:
    return _render([format_entry(row.name, builder.clamp_for(row)) for row in builder.rows])
