"""
Reorder Engine
==============

Drag-and-drop reordering. The dragged entry is taken out first, so the
target position shifts by one when the drag moves an entry downwards.
"""

import logging

logger = logging.getLogger(__name__)


def target_position(dragged_index: int, target_index: int, insert_before: bool) -> int:
    """Insertion index in the list that no longer contains the dragged entry."""
    position = target_index
    if dragged_index < target_index:
        position -= 1
    if not insert_before:
        position += 1
    return position


def reorder(table, dragged_id, target_id, insert_before: bool = True) -> bool:
    """
    Move dragged_id before (or after) target_id.

    Returns:
        True if the order changed

    Raises:
        NotFoundError: either id is not in the table (table untouched)
    """
    dragged_index = table.index_of(dragged_id)
    target_index = table.index_of(target_id)
    if dragged_id == target_id:
        return False

    order = table.ids
    order.pop(dragged_index)
    order.insert(target_position(dragged_index, target_index, insert_before), dragged_id)

    if order == table.ids:
        return False

    table.apply_order(order)
    logger.info(
        f"[{table.kind.value}] moved entry id={dragged_id} "
        f"{'before' if insert_before else 'after'} id={target_id}"
    )
    return True
