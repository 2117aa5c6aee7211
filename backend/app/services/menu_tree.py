"""Menu tree builder: nests flat menu rows under their parents."""


def build_menu_tree(items: list[dict], parent_id: int | None = None) -> list[dict]:
    """Return the items under `parent_id`, ordered by order_index, each with its `children`.

    Rows whose parent is absent from `items` are never reached from the roots.
    """
    level = sorted(
        (item for item in items if item.get("parent_id") == parent_id),
        key=lambda item: item.get("order_index") or 0,
    )
    return [{**item, "children": build_menu_tree(items, item["id"])} for item in level]
