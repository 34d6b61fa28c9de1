from icon_sync.figma.nodes import NodeKind, collect_icons, parse_node


def _box(w, h):
    return {"x": 0, "y": 0, "width": w, "height": h}


def _tree():
    return parse_node(
        {
            "id": "0:1",
            "name": "Icons",
            "type": "FRAME",
            "children": [
                {"id": "1:1", "name": "bell", "type": "COMPONENT", "absoluteBoundingBox": _box(16, 16)},
                {
                    "id": "1:2",
                    "name": "set",
                    "type": "COMPONENT_SET",
                    "children": [
                        {"id": "2:1", "name": "star-s", "type": "COMPONENT", "absoluteBoundingBox": _box(12, 12)},
                        {"id": "2:2", "name": "star-l", "type": "VECTOR", "absoluteBoundingBox": _box(19.6, 20.4)},
                    ],
                },
                {"id": "1:3", "name": "banner", "type": "COMPONENT", "absoluteBoundingBox": _box(200, 40)},
                {"id": "1:4", "name": "wide", "type": "COMPONENT", "absoluteBoundingBox": _box(24, 16)},
                {"id": "1:5", "name": "tiny", "type": "VECTOR", "absoluteBoundingBox": _box(4, 4)},
                {"id": "1:6", "name": "label", "type": "TEXT", "absoluteBoundingBox": _box(16, 16)},
                {
                    "id": "1:7",
                    "name": "inside-instance",
                    "type": "INSTANCE",
                    "children": [
                        {"id": "3:1", "name": "hidden", "type": "COMPONENT", "absoluteBoundingBox": _box(16, 16)},
                    ],
                },
                {"id": "1:8", "name": "no-box", "type": "COMPONENT"},
            ],
        }
    )


def test_parse_node_kinds_and_defaults():
    root = _tree()
    assert root.kind is NodeKind.FRAME
    assert root.children[5].kind is NodeKind.OTHER
    assert root.children[0].width == 16.0

    unnamed = parse_node({"id": "9:9", "type": "vector"})
    assert unnamed.name == "icon-9:9"
    assert unnamed.kind is NodeKind.VECTOR
    assert unnamed.width is None


def test_collect_icons_keeps_document_order_and_filters():
    icons = collect_icons(_tree())

    assert [i.id for i in icons] == ["1:1", "2:1", "2:2"]
    star_l = icons[2]
    assert (star_l.width, star_l.height) == (20, 20)


def test_size_range_is_configurable():
    icons = collect_icons(_tree(), min_size=14, max_size=18)
    assert [i.name for i in icons] == ["bell"]


def test_leaf_root_is_collected():
    root = parse_node({"id": "5:5", "name": "solo", "type": "COMPONENT", "absoluteBoundingBox": _box(16, 16)})
    assert [i.name for i in collect_icons(root)] == ["solo"]


def test_verbose_reports_skips(capsys):
    collect_icons(_tree(), verbose=True)
    out = capsys.readouterr().out
    assert "[DEBUG] skip out of size range [200x40]: banner" in out
    assert "[DEBUG] skip aspect ratio [24x16]: wide" in out


def test_leaf_without_id_is_ignored():
    root = parse_node(
        {
            "id": "0:1",
            "type": "FRAME",
            "children": [
                {"name": "anon", "type": "COMPONENT", "absoluteBoundingBox": _box(16, 16)},
                {"id": "1:1", "name": "bell", "type": "COMPONENT", "absoluteBoundingBox": _box(16, 16)},
            ],
        }
    )
    assert [i.id for i in collect_icons(root)] == ["1:1"]
