import pytest

from libs.http_tree.tree import Tree


class TestTreeFromJson:
    def test_object_keeps_order(self):
        tree = Tree.from_json('{"b": 1, "a": "x", "c": null}')
        assert tree.keys() == ["b", "a", "c"]
        assert list(tree) == [("b", 1), ("a", "x"), ("c", None)]

    def test_duplicate_names_are_kept(self):
        tree = Tree.from_json('{"k": 1, "k": 2}')
        assert len(tree) == 2
        assert tree.get_child("k") == 1

    def test_nested_objects_and_arrays(self):
        tree = Tree.from_json('{"user": {"name": "ann"}, "ids": [1, 2]}')
        user = tree.get_child("user")
        ids = tree.get_child("ids")
        assert isinstance(user, Tree)
        assert user.get_child("name") == "ann"
        assert ids.array is True
        assert list(ids) == [("", 1), ("", 2)]

    def test_top_level_array(self):
        tree = Tree.from_json(b'[{"a": 1}, "b"]')
        assert tree.array is True
        assert tree.to_python() == [{"a": 1}, "b"]

    def test_empty_object(self):
        tree = Tree.from_json("{}")
        assert len(tree) == 0
        assert tree.array is False

    @pytest.mark.parametrize("text", ["", "not json", '{"a": ', "<html></html>"])
    def test_invalid_json(self, text):
        with pytest.raises(ValueError):
            Tree.from_json(text)

    @pytest.mark.parametrize("text", ['{"a": NaN}', "[Infinity]", "[-Infinity]"])
    def test_non_standard_constants_rejected(self, text):
        with pytest.raises(ValueError, match="invalid JSON constant"):
            Tree.from_json(text)

    @pytest.mark.parametrize("text", ['"just a string"', "42", "null"])
    def test_scalar_document_rejected(self, text):
        with pytest.raises(ValueError):
            Tree.from_json(text)


class TestTreeAccess:
    def test_contains_is_exact_direct_child(self):
        tree = Tree.from_json('{"outer": {"inner": 1}}')
        assert "outer" in tree
        assert "inner" not in tree
        assert "Outer" not in tree

    def test_get_child_missing(self):
        with pytest.raises(KeyError):
            Tree().get_child("nope")

    def test_get_and_get_child_optional(self):
        tree = Tree([("a", 1)])
        assert tree.get("a") == 1
        assert tree.get("b", "fallback") == "fallback"
        assert tree.get_child_optional("b") is None

    def test_put_replaces_or_appends(self):
        tree = Tree([("a", 1), ("b", 2)])
        tree.put("a", "new")
        tree.put("c", 3)
        assert list(tree) == [("a", "new"), ("b", 2), ("c", 3)]

    def test_add_appends_duplicates(self):
        tree = Tree()
        tree.add("x", 1)
        tree.add("x", 2)
        assert tree.keys() == ["x", "x"]

    def test_equality(self):
        assert Tree([("a", Tree([("b", "c")]))]) == Tree.from_json('{"a": {"b": "c"}}')
        assert Tree([("a", 1)]) != Tree([("a", 2)])
        assert Tree(array=True) != Tree()

    @pytest.mark.parametrize(
        "left,right",
        [
            ('{"a": 1}', '{"a": true}'),
            ('{"a": 1}', '{"a": 1.0}'),
            ('{"a": 0}', '{"a": false}'),
            ('{"a": [1]}', '{"a": [true]}'),
            ('{"a": "1"}', '{"a": 1}'),
        ],
    )
    def test_leaves_of_different_types_differ(self, left, right):
        assert Tree.from_json(left) != Tree.from_json(right)

    def test_different_lengths_differ(self):
        assert Tree([("a", 1)]) != Tree([("a", 1), ("b", 2)])


class TestTreeRoundTrip:
    def test_string_leaves_to_depth_three(self):
        tree = Tree(
            [
                ("name", "root"),
                (
                    "child",
                    Tree(
                        [
                            ("label", "mid"),
                            ("leafs", Tree([("", "x"), ("", "y")], array=True)),
                            ("deep", Tree([("value", "bottom"), ("empty", "")])),
                        ]
                    ),
                ),
                ("unicode", "héllo wörld"),
            ]
        )
        assert Tree.from_json(tree.to_json()) == tree

    def test_to_json_indent(self):
        assert Tree([("a", "b")]).to_json(indent=2) == '{\n  "a": "b"\n}'
