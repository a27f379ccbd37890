"""
ChannelBus — event name spec tests
"""

from channelbus.names import expand, split_names


class TestSplitNames:
    def test_single_name_is_not_split(self):
        assert split_names("change") is None

    def test_whitespace_separated(self):
        assert split_names("change  blur\tfocus") == ["change", "blur", "focus"]

    def test_list_and_tuple(self):
        assert split_names(["a", "b"]) == ["a", "b"]
        assert split_names(("a",)) == ["a"]

    def test_none_and_mapping_are_not_name_lists(self):
        assert split_names(None) is None
        assert split_names({"a": 1}) is None


class TestExpand:
    def test_single_name_returns_none(self):
        assert expand("change", print) is None

    def test_multiple_names_share_value(self):
        assert expand("a b", print) == [("a", print), ("b", print)]

    def test_mapping_keeps_order_and_values(self):
        f, g = object(), object()
        assert expand({"b": f, "a": g}, None) == [("b", f), ("a", g)]
