"""
Unit tests for deep key search.
"""

from boardscout.extractor.deep_search import find_key


class TestFindKey:
    def test_single_occurrence(self):
        data = {"props": {"initialReduxState": {"resources": [{"BoardResource": {"board_id": "123456789"}}]}}}
        assert find_key(data, "board_id") == "123456789"

    def test_missing_key(self):
        assert find_key({"a": [1, 2, {"b": "c"}], "d": None}, "board_id") is None

    def test_scalar_root(self):
        assert find_key("board_id", "board_id") is None
        assert find_key(None, "board_id") is None

    def test_shallow_match_wins(self):
        data = {"nested": {"board_id": "222222"}, "board_id": "111111"}
        assert find_key(data, "board_id") == "111111"

    def test_first_in_enumeration_order(self):
        data = {"first": {"board_id": "111111"}, "second": {"board_id": "222222"}}
        assert find_key(data, "board_id") == "111111"

    def test_falsy_values_skipped(self):
        data = {"board_id": "", "child": {"board_id": 0, "deeper": {"board_id": "333333"}}}
        assert find_key(data, "board_id") == "333333"

    def test_int_value_stringified(self):
        assert find_key({"board_id": 549755813888}, "board_id") == "549755813888"

    def test_container_value_is_searched_not_returned(self):
        data = {"board_id": {"board_id": "444444"}}
        assert find_key(data, "board_id") == "444444"

    def test_arrays_traversed(self):
        assert find_key([[], [{"x": 1}, {"board_id": "555555"}]], "board_id") == "555555"

    def test_cycle_terminates(self):
        data: dict = {"a": {}}
        data["a"]["parent"] = data
        data["self"] = data
        assert find_key(data, "board_id") is None

    def test_cycle_with_match_after_it(self):
        node: dict = {}
        node["loop"] = node
        node["tail"] = {"board_id": "666666"}
        assert find_key(node, "board_id") == "666666"

    def test_depth_cap(self):
        data: dict = {"board_id": "777777"}
        for _ in range(10):
            data = {"child": data}
        assert find_key(data, "board_id", max_depth=5) is None
        assert find_key(data, "board_id", max_depth=20) == "777777"
