"""Tests for the vectors example."""


class TestVectors:
    def test_numbers_use_promoted_default(self, example_module) -> None:
        assert example_module.add(5, 6) == 11

    def test_strings_use_promoted_default(self, example_module) -> None:
        assert example_module.add("ab", "cd") == "abcd"

    def test_sequences(self, example_module) -> None:
        assert example_module.add([7, 2], [3, 4]) == [10, 6]

    def test_nested(self, example_module) -> None:
        assert example_module.add([[1], [2]], [[3], [4]]) == [[1, 3], [2, 4]]

    def test_mappings(self, example_module) -> None:
        result = example_module.add({"a": 1, "b": [1, 2]}, {"b": [10, 20], "c": 3})
        assert result == {"a": 1, "b": [11, 22], "c": 3}

    def test_metadata(self, example_module) -> None:
        assert example_module.add.name == "add"
        assert example_module.add.length == 2
