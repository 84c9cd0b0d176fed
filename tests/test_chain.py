import random
import pytest
from underbar import Chain, chain


class TestChainLaziness:
    """Test that chained steps run only on demand"""

    def test_deferred_execution(self):
        """Test that recording steps does not call the callbacks"""
        call_count = 0

        def track_calls(x):
            nonlocal call_count
            call_count += 1
            return x * 2

        lazy = chain([1, 2, 3]).map(track_calls).filter(lambda x: x > 2)
        assert call_count == 0, "Operations should not execute during definition"

        assert lazy.value() == [4, 6]
        assert call_count == 3, f"Expected 3 calls, got {call_count}"

    def test_steps_are_recorded(self):
        """Test that each step returns a new chain with one more operation"""
        base = Chain(range(3))
        mapped = base.map(str)
        assert base is not mapped
        assert len(base._ops) == 0
        assert len(mapped._ops) == 1
        assert repr(mapped) == "Chain(map)"

    def test_source_untouched(self):
        """Test that evaluation never mutates the source"""
        data = [3, 1, 2, 2]
        result = chain(data).uniq().sort_by(lambda x: x).difference([3]).value()
        assert result == [1, 2]
        assert data == [3, 1, 2, 2]

    def test_value_without_steps_copies(self):
        """Test that a bare chain returns a list copy of the source"""
        data = [1, 2]
        result = chain(data).value()
        assert result == [1, 2]
        assert result is not data


class TestChainComposition:
    """Test composing steps and terminal operations"""

    def test_method_chaining(self, people):
        """Test a realistic pipeline over records"""
        names = (
            chain(people)
            .filter(lambda p: p["age"] < 40)
            .sort_by("name")
            .pluck("name")
            .value()
        )
        assert names == ["larry", "moe"], f"Unexpected names: {names}"

    def test_flatten_take_and_iterate(self):
        """Test flattening, limiting and iterating a chain"""
        lazy = chain([1, [2, [3, 4]], 5]).flatten().reject(lambda x: x == 3).take(3)
        assert list(lazy) == [1, 2, 4]

    def test_intersection_and_shuffle(self):
        """Test set steps and shuffling with an explicit RNG"""
        result = chain([1, 2, 3, 4]).intersection([2, 3, 4], [3, 4, 5]).shuffle(random.Random(3)).value()
        assert sorted(result) == [3, 4]

    def test_terminal_reductions(self):
        """Test terminal steps that fold the result"""
        evens = chain(range(10)).filter(lambda x: x % 2 == 0)
        assert evens.reduce(lambda a, b: a + b) == 20
        assert evens.reduce(lambda a, b: a + b, 100) == 120
        assert evens.contains(4) is True
        assert evens.every(lambda x: x % 2 == 0) is True
        assert evens.some(lambda x: x > 7) is True
        assert evens.find(lambda x: x > 3) == 4
        assert evens.first() == 0
        assert evens.last(2) == [6, 8]

    def test_group_by(self):
        """Test grouping as a terminal step"""
        groups = chain(["apple", "avocado", "banana"]).group_by(lambda s: s[0])
        assert groups == {"a": ["apple", "avocado"], "b": ["banana"]}

    def test_multiple_terminals_on_same_chain(self):
        """Test that a chain can be evaluated repeatedly"""
        lazy = chain([1, 2, 3]).map(lambda x: x + 1)
        assert lazy.value() == [2, 3, 4]
        assert lazy.value() == [2, 3, 4]

    def test_unknown_operation(self):
        """Test that unknown steps fail clearly"""
        with pytest.raises(ValueError, match="Unknown op: bogus"):
            Chain([1], [("bogus", ())]).value()
