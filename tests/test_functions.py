import pytest

from svc_same import functions
from svc_same.exceptions import UnknownFunctionError

from elements import E, V


class TestSameBuiltin:

    def test_returns_plain_booleans(self):
        assert functions.same(V(1), V(1)) is True
        assert functions.same(V(1), V(2)) is False

    def test_unknown_becomes_none(self):
        assert functions.same(None, V(1)) is None
        assert functions.same() is None
        assert functions.same(V(1)) is None

    def test_varargs(self):
        assert functions.same(E(1, 2), E(1, 2), E(1, 2), E(1, 2)) is True
        assert functions.same(V(1), None, V(1)) is None

    def test_non_graph_values_are_false(self):
        assert functions.same("test", "test") is False


class TestRegistry:

    @pytest.mark.parametrize("name", ["same", "SAME", "Same"])
    def test_lookup_is_case_insensitive(self, name):
        assert functions.get_function(name) is functions.same

    def test_unknown_function(self):
        with pytest.raises(UnknownFunctionError) as exc_info:
            functions.get_function("similar")
        assert exc_info.value.status_code == 404
        assert "similar" in exc_info.value.message

    def test_call_function_spreads_arguments(self):
        assert functions.call_function("SAME", [V("a"), V("a")]) is True
        assert functions.call_function("same", []) is None

    def test_registry_lists_same(self):
        assert "same" in functions.BUILTIN_FUNCTIONS
