"""
Tests for ErrorScope and union_errors.
"""

import pytest

from ifthen.core.validate import ErrorScope, union_errors

from tests.helpers import Contact


class TestUnionErrors:

    def test_base_messages_first(self):
        merged = union_errors({"phone": ["a"]}, {"phone": ["b"], "name": ["c"]})

        assert merged == {"phone": ["a", "b"], "name": ["c"]}

    def test_duplicates_dropped(self):
        merged = union_errors({"phone": ["a", "b"]}, {"phone": ["b", "a", "c"]})

        assert merged == {"phone": ["a", "b", "c"]}

    def test_empty_buckets_dropped(self):
        assert union_errors({"phone": []}, {}) == {}

    def test_inputs_not_mutated(self):
        base = {"phone": ["a"]}
        union_errors(base, {"phone": ["b"]})

        assert base == {"phone": ["a"]}


class TestErrorScope:

    def test_enter_clears_errors(self, contact):
        contact.add_error("phone", "existing")

        with ErrorScope(contact) as scope:
            assert contact.get_errors() == {}
            assert scope.snapshot == {"phone": ["existing"]}

    def test_commit_merges(self, contact):
        contact.add_error("phone", "existing")

        with ErrorScope(contact):
            contact.add_error("phone", "new")
            contact.add_error("name", "other")

        assert contact.get_errors() == {"phone": ["existing", "new"], "name": ["other"]}

    def test_commit_is_idempotent(self, contact):
        for _ in range(3):
            with ErrorScope(contact):
                contact.add_error("phone", "new")

        assert contact.get_errors() == {"phone": ["new"]}

    def test_discard_restores_snapshot(self, contact):
        contact.add_error("phone", "existing")

        with ErrorScope(contact) as scope:
            contact.add_error("type", "guard error")
            scope.discard()

        assert scope.discarded
        assert contact.get_errors() == {"phone": ["existing"]}

    def test_exception_restores_snapshot(self, contact):
        contact.add_error("phone", "existing")

        with pytest.raises(RuntimeError):
            with ErrorScope(contact):
                contact.add_error("phone", "half-written")
                raise RuntimeError("boom")

        assert contact.get_errors() == {"phone": ["existing"]}

    def test_nested_scopes(self, contact):
        contact.add_error("phone", "outer")

        with ErrorScope(contact):
            contact.add_error("name", "kept")
            with ErrorScope(contact) as inner:
                assert contact.get_errors() == {}
                contact.add_error("type", "dropped")
                inner.discard()
            assert contact.get_errors() == {"name": ["kept"]}

        assert contact.get_errors() == {"phone": ["outer"], "name": ["kept"]}

    def test_works_with_any_error_host(self):
        class Host:
            def __init__(self):
                self.errors = {}

            def get_errors(self, attribute=None):
                return {k: list(v) for k, v in self.errors.items()}

            def clear_errors(self, attribute=None):
                self.errors = {}

            def add_errors(self, errors):
                for k, v in errors.items():
                    self.errors.setdefault(k, []).extend(v)

            def has_errors(self, attribute=None):
                return bool(self.errors)

        host = Host()
        host.add_errors({"a": ["x"]})

        with ErrorScope(host) as scope:
            host.add_errors({"b": ["y"]})
            scope.discard()

        assert host.errors == {"a": ["x"]}
