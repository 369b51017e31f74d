"""
Tests for the rule compiler and the compiled-rule cache.

Tests cover:
- Rule normalization (sequence / mapping forms, comma selectors)
- Configuration errors
- Memoization by content fingerprint
- Cache bounds (LRU, TTL, disabled cache)
- Single compilation under concurrent callers
"""

import threading
import time

import pytest

from ifthen.core.errors import ConfigurationError, codes
from ifthen.core.validate import (
    CompiledRuleCache,
    RuleCompiler,
    RuleSpec,
    MatchValidator,
    LengthValidator,
)

from tests.helpers import Contact

RULES = [
    ["phone", "match", {"pattern": "^7"}],
    ["name", "length", {"max": 255}],
]


@pytest.fixture
def compiler(registry):
    return RuleCompiler(registry=registry, cache=CompiledRuleCache(max_size=8))


class TestNormalization:
    """Raw rules -> RuleSpec"""

    def test_sequence_form(self):
        spec = RuleSpec.from_raw(["phone, name", "required", {"message": "x"}])

        assert spec.attributes == ("phone", "name")
        assert spec.kind == "required"
        assert spec.options == {"message": "x"}

    def test_option_mappings_are_merged_in_order(self):
        spec = RuleSpec.from_raw(["phone", "match", {"pattern": "^7"}, {"pattern": "^8", "not": True}])

        assert spec.options == {"pattern": "^8", "not": True}

    def test_mapping_form(self):
        spec = RuleSpec.from_raw({"attributes": ["name"], "validator": "length", "max": 3})

        assert spec.attributes == ("name",)
        assert spec.kind == "length"
        assert spec.options == {"max": 3}

    def test_compile_preserves_rule_order(self, compiler, contact):
        validators = compiler.compile(contact, RULES)

        assert [type(v) for v in validators] == [MatchValidator, LengthValidator]
        assert validators[0].attributes == ("phone",)


class TestConfigurationErrors:
    """Malformed rules fail fast and name the model type"""

    @pytest.mark.parametrize("rule", [
        ["phone"],
        [None, "match"],
        ["", "required"],
        ["phone", ""],
        {"attributes": "phone"},
        "phone required",
    ])
    def test_missing_attributes_or_kind(self, compiler, contact, rule):
        with pytest.raises(ConfigurationError) as exc_info:
            compiler.compile(contact, [rule])

        assert exc_info.value.error_code == codes.INVALID_RULE
        assert "Contact has an invalid validation rule" in str(exc_info.value)

    def test_unknown_kind(self, compiler, contact):
        with pytest.raises(ConfigurationError) as exc_info:
            compiler.compile(contact, [["phone", "nope"]])

        assert exc_info.value.error_code == codes.UNKNOWN_VALIDATOR
        assert exc_info.value.details["kind"] == "nope"

    def test_invalid_options(self, compiler, contact):
        with pytest.raises(ConfigurationError) as exc_info:
            compiler.compile(contact, [["name", "length", {}]])

        assert "length" in exc_info.value.message

    def test_unknown_option_rejected(self, compiler, contact):
        with pytest.raises(ConfigurationError):
            compiler.compile(contact, [["phone", "match", {"pattern": "^7", "patern": "^8"}]])


class TestMemoization:
    """Compiled rule sets are reused for equal rules and equal snapshots"""

    def test_same_object_reuses_validators(self, compiler, contact):
        first = compiler.compile(contact, RULES)
        second = compiler.compile(contact, RULES)

        assert first is second

    def test_equal_snapshots_share_validators(self, compiler):
        first = compiler.compile(Contact(type=1, phone="8999"), RULES)
        second = compiler.compile(Contact(type=1, phone="8999"), RULES)

        assert first is second
        assert compiler.cache.stats()["hits"] == 1

    def test_different_snapshot_compiles_again(self, compiler):
        first = compiler.compile(Contact(phone="8999"), RULES)
        second = compiler.compile(Contact(phone="7999"), RULES)

        assert first is not second
        assert compiler.cache.stats()["misses"] == 2

    def test_errors_are_not_part_of_the_snapshot(self, compiler, contact):
        first = compiler.compile(contact, RULES)
        contact.add_error("phone", "Phone is invalid.")

        assert compiler.compile(contact, RULES) is first

    def test_different_rules_compile_again(self, compiler, contact):
        first = compiler.compile(contact, RULES)
        second = compiler.compile(contact, RULES[:1])

        assert first is not second
        assert len(second) == 1

    def test_disabled_cache_always_builds(self, registry, contact):
        compiler = RuleCompiler(registry=registry, cache=None)

        assert compiler.compile(contact, RULES) is not compiler.compile(contact, RULES)


class TestCompiledRuleCache:
    """Bounds of the compiled-rule cache"""

    def test_lru_eviction(self):
        cache = CompiledRuleCache(max_size=2)
        cache.get_or_compile("a", lambda: ("A",))
        cache.get_or_compile("b", lambda: ("B",))
        cache.get("a")  # a is now most recently used
        cache.get_or_compile("c", lambda: ("C",))

        assert "a" in cache
        assert "b" not in cache
        assert "c" in cache
        assert cache.stats()["evictions"] == 1

    def test_ttl_expiry(self):
        now = [100.0]
        cache = CompiledRuleCache(max_size=4, ttl_seconds=10, clock=lambda: now[0])
        first = cache.get_or_compile("a", lambda: (object(),))

        now[0] += 5
        assert cache.get_or_compile("a", lambda: (object(),)) is first

        now[0] += 20
        assert cache.get_or_compile("a", lambda: (object(),)) is not first

    def test_invalid_max_size(self):
        with pytest.raises(ValueError):
            CompiledRuleCache(max_size=0)

    def test_clear(self):
        cache = CompiledRuleCache()
        cache.get_or_compile("a", lambda: ("A",))
        cache.clear()

        assert len(cache) == 0
        assert cache.stats() == {"hits": 0, "misses": 0, "evictions": 0, "size": 0}

    def test_failed_compilation_is_not_cached(self):
        cache = CompiledRuleCache()

        def broken():
            raise ConfigurationError(message="bad rule")

        with pytest.raises(ConfigurationError):
            cache.get_or_compile("a", broken)

        assert "a" not in cache
        assert cache.get_or_compile("a", lambda: ("A",)) == ("A",)

    def test_single_compilation_under_concurrency(self):
        cache = CompiledRuleCache()
        calls = []
        results = []
        barrier = threading.Barrier(8)

        def slow_compile():
            calls.append(1)
            time.sleep(0.05)
            return (object(),)

        def worker():
            barrier.wait()
            results.append(cache.get_or_compile("same", slow_compile))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(calls) == 1
        assert len(results) == 8
        assert all(r is results[0] for r in results)
