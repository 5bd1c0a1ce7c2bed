"""Factory tests: end-to-end behavior of create() and the default registry.

Tests cover:
    - Canonical equivalence and distinctness of created types
    - Singleton instances and cross-type distinctness
    - Validation errors surface from create()/new()
    - The red/green/blue and big/small/blue scenarios
    - Default registry is shared, built once under concurrency, and honors settings
"""

import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

import symenum
from symenum.factory import create, get_default_registry, reset_default_registry
from symenum.core.errors import (
    EmptyValueSetError, InvalidCharacterError, InvalidValueError, RegistryClosedError,
)
from symenum.core.registry import TypeRegistry


@pytest.fixture
def fresh_default_registry():
    reset_default_registry()
    yield
    reset_default_registry()


# ─── equivalence ─────────────────────────────────────────────────

def test_same_set_same_type(registry):
    assert create(["foo", "bar", "baz"], registry=registry) is create(
        ["baz", "bar", "foo", "bar"], registry=registry,
    )


def test_different_sets_different_types(registry):
    assert create(["foo", "bar"], registry=registry) is not create(
        ["foo", "baz"], registry=registry,
    )


def test_singleton_instances(registry):
    one = create(["foo", "bar", "baz"], registry=registry)
    assert one.new("foo") is one.new("foo")


def test_cross_type_instances_distinct(registry):
    t1 = create(["a", "b"], registry=registry)
    t2 = create(["a", "c"], registry=registry)
    assert t1.new("a") is not t2.new("a")
    assert t1.new("a") != t2.new("a")


# ─── validation ──────────────────────────────────────────────────

def test_empty_rejected(registry):
    with pytest.raises(EmptyValueSetError):
        create([], registry=registry)
    assert len(registry) == 0


def test_invalid_character_rejected(registry):
    with pytest.raises(InvalidCharacterError):
        create(["foo!"], registry=registry)
    assert len(registry) == 0


def test_closed_registry_rejected():
    reg = TypeRegistry()
    reg.close()
    with pytest.raises(RegistryClosedError):
        create(["a"], registry=reg)


def test_empty_registry_argument_is_used(registry, fresh_default_registry):
    color = create(["red"], registry=registry)
    assert color in list(registry)
    assert len(get_default_registry()) == 0


# ─── scenarios ───────────────────────────────────────────────────

def test_color_scenario(registry):
    t = create(["red", "green", "blue"], registry=registry)
    assert t.values() == ("blue", "green", "red")
    r = t.new("red")
    assert str(r) == "red"
    assert r == "red"
    assert r == t.new("red")
    with pytest.raises(InvalidValueError):
        t.new("pink")


def test_shared_value_scenario(registry):
    t = create(["red", "green", "blue"], registry=registry)
    s = create(["big", "small", "blue"], registry=registry)
    assert s is not t
    assert not (s.new("blue") == t.new("blue"))


def test_predicates_scenario(registry):
    color = create(["red", "yellow", "blue", "green"], registry=registry)
    red = color.new("red")
    assert red.is_red
    assert not red.is_yellow
    assert not red.is_blue
    assert not red.is_green
    assert dict(zip(color.values(), color.predicates())) == color.predicate_map()


# ─── default registry ────────────────────────────────────────────

def test_default_registry_shared(fresh_default_registry):
    assert symenum.create(["p", "q"]) is symenum.create(["q", "p"])
    assert get_default_registry() is get_default_registry()


def test_default_registry_reads_settings(monkeypatch, fresh_default_registry):
    monkeypatch.setenv("SYMENUM_EAGER_POOL", "true")
    monkeypatch.setenv("SYMENUM_TYPE_NAME_PREFIX", "Palette")
    color = create(["red", "blue"])
    assert color.name.startswith("Palette")
    assert color.pool_built


def test_package_exports():
    for name in ("create", "EnumType", "EnumInstance", "TypeRegistry", "InvalidValueError"):
        assert hasattr(symenum, name)


def test_concurrent_first_create_uses_one_default_registry(fresh_default_registry):
    workers = 16
    for _ in range(10):
        reset_default_registry()
        barrier = threading.Barrier(workers)

        def request(n):
            barrier.wait()
            return symenum.create(["red", "green", "blue"][n % 3:] + ["red", "green", "blue"])

        with ThreadPoolExecutor(max_workers=workers) as pool:
            results = list(pool.map(request, range(workers)))

        assert len({id(t) for t in results}) == 1
        assert len(get_default_registry()) == 1


def test_reset_default_registry_builds_new_one(fresh_default_registry):
    first = get_default_registry()
    reset_default_registry()
    assert get_default_registry() is not first
