"""
Named-program registry and the high-level run API.
"""

import pytest

from ycomb_pi import run_named_program
from ycomb_pi.program_registry import (
    Program,
    clear_registry,
    get_program,
    has_program,
    list_program_names,
    register_program,
)


BUILTINS = {
    "add",
    "fibonacci",
    "fibonacci-z",
    "is-even",
    "is-even-m",
    "is-even-uncurried",
    "is-zero",
    "less-or-equal",
    "predecessor",
    "subtract",
    "successor",
}


def test_builtins_are_seeded(clean_registry):
    assert set(list_program_names()) == BUILTINS
    assert list_program_names() == sorted(BUILTINS)


def test_get_program_unknown_returns_none(clean_registry):
    assert get_program("does-not-exist") is None
    assert not has_program("does-not-exist")


@pytest.mark.parametrize(
    "name,xs,expected",
    [
        ("fibonacci", [5], 8),
        ("fibonacci-z", [4], 5),
        ("is-even", [4], True),
        ("is-even-m", [7], False),
        ("is-even-uncurried", [0], True),
        ("successor", [3], 4),
        ("predecessor", [0], 0),
        ("add", [2, 3], 5),
        ("subtract", [2, 5], 0),
        ("is-zero", [0], True),
        ("less-or-equal", [3, 2], False),
    ],
)
def test_run_builtin(clean_registry, name, xs, expected):
    assert run_named_program(name, xs) == expected


def test_run_named_program_unknown_raises(clean_registry):
    with pytest.raises(KeyError) as exc:
        run_named_program("does-not-exist", [0])
    assert "does-not-exist" in str(exc.value)


def test_run_named_program_checks_arity(clean_registry):
    with pytest.raises(ValueError):
        run_named_program("add", [1])


def test_run_named_program_rejects_negative_numeral(clean_registry):
    with pytest.raises(ValueError):
        run_named_program("predecessor", [-2])


def test_register_custom_program(clean_registry):
    register_program(Program("double", 1, lambda n: 2 * n, "n * 2"))
    assert has_program("double")
    assert run_named_program("double", [21]) == 42
    # Registering first must not keep the built-ins from loading.
    assert has_program("fibonacci")
    assert run_named_program("fibonacci", [5]) == 8
    assert set(list_program_names()) == BUILTINS | {"double"}


def test_override_before_first_lookup_is_kept(clean_registry):
    register_program(Program("add", 2, lambda a, b: -1))
    assert run_named_program("add", [1, 1]) == -1
    assert run_named_program("subtract", [5, 2]) == 3


def test_register_overwrites(clean_registry):
    list_program_names()
    register_program(Program("add", 2, lambda a, b: -1))
    assert run_named_program("add", [1, 1]) == -1


def test_clear_registry_reseeds_on_next_lookup():
    register_program(Program("temp", 0, lambda: 0))
    clear_registry()
    assert "temp" not in list_program_names()
    assert has_program("fibonacci")
    clear_registry()
