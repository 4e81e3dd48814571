from itertools import combinations, permutations
from typing import List

import pytest

from schema_ts.emitter import (
    Declaration,
    NodeKindMismatchError,
    Placeholder,
    RawCode,
    ResultFactory,
    Scope,
    UnresolvedValueError,
    build,
    extract_resolved,
    extract_value,
    is_placeholder,
)
from schema_ts.emitter import builder as builder_module


class Recorder:
    def __init__(self) -> None:
        self.calls: List[list] = []

    def __call__(self, args: list) -> tuple:
        self.calls.append(list(args))
        return tuple(args)


def test_no_pending_children_builds_immediately(monkeypatch: pytest.MonkeyPatch) -> None:
    created = []

    class CountingPlaceholder(Placeholder):
        def __init__(self) -> None:
            super().__init__()
            created.append(self)

    monkeypatch.setattr(builder_module, "Placeholder", CountingPlaceholder)

    combine = Recorder()
    result = build([RawCode("a"), RawCode("b"), RawCode("c")], combine)

    assert result == ("a", "b", "c")
    assert combine.calls == [["a", "b", "c"]]
    assert created == []


def test_empty_children_builds_immediately() -> None:
    combine = Recorder()
    assert build([], combine) == ()
    assert combine.calls == [[]]


@pytest.mark.parametrize("pending_count", [1, 2, 3, 4])
def test_any_resolution_order_fires_combine_once(pending_count: int) -> None:
    values = ["v0", "v1", "v2", "v3"]

    for pending_indices in combinations(range(len(values)), pending_count):
        for order in permutations(pending_indices):
            placeholders = {i: Placeholder() for i in pending_indices}
            children = [
                RawCode(placeholders[i]) if i in placeholders else RawCode(v)
                for i, v in enumerate(values)
            ]
            combine = Recorder()

            result = build(children, combine)
            assert is_placeholder(result)

            for step, index in enumerate(order):
                assert combine.calls == []
                placeholders[index].set_value(values[index])
                if step < len(order) - 1:
                    assert not result.resolved

            assert combine.calls == [values]
            assert result.resolved
            assert result.value == tuple(values)


def test_already_resolved_placeholder_is_not_deferred() -> None:
    ph = Placeholder()
    ph.set_value("ready")
    combine = Recorder()

    result = build([RawCode(ph), RawCode("plain")], combine)

    assert result == ("ready", "plain")
    assert combine.calls == [["ready", "plain"]]


def test_chained_builders_resolve_transitively() -> None:
    leaf = Placeholder()
    inner = build([RawCode(leaf)], lambda args: f"inner({args[0]})")
    outer = build([RawCode(inner), RawCode("x")], lambda args: f"outer({args[0]}, {args[1]})")

    assert not outer.resolved
    leaf.set_value("leaf")
    assert outer.value == "outer(inner(leaf), x)"


def test_same_placeholder_used_twice() -> None:
    ph = Placeholder()
    combine = Recorder()
    result = build([RawCode(ph), RawCode(ph)], combine)

    ph.set_value("twice")
    assert combine.calls == [["twice", "twice"]]
    assert result.value == ("twice", "twice")


def test_declaration_child_is_rejected() -> None:
    decl = Declaration("Model", Scope("test"), "node")
    with pytest.raises(NodeKindMismatchError, match="expected RawCode"):
        build([decl], Recorder())


def test_extract_value_from_pending_declaration_fails() -> None:
    decl = Declaration("Pending", Scope("test"), Placeholder())
    with pytest.raises(UnresolvedValueError, match="Pending"):
        extract_value(decl)


def test_extract_value_reads_resolved_placeholder() -> None:
    ph = Placeholder()
    decl = Declaration("Done", Scope("test"), ph)
    ph.set_value("node")

    assert extract_value(decl) == "node"
    assert extract_value(RawCode("plain")) == "plain"


def test_extract_resolved() -> None:
    assert extract_resolved("plain") == "plain"

    ph = Placeholder()
    with pytest.raises(UnresolvedValueError):
        extract_resolved(ph)

    ph.set_value("late")
    assert extract_resolved(ph) == "late"


def test_declaration_registers_in_scope() -> None:
    scope = Scope("models.ts")
    first = Declaration("A", scope, Placeholder())
    second = Declaration("B", scope, "node")

    assert scope.declarations == [first, second]
    assert len(scope) == 2


def test_result_factory_registers_in_current_scope() -> None:
    scopes = [Scope("a.ts"), Scope("b.ts")]
    current = [scopes[0]]
    factory = ResultFactory(lambda: current[0])

    first = factory.declaration("A", "node")
    current[0] = scopes[1]
    second = factory.declaration("B", "node")

    assert scopes[0].declarations == [first]
    assert scopes[1].declarations == [second]
    assert vars(factory) == {"scope_provider": factory.scope_provider}
