"""
Deferred construction of composite output nodes.

``build`` joins child results that may still be placeholders and runs the
construction function once all of them are available. The extraction helpers
narrow an emit entity or raw value back to a finished node.
"""

from typing import Any, Callable, List, Optional, Sequence, Union

from ..logging_config import get_logger
from .entities import Declaration, EmitEntity, RawCode
from .errors import NodeKindMismatchError, UnresolvedValueError, compiler_assert
from .placeholder import Placeholder

logger = get_logger(__name__)


def is_placeholder(value: Any) -> bool:
    """Return True if ``value`` is a placeholder rather than a node."""
    return isinstance(value, Placeholder)


def assert_raw_code(entity: EmitEntity) -> RawCode:
    """Narrow ``entity`` to ``RawCode``, aborting otherwise."""
    compiler_assert(
        isinstance(entity, RawCode),
        f"expected RawCode, but received {getattr(entity, 'kind', type(entity).__name__)}",
        NodeKindMismatchError,
    )
    return entity


def build(
    children: Sequence[EmitEntity],
    combine: Callable[[List[Any]], Any],
) -> Union[Any, Placeholder]:
    """
    Join ``children`` and construct their parent node.

    If no child is pending, ``combine`` is called right away and its node is
    returned. Otherwise a placeholder is returned that resolves to
    ``combine(args)`` once the last pending child resolves.

    Args:
        children: Child results, each a ``RawCode``
        combine: Construction function taking the child nodes in order

    Returns:
        The constructed node, or a placeholder for it
    """
    arg: List[Optional[Any]] = [None] * len(children)
    pending = 0
    result: Optional[Placeholder] = None

    def make_callback(index: int) -> Callable[[Any], None]:
        def on_child(node: Any) -> None:
            nonlocal pending
            arg[index] = node
            pending -= 1
            if pending == 0:
                result.set_value(combine(arg))

        return on_child

    for index, child in enumerate(children):
        value = assert_raw_code(child).value

        if is_placeholder(value) and not value.resolved:
            pending += 1
            value.on_value(make_callback(index))
        else:
            arg[index] = extract_resolved(value)

    if pending == 0:
        return combine(arg)

    logger.debug("Deferring construction on %d pending child(ren)", pending)
    result = Placeholder()
    return result


def extract_resolved(value: Union[Any, Placeholder]) -> Any:
    """
    Return the node behind ``value``, reading a resolved placeholder's cache.

    Raises:
        UnresolvedValueError: If ``value`` is a placeholder that never resolved
    """
    if not is_placeholder(value):
        return value
    if value.resolved:
        return value.value
    raise UnresolvedValueError("couldn't extract value from a pending placeholder")


def extract_value(entity: Union[Declaration, RawCode]) -> Any:
    """
    Return the finished node of ``entity``.

    Used when a source file is finalized: by then every declaration must have
    been constructed.

    Raises:
        UnresolvedValueError: If the entity's value is still pending
    """
    value = entity.value
    if is_placeholder(value) and not value.resolved:
        name = getattr(entity, "name", None)
        target = f"declaration '{name}'" if name else "raw code"
        raise UnresolvedValueError(f"value of {target} was never resolved")
    return extract_resolved(value)
