"""
Error taxonomy for the emitter core.

Every failure raised here aborts the current emission. None of them are
recovered inside the emitter: they signal either an unsupported schema feature
or a bug in a mapping rule.
"""

from typing import NoReturn, Type


class EmitterError(Exception):
    """Base exception for emission failures."""

    pass


class UnresolvedValueError(EmitterError):
    """A placeholder was still pending when its value had to be extracted."""

    pass


class UnsupportedTypeError(EmitterError):
    """A scalar, intrinsic or entity kind has no mapping rule."""

    pass


class NodeKindMismatchError(EmitterError):
    """A construction step received a value of the wrong kind."""

    pass


class DoubleResolutionError(EmitterError):
    """A placeholder was resolved a second time."""

    pass


def compiler_assert(
    condition: bool, message: str, error_cls: Type[EmitterError] = EmitterError
) -> None:
    """
    Abort the current emission unless ``condition`` holds.

    Args:
        condition: Invariant that must be true
        message: Description of the violation
        error_cls: Taxonomy class to raise

    Raises:
        EmitterError: The given subclass, when ``condition`` is false
    """
    if not condition:
        raise error_cls(message)


def compiler_fail(
    message: str, error_cls: Type[EmitterError] = EmitterError
) -> NoReturn:
    """Abort the current emission unconditionally."""
    raise error_cls(message)
