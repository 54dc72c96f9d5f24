"""String preprocessors applied to the query and each choice before scoring.

A preprocessor is any object with a ``process(s: str) -> str`` method. It
must be pure: the ranking functions call it once for the query and once
per choice.
"""

from typing import Callable, Optional, Protocol, Union, runtime_checkable

from fuzzt.enums import Processor
from fuzzt.exceptions import AlgorithmError


@runtime_checkable
class StringProcessor(Protocol):
    """Anything that can transform a string before it is scored."""

    def process(self, s: str) -> str:
        ...


class NullStringProcessor:
    """Returns its input unchanged."""

    def process(self, s: str) -> str:
        return s

    def __repr__(self) -> str:
        return "NullStringProcessor()"


class LowerAlphaNumStringProcessor:
    """Keeps only alphanumeric and whitespace characters, trims and lowercases.

    Example:
        >>> LowerAlphaNumStringProcessor().process("  BRA-ZIL! ")
        'brazil'
    """

    def process(self, s: str) -> str:
        kept = "".join(ch for ch in s if ch.isalnum() or ch.isspace())
        return kept.strip().lower()

    def __repr__(self) -> str:
        return "LowerAlphaNumStringProcessor()"


class _CallableProcessor:
    """Adapts a plain ``str -> str`` callable to :class:`StringProcessor`."""

    __slots__ = ("func",)

    def __init__(self, func: Callable[[str], str]):
        self.func = func

    def process(self, s: str) -> str:
        return self.func(s)

    def __repr__(self) -> str:
        return f"_CallableProcessor({self.func!r})"


PROCESSORS = {
    Processor.NONE.value: NullStringProcessor(),
    Processor.LOWER_ALPHANUM.value: LowerAlphaNumStringProcessor(),
}


def resolve_processor(
    processor: Optional[Union[str, Processor, StringProcessor, Callable[[str], str]]] = None,
) -> StringProcessor:
    """Turn the ``processor`` argument of the ranking functions into a StringProcessor.

    Accepts ``None`` (identity), a :class:`Processor` member or its name, an
    object with a ``process`` method, or a plain callable.

    Raises:
        AlgorithmError: If a processor name is not recognized.
        TypeError: If ``processor`` is none of the above.
    """
    if processor is None:
        return PROCESSORS[Processor.NONE.value]
    if isinstance(processor, Processor):
        return PROCESSORS[processor.value]
    if isinstance(processor, str):
        try:
            return PROCESSORS[processor.lower()]
        except KeyError:
            raise AlgorithmError(
                f"Unknown processor: '{processor}'. Valid options: {sorted(PROCESSORS)}"
            ) from None
    if isinstance(processor, StringProcessor):
        return processor
    if callable(processor):
        return _CallableProcessor(processor)
    raise TypeError(
        f"processor must be a Processor, a name, or an object with a process(s) method, "
        f"got {type(processor).__name__}"
    )


__all__ = [
    "StringProcessor",
    "NullStringProcessor",
    "LowerAlphaNumStringProcessor",
    "PROCESSORS",
    "resolve_processor",
]
