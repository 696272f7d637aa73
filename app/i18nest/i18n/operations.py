"""Operations applied around a key lookup.

An operation carries two independent capabilities:

- ``pre``: rewrites the key before lookup (``preprocess``) and, after a
  miss, once more for a retry (``preprocess_after_miss``).
- ``post``: rewrites a found raw value before nested reuse resolution
  (``postprocess``).

Consumers check the ``pre`` / ``post`` flags rather than the concrete type.
Instances are immutable and live for a single translate call.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union


class Operation:
    """Base operation; every hook is the identity."""

    pre: bool = False
    post: bool = False

    def preprocess(self, key: str) -> str:
        return key

    def preprocess_after_miss(self, key: str) -> str:
        return key

    def postprocess(self, value: str) -> str:
        return value


@dataclass(frozen=True)
class Plural(Operation):
    """Selects the singular or plural form of a key from a count.

    A count of exactly one selects ``key + singular_suffix``; anything else
    selects ``key + plural_suffix``. After a miss the bare key is retried.

    Attributes:
        count: Item count, stored as int when integral.
        plural_suffix: Suffix for plural forms.
        singular_suffix: Suffix for the singular form.
    """

    count: Union[int, float]
    plural_suffix: str = "_plural"
    singular_suffix: str = ""

    pre = True

    def __post_init__(self):
        if isinstance(self.count, float) and self.count.is_integer():
            object.__setattr__(self, "count", int(self.count))

    @property
    def is_singular(self) -> bool:
        return self.count == 1

    @property
    def suffix(self) -> str:
        return self.singular_suffix if self.is_singular else self.plural_suffix

    def preprocess(self, key: str) -> str:
        return key + self.suffix

    def preprocess_after_miss(self, key: str) -> str:
        if self.suffix and key.endswith(self.suffix):
            return key[: -len(self.suffix)]
        return key


@dataclass(frozen=True)
class Interpolation(Operation):
    """Replaces ``{{name}}`` placeholders with variable values.

    Placeholders with no matching variable are left untouched; a later
    render pass may still fill them.
    """

    variables: Dict[str, Any] = field(default_factory=dict)
    prefix: str = "{{"
    suffix: str = "}}"

    post = True

    def postprocess(self, value: str) -> str:
        for name, replacement in self.variables.items():
            value = value.replace(f"{self.prefix}{name}{self.suffix}", str(replacement))
        return value


class Composite(Operation):
    """Takes Pre capability from one operation and Post from another."""

    def __init__(self, pre_operation: Operation, post_operation: Operation):
        self.pre_operation = pre_operation
        self.post_operation = post_operation
        self.pre = pre_operation.pre
        self.post = post_operation.post

    def __repr__(self) -> str:
        return f"Composite(pre={self.pre_operation!r}, post={self.post_operation!r})"

    def preprocess(self, key: str) -> str:
        return self.pre_operation.preprocess(key)

    def preprocess_after_miss(self, key: str) -> str:
        return self.pre_operation.preprocess_after_miss(key)

    def postprocess(self, value: str) -> str:
        return self.post_operation.postprocess(value)


def combine(derived: Operation, active: Optional[Operation]) -> Operation:
    """Merge a newly derived operation with the one already in effect.

    Args:
        derived: Operation derived during resolution (usually Plural).
        active: Operation already in effect, if any.

    Returns:
        ``derived`` alone, or a Composite using ``derived`` for Pre and
        ``active`` for Post.
    """
    if active is None:
        return derived
    return Composite(derived, active)
