"""Deferred expressions over params.

An expression is never evaluated here. It is rendered into the manifest as
a CEL string (``{{ ... }}``) and resolved by the deploy tool once param
values are known::

    instances = get_int("INSTANCES")
    instances.expr().to_cel()                      # "{{ INSTANCES }}"
    instances.equals(24).then(-1, 1).to_cel()      # "{{ INSTANCES == 24 ? -1 : 1 }}"

Nodes are frozen dataclasses and form a closed set: ``ParamExpression``,
``CompareExpression`` and ``IfElseExpression``. Anything that is not an
``Expression`` instance is a literal.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Literal

if TYPE_CHECKING:
    from funcstack.params.types import Param

type Comparator = Literal["==", ">", ">=", "<", "<="]

COMPARATORS: frozenset[str] = frozenset({"==", ">", ">=", "<", "<="})


class Expression:
    """Base for deferred expression nodes."""

    __slots__ = ()

    def render(self) -> str:
        """Render this node without the surrounding ``{{ }}``."""
        raise NotImplementedError

    def to_cel(self) -> str:
        return f"{{{{ {self.render()} }}}}"

    def __str__(self) -> str:
        return self.render()


def render_operand(value: Any) -> str:
    """Render a nested expression or a literal as a CEL operand.

    Strings are double-quoted, booleans and ``None`` use CEL spelling,
    sequences render as CEL lists. A param renders as its bare name.
    """
    from funcstack.params.types import Param

    match value:
        case Expression():
            return value.render()
        case Param():
            return value.name
        case bool():
            return "true" if value else "false"
        case None:
            return "null"
        case str():
            return json.dumps(value, ensure_ascii=False)
        case list() | tuple():
            return "[" + ", ".join(render_operand(v) for v in value) + "]"
        case _:
            return str(value)


@dataclass(frozen=True, slots=True)
class ParamExpression(Expression):
    """A reference to a declared param, rendered as its bare name."""

    param: Param

    def render(self) -> str:
        return self.param.name

    def cmp(self, op: Comparator, rhs: Any) -> CompareExpression:
        return CompareExpression(op, self, rhs)

    def equals(self, rhs: Any) -> CompareExpression:
        return CompareExpression("==", self, rhs)


@dataclass(frozen=True, slots=True)
class CompareExpression(Expression):
    """A boolean comparison between an expression and a literal."""

    op: Comparator
    lhs: Expression
    rhs: Any

    def __post_init__(self) -> None:
        if self.op not in COMPARATORS:
            msg = (
                f"Unknown comparator {self.op!r}. "
                f"Expected one of: {', '.join(sorted(COMPARATORS))}"
            )
            raise ValueError(msg)

    def render(self) -> str:
        return f"{self.lhs.render()} {self.op} {render_operand(self.rhs)}"

    def then(self, if_true: Any, if_false: Any) -> IfElseExpression:
        """Choose between two values depending on this comparison."""
        return IfElseExpression(self, if_true, if_false)


@dataclass(frozen=True, slots=True)
class IfElseExpression(Expression):
    """A ternary: ``test ? if_true : if_false``."""

    test: Expression
    if_true: Any
    if_false: Any

    def render(self) -> str:
        return (
            f"{self.test.render()} ? "
            f"{render_operand(self.if_true)} : {render_operand(self.if_false)}"
        )
