"""
Annotation Argument Expressions

Every annotation attached to an enum member carries exactly one argument.
Arguments are small expression nodes, never pre-rendered strings, so the
same model can be emitted by any backend.

Supported shapes:
    - Literal: a primitive constant (int, float, str, bool, None)
    - ConstantReference: a named constant, optionally owned by a type

ARCHITECTURAL RULE:
    Nodes here hold structure only.
    Target-language spelling belongs in the backends.
"""

from abc import ABC
from dataclasses import dataclass
from typing import Optional, Union


class Expression(ABC):
    """
    Base class for annotation argument expressions.

    Exists for type-safety of the expression hierarchy only.
    """
    pass


@dataclass(frozen=True)
class Literal(Expression):
    """
    A primitive literal value.

    Examples:
        - 3
        - "Primary colour"
        - True
        - None  (rendered as the target language's null)

    Properties:
        value: The literal value (int, float, str, bool or None)
    """

    value: Union[int, float, str, bool, None]


@dataclass(frozen=True)
class ConstantReference(Expression):
    """
    A reference to a named constant.

    Examples:
        ConstantReference("MaxValue", owner="Int32")  ->  Int32.MaxValue
        ConstantReference("DefaultLabel")             ->  DefaultLabel

    Properties:
        name: Constant identifier
        owner: Optional owning type (short name)
    """

    name: str
    owner: Optional[str] = None
