"""
Serialization helpers for enum models (EnumModel, MemberEntry, Annotation, Expression).

Provides JSON/YAML dumps via an intermediate dict representation, and
rebuilds a fresh EnumModel from such a dump by replaying add_member().
This module intentionally keeps serialization structure stable and explicit.
"""
from __future__ import annotations

import json
from typing import Any, Dict

import yaml

from enumgen.model import (
    DEFAULT_NO_VALUE,
    Annotation,
    EnumModel,
    MemberEntry,
    TypeReference,
)
from enumgen.expressions import ConstantReference, Expression, Literal


def expr_to_dict(expr: Expression) -> Dict[str, Any]:
    if isinstance(expr, Literal):
        return {"type": "lit", "value": expr.value}
    if isinstance(expr, ConstantReference):
        return {"type": "const", "name": expr.name, "owner": expr.owner}
    raise TypeError(f"Unsupported Expression type: {type(expr)}")


def expr_from_dict(d: Dict[str, Any]) -> Expression:
    t = d.get("type")
    if t == "lit":
        return Literal(d["value"])
    if t == "const":
        return ConstantReference(d["name"], owner=d.get("owner"))
    raise TypeError(f"Unsupported expression dict type: {t}")


def type_reference_to_dict(ref: TypeReference) -> Dict[str, Any]:
    return {"name": ref.name, "namespace": ref.namespace}


def type_reference_from_dict(d: Dict[str, Any]) -> TypeReference:
    return TypeReference(name=d["name"], namespace=d.get("namespace", ""))


def annotation_to_dict(a: Annotation) -> Dict[str, Any]:
    return {"kind": type_reference_to_dict(a.kind), "argument": expr_to_dict(a.argument)}


def annotation_from_dict(d: Dict[str, Any]) -> Annotation:
    return Annotation(kind=type_reference_from_dict(d["kind"]), argument=expr_from_dict(d["argument"]))


def member_to_dict(m: MemberEntry) -> Dict[str, Any]:
    return {
        "name": m.name,
        "value": m.value,
        "annotations": [annotation_to_dict(a) for a in m.annotations],
    }


def member_from_dict(d: Dict[str, Any]) -> MemberEntry:
    return MemberEntry(
        name=d["name"],
        value=d["value"],
        annotations=tuple(annotation_from_dict(a) for a in d.get("annotations", [])),
    )


def enum_to_dict(model: EnumModel) -> Dict[str, Any]:
    return {
        "name": model.name,
        "namespace": model.namespace,
        "no_value": model.no_value,
        "auto_resolve_conflicts": model.auto_resolve_conflicts,
        "members": [member_to_dict(m) for m in model.members],
    }


def enum_from_dict(d: Dict[str, Any]) -> EnumModel:
    """
    Build a new EnumModel from a dict produced by enum_to_dict().

    Members are replayed through add_member(), so a hand-edited dump
    is held to the same conflict rules as code that builds a model.
    """
    model = EnumModel(
        d["name"],
        d.get("namespace", ""),
        auto_resolve_conflicts=d.get("auto_resolve_conflicts", False),
        no_value=d.get("no_value", DEFAULT_NO_VALUE),
    )
    for md in d.get("members", []):
        member = member_from_dict(md)
        model.add_member(member.name, member.value, member.annotations)
    return model


def enum_to_json(model: EnumModel) -> str:
    return json.dumps(enum_to_dict(model), sort_keys=True)


def enum_from_json(s: str) -> EnumModel:
    d = json.loads(s)
    return enum_from_dict(d)


def enum_to_yaml(model: EnumModel) -> str:
    return yaml.safe_dump(enum_to_dict(model), sort_keys=False)


def enum_from_yaml(s: str) -> EnumModel:
    d = yaml.safe_load(s)
    return enum_from_dict(d)
