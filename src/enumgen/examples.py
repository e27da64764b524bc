"""
Example enum builder.

Builds a small colour enum with sanitization, auto-resolved collisions,
explicit and implicit values, and Description annotations.
"""
from enumgen.model import Annotation, EnumModel, TypeReference
from enumgen.expressions import ConstantReference, Literal


DESCRIPTION = TypeReference("Description", "System.ComponentModel")
OBSOLETE = TypeReference("Obsolete", "System")


def build_example_color_enum(namespace: str = "My.Gen") -> EnumModel:
    model = EnumModel("2Colors!", namespace, auto_resolve_conflicts=True)

    model.add_member("Red", 0, Annotation(DESCRIPTION, Literal("Bright red")))
    model.add_member("Green!", 1)
    # Collides with "Red" and is stored as Red_1
    model.add_member("Red", 2, [
        Annotation(DESCRIPTION, Literal("Dark red")),
        Annotation(OBSOLETE, Literal(True)),
    ])
    model.add_member("Blue")
    model.add_member("50% Grey", 4, Annotation(DESCRIPTION, ConstantReference("GreyLabel", owner="Labels")))

    return model
