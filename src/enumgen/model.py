"""
Core Enum Model Objects

Defines the build-time model of a single generated enum:
    - TypeReference (type identity of an annotation)
    - Annotation (metadata attached to a member)
    - MemberEntry (one named, optionally valued, enum member)
    - EnumModel (root container and conflict policy)

ARCHITECTURAL RULE:
    These objects:
        - Know nothing about C# or any other target language
        - Are append-only (members are never removed)
        - Are fully serializable
    Rendering happens in enumgen.backends.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Set, Tuple, Union

from .expressions import Expression
from .identifiers import next_suffix_name, sanitize_member_name, sanitize_type_name


logger = logging.getLogger(__name__)

DEFAULT_NO_VALUE = -1


class EnumModelError(Exception):
    """Base class for enum model errors."""
    pass


class InvalidIdentifierError(EnumModelError, ValueError):
    """Raised when sanitization leaves nothing usable as an identifier."""

    def __init__(self, text: str, kind: str):
        self.text = text
        self.kind = kind
        super().__init__(f"{kind} name {text!r} has no valid identifier characters")


class ConflictError(EnumModelError, ValueError):
    """
    Raised when a new member duplicates an existing member's name or
    explicit value.

    Properties:
        name: Sanitized name of the rejected member
        value: Value of the rejected member
        name_conflict: True if the name was already taken
        value_conflict: True if the explicit value was already taken
    """

    def __init__(self, name: str, value: int, name_conflict: bool, value_conflict: bool,
                 message: Optional[str] = None):
        self.name = name
        self.value = value
        self.name_conflict = name_conflict
        self.value_conflict = value_conflict
        if message is None:
            message = f"Enum name {name} or value {value} already defined"
        super().__init__(message)


class ConflictResolutionError(ConflictError):
    """Raised when auto-resolve cannot produce a non-conflicting member."""
    pass


@dataclass(frozen=True)
class TypeReference:
    """
    Identity of an annotation type.

    Properties:
        name: Short name written at the annotation site (e.g. "Description")
        namespace: Container path imported by the generated file
            (e.g. "System.ComponentModel"); empty means nothing to import
    """

    name: str
    namespace: str = ""

    @property
    def qualified_name(self) -> str:
        if not self.namespace:
            return self.name
        return f"{self.namespace}.{self.name}"


@dataclass(frozen=True)
class Annotation:
    """
    A metadata annotation on an enum member.

    Example:
        Annotation(
            kind=TypeReference("Description", "System.ComponentModel"),
            argument=Literal("Bright red"),
        )

    renders in C# as:
        [Description("Bright red")]
    """

    kind: TypeReference
    argument: Expression


@dataclass(frozen=True)
class MemberEntry:
    """
    A single enum member.

    Properties:
        name: Sanitized member identifier
        value: Explicit value, or the owning model's no-value sentinel
        annotations: Annotations in declaration order
    """

    name: str
    value: int
    annotations: Tuple[Annotation, ...] = field(default_factory=tuple)

    def has_explicit_value(self, no_value: int = DEFAULT_NO_VALUE) -> bool:
        return self.value != no_value


AnnotationsArg = Union[None, Annotation, Iterable[Annotation]]


def _normalize_annotations(annotations: AnnotationsArg) -> Tuple[Annotation, ...]:
    if annotations is None:
        return ()
    if isinstance(annotations, Annotation):
        return (annotations,)
    return tuple(annotations)


class EnumModel:
    """
    Mutable build-time state for one generated enum.

    Members are appended through add_member() only. Insertion order is
    the emission order.

    INVARIANTS:
        - No two members share a sanitized name
        - No two members with explicit values share a value
        - Members left at the no-value sentinel never conflict on value

    Conflicts either raise ConflictError or, with auto_resolve_conflicts,
    are resolved by renaming with the suffix-increment rule
    ("Red" -> "Red_1" -> "Red_2").
    """

    def __init__(
        self,
        enum_type_name: str,
        namespace: str,
        auto_resolve_conflicts: bool = False,
        no_value: int = DEFAULT_NO_VALUE,
        max_resolve_attempts: Optional[int] = None,
    ):
        """
        Args:
            enum_type_name: Requested type name (sanitized before storage)
            namespace: Namespace the enum is declared in, used verbatim
            auto_resolve_conflicts: Rename conflicting members instead of raising
            no_value: Sentinel meaning "no explicit value"
            max_resolve_attempts: Optional cap on renames per add_member call;
                None leaves the rename loop unbounded

        Raises:
            InvalidIdentifierError: If the sanitized type name is empty
        """
        name = sanitize_type_name(enum_type_name)
        if not name:
            raise InvalidIdentifierError(enum_type_name, "Enum type")
        if name != enum_type_name:
            logger.debug("Sanitized enum type name %r -> %r", enum_type_name, name)

        self.name = name
        self.namespace = namespace
        self.no_value = no_value
        self._auto_resolve_conflicts = auto_resolve_conflicts
        self._max_resolve_attempts = max_resolve_attempts

        self._members: List[MemberEntry] = []
        self._by_name: Dict[str, MemberEntry] = {}
        self._values: Set[int] = set()

    @property
    def auto_resolve_conflicts(self) -> bool:
        return self._auto_resolve_conflicts

    @property
    def members(self) -> Tuple[MemberEntry, ...]:
        """Members in insertion order (read-only view)."""
        return tuple(self._members)

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[MemberEntry]:
        return iter(tuple(self._members))

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __repr__(self) -> str:
        return f"EnumModel({self.name!r}, {self.namespace!r}, members={len(self._members)})"

    def member_names(self) -> List[str]:
        return [m.name for m in self._members]

    def get_member(self, name: str) -> Optional[MemberEntry]:
        """
        Retrieve a member by its sanitized name.

        Returns:
            MemberEntry or None if not found
        """
        return self._by_name.get(name)

    def add_member(
        self,
        name: str,
        value: Optional[int] = None,
        annotations: AnnotationsArg = None,
    ) -> MemberEntry:
        """
        Add a member to the enum.

        Args:
            name: Requested member name (sanitized before use)
            value: Explicit value; None (or the no-value sentinel) emits
                the member without an initializer
            annotations: None, a single Annotation, or an iterable of them

        Returns:
            The stored MemberEntry (its name may differ from the request
            after sanitization or auto-resolution)

        Raises:
            InvalidIdentifierError: If name is empty
            ConflictError: On a name or explicit-value collision when
                auto_resolve_conflicts is off
            ConflictResolutionError: When auto-resolve cannot succeed
        """
        if value is None:
            value = self.no_value
        candidate_name = sanitize_member_name(name)
        if not candidate_name:
            raise InvalidIdentifierError(name, "Enum member")
        entry = MemberEntry(
            name=candidate_name,
            value=value,
            annotations=_normalize_annotations(annotations),
        )

        attempts = 0
        while True:
            name_conflict = entry.name in self._by_name
            value_conflict = entry.value != self.no_value and entry.value in self._values
            if not (name_conflict or value_conflict):
                break

            if not self._auto_resolve_conflicts:
                raise ConflictError(entry.name, entry.value, name_conflict, value_conflict)

            # Renaming cannot free an explicit value.
            if value_conflict:
                raise ConflictResolutionError(
                    entry.name, entry.value, name_conflict, value_conflict,
                    message=f"Enum value {entry.value} already defined; renaming {entry.name} cannot resolve it",
                )

            attempts += 1
            if self._max_resolve_attempts is not None and attempts > self._max_resolve_attempts:
                raise ConflictResolutionError(
                    entry.name, entry.value, name_conflict, value_conflict,
                    message=f"Could not resolve enum name {candidate_name} "
                            f"within {self._max_resolve_attempts} attempts",
                )

            renamed = sanitize_member_name(next_suffix_name(entry.name))
            logger.debug("Enum %s: member %s already defined, retrying as %s", self.name, entry.name, renamed)
            entry = MemberEntry(name=renamed, value=entry.value, annotations=entry.annotations)

        self._members.append(entry)
        self._by_name[entry.name] = entry
        if entry.value != self.no_value:
            self._values.add(entry.value)
        logger.debug("Enum %s: added member %s = %s", self.name, entry.name, entry.value)
        return entry

    def file_name(self, extension: str = ".cs") -> str:
        return f"{self.name}{extension}"

    def to_source(self, options=None) -> str:
        """Render the enum as C# source text."""
        from .backends.csharp_generator import generate_csharp

        return generate_csharp(self, options=options)

    def write_to_file(
        self,
        output_dir: str,
        options=None,
        writer: Optional[Callable[[str, str], None]] = None,
    ) -> str:
        """
        Render the enum and write it to {output_dir}/{name}.cs.

        An existing file is overwritten. The directory is not created.

        Args:
            output_dir: Existing directory to write into
            options: RenderOptions for the C# backend
            writer: Collaborator called as writer(path, text); defaults
                to a plain UTF-8 file write

        Returns:
            The path written

        Raises:
            OSError: If the file cannot be written
        """
        from .backends.csharp_generator import save_csharp_file

        path = os.path.join(output_dir, self.file_name())
        save_csharp_file(self, path, options=options, writer=writer)
        return path


__all__ = [
    "DEFAULT_NO_VALUE",
    "EnumModelError",
    "InvalidIdentifierError",
    "ConflictError",
    "ConflictResolutionError",
    "TypeReference",
    "Annotation",
    "MemberEntry",
    "EnumModel",
]
