"""Domain enumerations."""

from enum import Enum, auto


class Severity(Enum):
    """Diagnostic severity."""

    ERROR = auto()  # build fails
    WARNING = auto()  # build passes, warning shown
    INFO = auto()  # informational


class RuleCategory(Enum):
    """Diagnostic category, as shown next to the rule id."""

    USAGE = "Usage"
    INTEROPERABILITY = "Interoperability"


class Language(Enum):
    """Source language a type was declared in."""

    CSHARP = "C#"
    VISUAL_BASIC = "Visual Basic"


class TypeKind(Enum):
    """Kind of a named type."""

    CLASS = "class"
    INTERFACE = "interface"
    STRUCT = "struct"
    ENUM = "enum"
    DELEGATE = "delegate"


class MemberKind(Enum):
    """Kind of a type member."""

    METHOD = "method"
    PROPERTY = "property"
    EVENT = "event"


class SymbolKind(Enum):
    """Symbol events an analyzer can register for."""

    NAMED_TYPE = auto()


class DiagnosticKind(Enum):
    """Stable identifiers of the reported findings."""

    UNSUPPORTED_PATTERN = "unsupported-pattern"
    INCOMPLETE_IMPLEMENTATION = "incomplete-implementation"
    MEMBER_NOT_SEALED = "member-not-sealed"
