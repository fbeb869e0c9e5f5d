"""Discriminants for documentation entries and link conventions."""

from enum import Enum


class DocType(str, Enum):
    """Kind of documented construct."""

    CLASS = "class"
    INTERFACE = "interface"
    EVENT = "event"
    PARAM = "param"
    PROP = "prop"
    METHOD = "method"
    TYPEDEF = "typedef"
    CONSTRUCTOR = "constructor"


class Access(str, Enum):
    """Visibility of an entry."""

    PUBLIC = "public"
    PRIVATE = "private"
    PROTECTED = "protected"


class Scope(str, Enum):
    """Member scope of a property or method."""

    STATIC = "static"
    INSTANCE = "instance"


class RepoProfile(str, Enum):
    """Path convention used for canonical documentation links."""

    SCROLL_TO = "scroll-to"  # <kind>/<Parent>?scrollTo=<name>
    FRAGMENT = "fragment"  # <Parent>#<name>


def is_container_kind(doc_type: DocType) -> bool:
    """Check if the kind can own properties, methods and events."""
    return doc_type in {DocType.CLASS, DocType.INTERFACE}


def is_top_level_kind(doc_type: DocType) -> bool:
    """Check if the kind is registered at the top level of a graph."""
    return doc_type in {DocType.CLASS, DocType.INTERFACE, DocType.TYPEDEF}
