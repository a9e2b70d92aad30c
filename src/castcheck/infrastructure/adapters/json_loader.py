"""JSON symbol model adapter.

Implements SymbolLoaderProtocol for compilation snapshots exported as JSON.
References between types are FQN strings, resolved after the whole document
is read.
"""

from __future__ import annotations

import json
import logging
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any, NoReturn, TypeVar

from castcheck.domain.exceptions import SymbolModelError
from castcheck.domain.model.attribute import AttributeData
from castcheck.domain.model.compilation import Compilation
from castcheck.domain.model.enums import Language, MemberKind, TypeKind
from castcheck.domain.model.location import Location
from castcheck.domain.model.member import MemberSymbol
from castcheck.domain.model.type_symbol import TypeSymbol

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)
T = TypeVar("T")


class JSONSymbolLoader:
    """Loads a Compilation from a JSON symbol model.

    Stateless between load() calls.
    FAIL-FIRST: raises SymbolModelError on any malformed input.
    """

    def load(self, path: Path) -> Compilation:
        """Load a compilation snapshot from a file.

        Args:
            path: JSON document

        Returns:
            Compilation with resolved type hierarchy

        Raises:
            SymbolModelError: If the file cannot be read or is malformed
        """
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise SymbolModelError(source=path, reason="file not found") from e
        except PermissionError as e:
            raise SymbolModelError(source=path, reason="permission denied") from e
        except UnicodeDecodeError as e:
            raise SymbolModelError(source=path, reason=f"encoding error: {e}") from e

        try:
            document = json.loads(text)
        except json.JSONDecodeError as e:
            raise SymbolModelError(source=path, reason=f"invalid JSON: {e}") from e

        return self.parse(document, source=path, default_assembly=path.stem)

    def parse(
        self,
        document: object,
        *,
        source: Path | str = "<memory>",
        default_assembly: str = "Compilation",
    ) -> Compilation:
        """Build a compilation from an already decoded document.

        Args:
            document: Decoded JSON value
            source: Where the document came from (for error messages)
            default_assembly: Assembly name when the document has none

        Returns:
            Compilation with resolved type hierarchy

        Raises:
            SymbolModelError: If the document is malformed
        """
        return _DocumentReader(source).read(document, default_assembly)


class _DocumentReader:
    """Single-use reader holding resolution state for one document."""

    def __init__(self, source: Path | str) -> None:
        self._source = source
        self._raw: dict[str, Mapping[str, Any]] = {}
        self._resolved: dict[str, TypeSymbol] = {}
        self._resolving: list[str] = []
        self._language = Language.CSHARP

    def read(self, document: object, default_assembly: str) -> Compilation:
        data = self._expect_mapping(document, "document")
        self._language = self._language_of(
            data.get("language", Language.CSHARP.value),
            "language",
        )
        assembly = data.get("assembly", default_assembly)
        if not isinstance(assembly, str) or not assembly:
            self._fail("'assembly' must be a non-empty string")

        declared = self._expect_list(data.get("types", []), "types")
        referenced = self._expect_list(data.get("references", []), "references")

        declared_fqns = [self._register(raw, "types") for raw in declared]
        referenced_fqns = [self._register(raw, "references") for raw in referenced]

        compilation = self._build(
            lambda: Compilation(
                assembly_name=assembly,
                language=self._language,
                types=tuple(self._resolve(fqn, "types") for fqn in declared_fqns),
                references=tuple(self._resolve(fqn, "references") for fqn in referenced_fqns),
            ),
            "compilation",
        )
        logger.debug(
            "Loaded %s: %d declared type(s), %d reference(s) from %s",
            compilation.assembly_name,
            len(compilation.types),
            len(compilation.references),
            self._source,
        )
        return compilation

    def _register(self, raw: object, where: str) -> str:
        data = self._expect_mapping(raw, where)
        name = self._expect_str(data.get("name"), f"{where}[].name")
        namespace = data.get("namespace", "")
        if not isinstance(namespace, str):
            self._fail(f"namespace of '{name}' must be a string")
        fqn = f"{namespace}.{name}" if namespace else name
        if fqn in self._raw:
            self._fail(f"duplicate type '{fqn}'")
        self._raw[fqn] = data
        return fqn

    def _resolve(self, fqn: str, referrer: str) -> TypeSymbol:
        if fqn in self._resolved:
            return self._resolved[fqn]
        if fqn in self._resolving:
            cycle = " -> ".join([*self._resolving[self._resolving.index(fqn) :], fqn])
            self._fail(f"inheritance cycle: {cycle}")
        raw = self._raw.get(fqn)
        if raw is None:
            self._fail(f"unknown type '{fqn}' referenced from '{referrer}'")

        self._resolving.append(fqn)
        try:
            type_symbol = self._type_from(fqn, raw)
        finally:
            self._resolving.pop()

        self._resolved[fqn] = type_symbol
        return type_symbol

    def _type_from(self, fqn: str, data: Mapping[str, Any]) -> TypeSymbol:
        kind = self._enum(TypeKind, data.get("kind", TypeKind.CLASS.value), f"{fqn}.kind")
        language = self._language
        if "language" in data:
            language = self._language_of(data["language"], f"{fqn}.language")

        interfaces = tuple(
            self._resolve(self._expect_str(ref, f"{fqn}.interfaces[]"), fqn)
            for ref in self._expect_list(data.get("interfaces", []), f"{fqn}.interfaces")
        )
        base_ref = data.get("base_type")
        base_type = (
            self._resolve(self._expect_str(base_ref, f"{fqn}.base_type"), fqn)
            if base_ref is not None
            else None
        )

        attributes = tuple(
            self._attribute_from(raw, fqn)
            for raw in self._expect_list(data.get("attributes", []), f"{fqn}.attributes")
        )
        members = tuple(
            self._member_from(raw, fqn)
            for raw in self._expect_list(data.get("members", []), f"{fqn}.members")
        )

        return self._build(
            lambda: TypeSymbol(
                name=data["name"],
                namespace=data.get("namespace", ""),
                kind=kind,
                language=language,
                attributes=attributes,
                members=members,
                interfaces=interfaces,
                base_type=base_type,
                location=self._location_from(data.get("location"), fqn),
                is_generated=self._expect_bool(data.get("generated", False), f"{fqn}.generated"),
            ),
            fqn,
        )

    def _attribute_from(self, raw: object, owner: str) -> AttributeData:
        """Accept "Ns.NameAttribute", null (unresolved) or {"name", "class"}."""
        if raw is None:
            return AttributeData(display_name="?")
        if isinstance(raw, str):
            return self._build(lambda: AttributeData.of(raw), f"{owner}.attributes")
        data = self._expect_mapping(raw, f"{owner}.attributes[]")
        name = self._expect_str(data.get("name"), f"{owner}.attributes[].name")
        attribute_class = data.get("class")
        if attribute_class is not None and not isinstance(attribute_class, str):
            self._fail(f"{owner}.attributes[].class must be a string or null")
        return self._build(
            lambda: AttributeData(display_name=name, attribute_class=attribute_class),
            f"{owner}.attributes",
        )

    def _member_from(self, raw: object, owner: str) -> MemberSymbol:
        data = self._expect_mapping(raw, f"{owner}.members[]")
        name = self._expect_str(data.get("name"), f"{owner}.members[].name")
        where = f"{owner}.{name}"
        parameters = tuple(
            self._expect_str(p, f"{where}.parameters[]")
            for p in self._expect_list(data.get("parameters", []), f"{where}.parameters")
        )
        implements = frozenset(
            self._expect_str(key, f"{where}.implements[]")
            for key in self._expect_list(data.get("implements", []), f"{where}.implements")
        )
        return self._build(
            lambda: MemberSymbol(
                name=name,
                owning_type=owner,
                kind=self._enum(MemberKind, data.get("kind", MemberKind.METHOD.value), where),
                parameters=parameters,
                is_static=self._expect_bool(data.get("static", False), f"{where}.static"),
                is_virtual=self._expect_bool(data.get("virtual", False), f"{where}.virtual"),
                is_abstract=self._expect_bool(data.get("abstract", False), f"{where}.abstract"),
                is_sealed=self._expect_bool(data.get("sealed", False), f"{where}.sealed"),
                explicit_implementations=implements,
                location=self._location_from(data.get("location"), where),
            ),
            where,
        )

    def _location_from(self, raw: object, where: str) -> Location | None:
        if raw is None:
            return None
        data = self._expect_mapping(raw, f"{where}.location")
        file = self._expect_str(data.get("file"), f"{where}.location.file")
        line = data.get("line", 1)
        column = data.get("column", 0)
        if not isinstance(line, int) or not isinstance(column, int):
            self._fail(f"{where}.location line/column must be integers")
        return self._build(lambda: Location(file=Path(file), line=line, column=column), where)

    def _language_of(self, raw: object, where: str) -> Language:
        return self._enum(Language, raw, where)

    def _enum(self, enum: type[E], raw: object, where: str) -> E:
        try:
            return enum(raw)
        except ValueError:
            allowed = ", ".join(repr(e.value) for e in enum)
            self._fail(f"{where}: {raw!r} is not one of {allowed}")

    def _build(self, factory: Callable[[], T], where: str) -> T:
        """Run a domain constructor, turning FAIL-FIRST errors into SymbolModelError."""
        try:
            return factory()
        except (ValueError, TypeError) as e:
            if isinstance(e, SymbolModelError):
                raise
            raise SymbolModelError(source=self._source, reason=f"{where}: {e}") from e

    def _expect_mapping(self, raw: object, where: str) -> Mapping[str, Any]:
        if not isinstance(raw, dict):
            self._fail(f"{where} must be an object")
        return raw

    def _expect_list(self, raw: object, where: str) -> list[Any]:
        if not isinstance(raw, list):
            self._fail(f"{where} must be a list")
        return raw

    def _expect_str(self, raw: object, where: str) -> str:
        if not isinstance(raw, str) or not raw:
            self._fail(f"{where} must be a non-empty string")
        return raw

    def _expect_bool(self, raw: object, where: str) -> bool:
        if not isinstance(raw, bool):
            self._fail(f"{where} must be true or false")
        return raw

    def _fail(self, reason: str) -> NoReturn:
        raise SymbolModelError(source=self._source, reason=reason)
