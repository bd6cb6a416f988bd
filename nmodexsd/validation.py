"""Validation of XML documents against the grammar of a specification."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from lxml import etree

from .xsd_generator import XsdGenerator

_STDIN = "-"


@dataclass
class ValidationMessages:
    """Messages collected while reading and validating one document."""

    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    fatals: list[str] = field(default_factory=list)

    def error(self, message: str, line: int) -> None:
        """Record a recoverable validation error."""
        self.errors.append(f"Error: {message} at line: {line}")

    def fatal_error(self, message: str, line: int) -> None:
        """Record an error that stopped the document from being read."""
        self.fatals.append(f"Fatal Error: {message} at line: {line}")

    def warning(self, message: str, line: int) -> None:
        """Record a warning."""
        self.warnings.append(f"Warning: {message} at line: {line}")

    def record(self, entry: Any) -> None:
        """Record one lxml log entry under the matching kind."""
        level = entry.level
        if level >= etree.ErrorLevels.FATAL:
            self.fatal_error(entry.message, entry.line)
        elif level >= etree.ErrorLevels.ERROR:
            self.error(entry.message, entry.line)
        else:
            self.warning(entry.message, entry.line)


class XsdValidator:
    """Checks XML documents against the schema generated from a specification.

    Each call to :meth:`read` or :meth:`parse` replaces the messages of the
    previous one. Both return True when the document produced neither
    errors nor fatal errors.
    """

    def __init__(self, specification: Any) -> None:
        self._specification = specification
        self._messages = ValidationMessages()

    @property
    def errors(self) -> list[str]:
        return list(self._messages.errors)

    @property
    def warnings(self) -> list[str]:
        return list(self._messages.warnings)

    @property
    def fatals(self) -> list[str]:
        return list(self._messages.fatals)

    def error_count(self) -> int:
        """Number of errors and fatal errors of the last document."""
        return len(self._messages.errors) + len(self._messages.fatals)

    def _schema(self) -> etree.XMLSchema:
        text = XsdGenerator(self._specification).to_string()
        return etree.XMLSchema(etree.fromstring(text.encode("utf-8")))

    def read(self, filename: str | Path) -> bool:
        """Validate the file ``filename``; ``"-"`` reads standard input."""
        schema = self._schema()
        self._messages = ValidationMessages()
        if str(filename) == _STDIN:
            data = sys.stdin.buffer.read()
        else:
            try:
                data = Path(filename).read_bytes()
            except OSError as exc:
                self._messages.fatal_error(f"cannot read {filename}: {exc.strerror or exc}", 0)
                return False
        return self._validate(schema, data)

    def parse(self, xml: str | bytes) -> bool:
        """Validate the document given as text."""
        schema = self._schema()
        self._messages = ValidationMessages()
        data = xml.encode("utf-8") if isinstance(xml, str) else xml
        return self._validate(schema, data)

    def _validate(self, schema: etree.XMLSchema, data: bytes) -> bool:
        parser = etree.XMLParser(recover=False, resolve_entities=False, no_network=True)
        try:
            document = etree.fromstring(data, parser)
        except etree.XMLSyntaxError as exc:
            entries = list(exc.error_log)
            if entries:
                for entry in entries:
                    self._messages.fatal_error(entry.message, entry.line)
            else:
                self._messages.fatal_error(str(exc), exc.lineno or 0)
            return False

        schema.validate(document)
        for entry in schema.error_log:
            self._messages.record(entry)
        return not (self._messages.fatals or self._messages.errors)