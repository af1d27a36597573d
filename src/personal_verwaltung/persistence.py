"""
Persistence layer (JSON)

Hier liegt die Speicherung des Containers. Die Domain selbst bleibt frei von JSON-Details.
- JsonEmployeeRepository: Datei-Repository
- JsonSerializer: Mapping zwischen Entities und JSON

Dateiformat:
- Kennung "format" und "version", damit fremde Dateien erkannt werden.
- Gehalt als String, damit der Decimal-Wert exakt erhalten bleibt.
"""

from __future__ import annotations

import json
import logging
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Optional

from .config import get_settings
from .domain import Characteristic, Employee, EmployeeContainer

logger = logging.getLogger(__name__)

FORMAT_NAME = "employee-container"
FORMAT_VERSION = 1


class ContainerFormatError(ValueError):
    """Datei existiert, wurde aber nicht von diesem Programm geschrieben oder ist kaputt."""


class FileStorage:
    """
    Klasse für Dateihandling beim laden und speichern.
    - Nur lesen/schreiben.
    - Encoding kommt aus den Settings (Standard UTF-8).
    """

    def __init__(self, encoding: Optional[str] = None) -> None:
        self._encoding = encoding or get_settings().encoding

    def lese_text(self, pfad: str) -> str:
        """
        Liest eine Datei als Text.
        Fehlerbehandlung:
        - FileNotFoundError, wenn Datei fehlt
        - UnicodeDecodeError bei Binärdaten
        """
        with open(pfad, "r", encoding=self._encoding) as f:
            return f.read()

    def schreibe_text(self, pfad: str, content: str) -> None:
        """
        Schreibt Text in eine Datei. Bestehender Inhalt wird ersetzt.
        """
        with open(pfad, "w", encoding=self._encoding) as f:
            f.write(content)


class JsonSerializer:
    """
    Wandelt EmployeeContainer <-> JSON.
    - Parsing ist streng: fehlende Felder oder falsche Typen -> ContainerFormatError.
    """

    def to_json(self, container: EmployeeContainer) -> str:
        """
        Macht aus dem Container einen JSON-String.
        Der String ist formatiert indent = 2.
        """
        payload = {
            "format": FORMAT_NAME,
            "version": FORMAT_VERSION,
            "employees": [self._employee_to_dict(e) for e in container],
        }
        return json.dumps(payload, ensure_ascii=False, indent=2)

    def from_json(self, raw: str) -> EmployeeContainer:
        """
        Baut einen Container aus JSON.
        """
        try:
            payload = json.loads(raw)
        except (json.JSONDecodeError, RecursionError) as e:
            raise ContainerFormatError(f"Kein gültiges JSON: {e}") from e

        if not isinstance(payload, dict) or payload.get("format") != FORMAT_NAME:
            raise ContainerFormatError("Datei ist kein Mitarbeiter-Container.")
        if payload.get("version") != FORMAT_VERSION:
            raise ContainerFormatError(f"Nicht unterstützte Version: {payload.get('version')!r}")

        employees = payload.get("employees")
        if not isinstance(employees, list):
            raise ContainerFormatError("'employees' muss eine Liste sein.")

        try:
            return EmployeeContainer([self._employee_from_dict(x) for x in employees])
        except (KeyError, TypeError) as e:
            raise ContainerFormatError(f"Ungültiger Mitarbeiter-Eintrag: {e}") from e

    def _employee_to_dict(self, e: Employee) -> Dict[str, Any]:
        """Employee Mapping für JSON."""
        return {
            "passport_series": e.passport_series,
            "passport_number": e.passport_number,
            "salary": str(e.salary),
            "characteristics": [self._characteristic_to_dict(c) for c in e.characteristics],
        }

    def _characteristic_to_dict(self, c: Characteristic) -> Dict[str, Any]:
        """Characteristic Mapping für JSON."""
        return {
            "property": c.property,
            "rating": c.rating,
        }

    def _employee_from_dict(self, d: Dict[str, Any]) -> Employee:
        """Mapping für Employee."""
        series = self._expect(d["passport_series"], str, "passport_series")
        number = self._expect(d["passport_number"], str, "passport_number")
        raw_salary = self._expect(d["salary"], str, "salary")
        try:
            salary = Decimal(raw_salary)
        except InvalidOperation as e:
            raise ContainerFormatError(f"Ungültiges Gehalt: {raw_salary!r}") from e
        # NaN/Infinity lassen sich nicht sortieren oder vergleichen.
        if not salary.is_finite():
            raise ContainerFormatError(f"Gehalt muss endlich sein, ist aber {raw_salary!r}.")

        characteristics = self._expect(d["characteristics"], list, "characteristics")
        return Employee(
            passport_series=series,
            passport_number=number,
            salary=salary,
            characteristics=[self._characteristic_from_dict(x) for x in characteristics],
        )

    def _characteristic_from_dict(self, d: Dict[str, Any]) -> Characteristic:
        """Mapping für Characteristic."""
        prop = self._expect(d["property"], str, "property")
        rating = d["rating"]
        # bool ist in Python ein int, zählt hier aber nicht als Zahl.
        if isinstance(rating, bool) or not isinstance(rating, (int, float)):
            raise ContainerFormatError(f"rating muss eine Zahl sein, ist aber {rating!r}.")
        return Characteristic(property=prop, rating=float(rating))

    def _expect(self, value: Any, typ: type, name: str) -> Any:
        """Prüft den Typ eines Feldes."""
        if not isinstance(value, typ):
            raise ContainerFormatError(f"{name} muss {typ.__name__} sein, ist aber {value!r}.")
        return value


class JsonEmployeeRepository:
    """
    Repository für eine JSON-Datei.
    - FileStorage für Datei-Zugriff
    - JsonSerializer für Mapping
    """

    def __init__(
        self,
        pfad: str,
        storage: Optional[FileStorage] = None,
        serializer: Optional[JsonSerializer] = None
    ) -> None:
        self._pfad = pfad
        self._storage = storage or FileStorage()
        self._serializer = serializer or JsonSerializer()

    def lade(self) -> EmployeeContainer:
        """
        Lädt die Datei und baut die Domain-Objekte.
        """
        try:
            raw = self._storage.lese_text(self._pfad)
        except UnicodeDecodeError as e:
            logger.warning("Datei %s ist keine Textdatei", self._pfad)
            raise ContainerFormatError(f"Datei ist keine Textdatei: {e}") from e

        try:
            container = self._serializer.from_json(raw)
        except ContainerFormatError:
            logger.warning("Datei %s wurde abgelehnt", self._pfad)
            raise

        logger.info("%d Mitarbeiter aus %s geladen", len(container), self._pfad)
        return container

    def speichere(self, container: EmployeeContainer) -> None:
        """
        Serialisiert und schreibt in die Datei.
        """
        raw = self._serializer.to_json(container)
        self._storage.schreibe_text(self._pfad, raw)
        logger.info("%d Mitarbeiter nach %s gespeichert", len(container), self._pfad)
