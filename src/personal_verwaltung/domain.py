"""
Domain beinhaltet die Entities

Dieses Modul enthält nur die Fachlogik.
Es enthält keine UI- oder JSON-Logik.

- Entities sind Dataclasses.
- Der Passport-Schlüssel (Serie + Nummer) ist nicht eindeutig.
- Sortieren liefert immer eine neue Liste, die gespeicherte Reihenfolge bleibt.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Iterator, List


@dataclass(slots=True)
class Characteristic:
    """Eine benannte Bewertung eines Mitarbeiters. Kein Wertebereich."""
    property: str
    rating: float

    def __str__(self) -> str:
        return f"Characteristic: {self.property}, Rating: {self.rating}"


@dataclass(slots=True)
class Employee:
    """
    Ein Mitarbeiter.
    - passport_series + passport_number bilden den Passport-Schlüssel
    - salary ist ein Decimal, negative Werte werden nicht geprüft
    - characteristics in Einfüge-Reihenfolge
    """
    passport_series: str
    passport_number: str
    salary: Decimal
    characteristics: List[Characteristic] = field(default_factory=list)

    def add_characteristic(self, property: str, rating: float) -> None:
        """Hängt eine neue Characteristic an."""
        self.characteristics.append(Characteristic(property, rating))

    def get_characteristics(self) -> List[Characteristic]:
        """Liefert die Characteristics in Einfüge-Reihenfolge."""
        return self.characteristics

    def hat_passport(self, series: str, number: str) -> bool:
        """Exakter Vergleich, Groß/Klein wird unterschieden."""
        return self.passport_series == series and self.passport_number == number

    def __str__(self) -> str:
        return f"Passport: {self.passport_series}-{self.passport_number}, Salary: {self.salary}"


@dataclass(slots=True)
class EmployeeContainer:
    """
    Geordnete Sammlung von Mitarbeitern.

    Diese Klasse bietet:
    - Hinzufügen / Entfernen
    - Suche nach Passport oder Gehalt
    - Sortierte Sichten (die Liste selbst wird nicht umsortiert)
    - Speichern / Laden über die Persistenz-Schicht
    """
    employees: List[Employee] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Prüft, dass keine leeren Einträge enthalten sind."""
        if any(e is None for e in self.employees):
            raise ValueError("employees darf keine None-Einträge enthalten.")

    def __iter__(self) -> Iterator[Employee]:
        return iter(self.employees)

    def __len__(self) -> int:
        return len(self.employees)

    def add_employee(self, employee: Employee) -> None:
        """Hängt einen Mitarbeiter ans Ende an."""
        if employee is None:
            raise ValueError("employee darf nicht None sein.")
        self.employees.append(employee)

    def remove_employee(self, series: str, number: str) -> None:
        """
        Entfernt alle Mitarbeiter mit genau diesem Passport.
        Kein Treffer ist kein Fehler.
        """
        self.employees[:] = [e for e in self.employees if not e.hat_passport(series, number)]

    def search_employees_by_passport(self, series: str, number: str) -> List[Employee]:
        """Alle Treffer in gespeicherter Reihenfolge, evtl. leer."""
        return [e for e in self.employees if e.hat_passport(series, number)]

    def search_employees_by_salary(self, min_salary: Decimal, max_salary: Decimal) -> List[Employee]:
        """Alle Mitarbeiter mit min_salary <= salary <= max_salary."""
        return [e for e in self.employees if min_salary <= e.salary <= max_salary]

    def sort_employees_by_passport(self) -> List[Employee]:
        """
        Neue Liste, sortiert nach Serie + Nummer als Text.
        sorted() ist stabil, gleiche Schlüssel behalten ihre Reihenfolge.
        """
        return sorted(self.employees, key=lambda e: e.passport_series + e.passport_number)

    def sort_employees_by_salary(self) -> List[Employee]:
        """Neue Liste, aufsteigend nach Gehalt (stabil)."""
        return sorted(self.employees, key=lambda e: e.salary)

    def serialize(self, pfad: str) -> None:
        """
        Schreibt den kompletten Container in die Datei.
        Eine bestehende Datei wird überschrieben.
        """
        # Lokaler Import, persistence importiert domain.
        from .persistence import JsonEmployeeRepository

        JsonEmployeeRepository(pfad).speichere(self)

    @classmethod
    def deserialize(cls, pfad: str) -> EmployeeContainer:
        """
        Lädt einen Container aus einer Datei, die serialize() geschrieben hat.
        Fehlerbehandlung:
        - FileNotFoundError, wenn Datei fehlt
        - ContainerFormatError bei fremden oder kaputten Dateien
        """
        from .persistence import JsonEmployeeRepository

        return JsonEmployeeRepository(pfad).lade()
