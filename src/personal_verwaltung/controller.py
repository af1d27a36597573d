"""
Controller layer

Der PersonalController steuert die App. Er verbindet Service und View.

Aufgaben:
- Menü anzeigen und Eingaben verarbeiten
- Container-Operationen aufrufen
- Fehler melden, ohne die Menü-Schleife zu verlassen

Der Container ist kein Attribut des Controllers. Jeder Menüpunkt bekommt ihn
übergeben und gibt den Container zurück, mit dem weitergearbeitet wird.
"""

from __future__ import annotations

import logging
import math
from decimal import Decimal, InvalidOperation
from typing import Callable, Dict, Optional

from .domain import Employee, EmployeeContainer
from .persistence import ContainerFormatError
from .service import GELADEN, PersonalService
from .view import ConsoleView

logger = logging.getLogger(__name__)

EXIT_CHOICE = "7"


class PersonalController:
    """
    Hauptcontroller für die Mitarbeiterverwaltung.

    Aufgaben:
    - Menü-Schleife
    - Aufrufe an Container, Service und View
    """

    def __init__(self, service: PersonalService, view: ConsoleView) -> None:
        self._service = service
        self._view = view
        self._handler: Dict[str, Callable[[EmployeeContainer], EmployeeContainer]] = {
            "1": self.zeige_mitarbeiter,
            "2": self.fuege_mitarbeiter_hinzu,
            "3": self.zeige_nach_gehalt,
            "4": self.lade_oder_speichere,
            "5": self.entferne_mitarbeiter,
            "6": self.suche_mitarbeiter,
        }

    def starte_app(self, container: Optional[EmployeeContainer] = None) -> EmployeeContainer:
        """
        Startet die Menü-Schleife.
        Läuft bis zur Auswahl 7 und gibt den letzten Container zurück.
        """
        if container is None:
            container = EmployeeContainer()

        # Endlosschleife bis Abbruch.
        while True:
            self._view.render_menue()
            choice = self._view.prompt("").strip()

            if choice == EXIT_CHOICE:
                return container

            container = self.verarbeite_auswahl(choice, container)

    def verarbeite_auswahl(self, choice: str, container: EmployeeContainer) -> EmployeeContainer:
        """Führt einen Menüpunkt aus."""
        handler = self._handler.get(choice)
        if handler is None:
            self._view.show_message("Invalid choice. Please try again.")
            return container
        return handler(container)

    def zeige_mitarbeiter(self, container: EmployeeContainer) -> EmployeeContainer:
        """Zeigt alle Mitarbeiter in gespeicherter Reihenfolge."""
        self._view.render_employees(container)
        return container

    def zeige_nach_gehalt(self, container: EmployeeContainer) -> EmployeeContainer:
        """Zeigt die Mitarbeiter nach Gehalt sortiert. Der Container bleibt unverändert."""
        self._view.render_employees(container.sort_employees_by_salary())
        return container

    def fuege_mitarbeiter_hinzu(self, container: EmployeeContainer) -> EmployeeContainer:
        """
        Fragt einen neuen Mitarbeiter ab.
        - Ungültige Zahlen werden gemeldet und erneut abgefragt.
        - Optional eine Characteristic (Y/N).
        """
        series = self._view.prompt("Enter passport series: ")
        number = self._view.prompt("Enter passport number: ")
        salary = self._prompt_decimal("Enter salary: ")
        employee = Employee(series, number, salary)

        while True:
            antwort = self._view.prompt("Add a characteristic (Y/N): ").strip().lower()

            if antwort == "y":
                prop = self._view.prompt("Enter characteristic property: ")
                rating = self._prompt_float("Enter characteristic rating: ")
                employee.add_characteristic(prop, rating)
                break
            elif antwort == "n":
                break
            else:
                self._view.show_message("Invalid choice. Please enter Y or N.")

        container.add_employee(employee)
        self._view.show_message("Employee added.")
        return container

    def lade_oder_speichere(self, container: EmployeeContainer) -> EmployeeContainer:
        """
        Lädt die Datei, wenn sie existiert. Sonst wird gespeichert.
        Bei Fehlern bleibt der bisherige Container erhalten.
        """
        pfad = self._view.prompt("Enter the file name for serialization or deserialization: ").strip()
        if not pfad:
            self._view.show_message("No file name given.")
            return container

        try:
            container, aktion = self._service.lade_oder_speichere(container, pfad)
        except ContainerFormatError as e:
            self._view.show_message(f"ERROR: '{pfad}' is not a valid employee file: {e}")
            return container
        except OSError as e:
            logger.warning("Dateizugriff auf %s fehlgeschlagen: %s", pfad, e)
            self._view.show_message(f"ERROR: could not access '{pfad}': {e}")
            return container

        if aktion == GELADEN:
            self._view.show_message(f"Data loaded from file '{pfad}'.")
        else:
            self._view.show_message(f"Data saved to file '{pfad}'.")
        return container

    def entferne_mitarbeiter(self, container: EmployeeContainer) -> EmployeeContainer:
        """Entfernt alle Mitarbeiter mit dem eingegebenen Passport."""
        series = self._view.prompt("Enter passport series to remove: ")
        number = self._view.prompt("Enter passport number to remove: ")
        container.remove_employee(series, number)
        self._view.show_message(
            f"Employee with passport series {series} and passport number {number} removed."
        )
        return container

    def suche_mitarbeiter(self, container: EmployeeContainer) -> EmployeeContainer:
        """Sucht nach Passport und zeigt die Treffer."""
        series = self._view.prompt("Enter passport series to search: ")
        number = self._view.prompt("Enter passport number to search: ")
        treffer = container.search_employees_by_passport(series, number)

        if not treffer:
            self._view.show_message(
                f"No employees found with passport series {series} and passport number {number}"
            )
        else:
            self._view.show_message(
                f"Employees with passport series {series} and passport number {number}:"
            )
            self._view.render_employees(treffer)
        return container

    def _prompt_decimal(self, frage: str) -> Decimal:
        """
        Liest einen Geldbetrag.
        Komma ist als Dezimaltrennzeichen erlaubt. NaN/Infinity werden abgelehnt.
        """
        while True:
            raw = self._view.prompt(frage).strip().replace(",", ".")
            try:
                value = Decimal(raw)
            except InvalidOperation:
                value = None

            if value is not None and value.is_finite():
                return value
            self._view.show_message("Invalid number, please try again.")

    def _prompt_float(self, frage: str) -> float:
        """Liest eine Bewertung als float. Wiederholt bei ungültiger Eingabe."""
        while True:
            raw = self._view.prompt(frage).strip().replace(",", ".")
            try:
                value = float(raw)
            except ValueError:
                value = None

            if value is not None and math.isfinite(value):
                return value
            self._view.show_message("Invalid number, please try again.")
