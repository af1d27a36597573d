"""
UI layer für die Console

Diese View zeigt Menü und Mitarbeiter in der Konsole.
- Eingaben lesen
- Mitarbeiter mit ihren Characteristics ausgeben
"""

from __future__ import annotations

from typing import Iterable

from .domain import Employee


class ConsoleView:
    """
    View für die Konsole.
    """

    def render_menue(self) -> None:
        """Zeigt das Hauptmenü."""
        print("Choose an action:")
        print("1. Display employees")
        print("2. Add employee")
        print("3. Sort employees by salary")
        print("4. Serialize or deserialize container")
        print("5. Remove employee by passport")
        print("6. Search employee by passport")
        print("7. Exit")

    def render_employees(self, employees: Iterable[Employee]) -> None:
        """
        Gibt Mitarbeiter aus.
        Pro Mitarbeiter eine Zeile, danach eine Zeile je Characteristic.
        """
        for employee in employees:
            print(employee)
            for characteristic in employee.get_characteristics():
                print(characteristic)

    def prompt(self, frage: str) -> str:
        """
        Fragt den Nutzer nach Eingabe.
        """
        return input(frage)

    def show_message(self, text: str) -> None:
        """
        Gibt eine Nachricht aus.
        """
        print(text)
