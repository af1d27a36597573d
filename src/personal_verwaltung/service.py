"""
Application/Use-Case layer

Der PersonalService bündelt die Abläufe, die mehr als eine Container-Operation brauchen:
- auto-Modus (Beispiel-Mitarbeiter anlegen und speichern)
- Menüpunkt "Laden oder Speichern"
"""

from __future__ import annotations

import logging
import os
from decimal import Decimal
from typing import Optional, Tuple

from .config import get_settings
from .domain import Employee, EmployeeContainer

logger = logging.getLogger(__name__)

GELADEN = "loaded"
GESPEICHERT = "saved"


class PersonalService:
    """
    Service für die Container-Abläufe.
    Der Container wird immer übergeben und zurückgegeben, der Service hält keinen Zustand.
    """

    def erstelle_auto_mitarbeiter(self) -> Employee:
        """Der feste Mitarbeiter für den auto-Modus."""
        employee = Employee("XYZ", "98765", Decimal("60000.00"))
        employee.add_characteristic("Experience", 5.5)
        return employee

    def auto_speichern(self, container: EmployeeContainer, pfad: Optional[str] = None) -> str:
        """
        Fügt den auto-Mitarbeiter hinzu und speichert.
        Gibt den verwendeten Dateinamen zurück.
        """
        pfad = pfad or get_settings().auto_file
        container.add_employee(self.erstelle_auto_mitarbeiter())
        container.serialize(pfad)
        return pfad

    def lade_oder_speichere(self, container: EmployeeContainer, pfad: str) -> Tuple[EmployeeContainer, str]:
        """
        Existiert die Datei, wird sie geladen. Sonst wird der Container gespeichert.
        - Rückgabe: (Container für die weitere Arbeit, GELADEN oder GESPEICHERT)
        - Fehler beim Laden werden weitergereicht, der alte Container bleibt beim Aufrufer.
        """
        if os.path.exists(pfad):
            logger.debug("Datei %s existiert, wird geladen", pfad)
            return EmployeeContainer.deserialize(pfad), GELADEN

        container.serialize(pfad)
        return container, GESPEICHERT
