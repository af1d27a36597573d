"""
Entry point für die Mitarbeiterverwaltung.
Dieses Modul startet die Anwendung.

Aufruf:
- ohne Argumente: interaktives Menü
- mit "auto": Beispiel-Mitarbeiter speichern und beenden
"""

from __future__ import annotations

import logging
import sys
from typing import List, Optional

from .config import get_settings
from .controller import PersonalController
from .domain import EmployeeContainer
from .service import PersonalService
from .view import ConsoleView


def ist_auto_modus(argv: List[str]) -> bool:
    """Prüft, ob irgendein Argument 'auto' ist (Groß/Klein egal)."""
    return any(arg.lower() == "auto" for arg in argv)


def main(argv: Optional[List[str]] = None) -> None:
    """
    Startpunkt der Anwendung.
    Ablauf:
    - Logging einrichten
    - Komponenten erstellen
    - auto-Modus oder Menü-Schleife starten
    """
    if argv is None:
        argv = sys.argv[1:]

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    try:
        # Bausteine der App erstellen.
        service = PersonalService()
        view = ConsoleView()
        container = EmployeeContainer()

        if ist_auto_modus(argv):
            pfad = service.auto_speichern(container, settings.auto_file)
            view.show_message(f"Data added and saved to '{pfad}' file.")
            return

        controller = PersonalController(service, view)
        controller.starte_app(container)

    except (KeyboardInterrupt, EOFError):
        # Sauberer Abbruch per Strg+C oder Ende der Eingabe.
        print("\nApplication terminated.")
        sys.exit(0)

    except Exception as e:
        # Unerwarteter Fehler.
        print(f"\nERROR: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
