"""
personal_verwaltung package

Konsolen-Werkzeug zur Verwaltung von Mitarbeitern mit Gehalt und bewerteten Eigenschaften.

Schichtenarchitektur:
- domain.py: Entitäten + Container
- persistence.py: JSON-Persistierung
- service.py: Abläufe (auto-Modus, Laden/Speichern)
- view.py: Konsolen-Ausgabe
- controller.py: Menü-Orchestrierung
- config.py: Einstellungen aus der Umgebung
- main.py: Einstiegspunkt
"""
