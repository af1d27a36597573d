"""
Tests für die Menü-Abläufe. Die View wird durch eine Skript-View ersetzt.
"""
from __future__ import annotations

import sys
from decimal import Decimal
from pathlib import Path
from typing import List

import pytest

SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from personal_verwaltung.controller import PersonalController
from personal_verwaltung.domain import Employee, EmployeeContainer
from personal_verwaltung.service import PersonalService
from personal_verwaltung.view import ConsoleView


class ScriptedView(ConsoleView):
    """Liefert vorgegebene Eingaben und sammelt die Ausgaben."""

    def __init__(self, eingaben: List[str]) -> None:
        self._eingaben = list(eingaben)
        self.ausgaben: List[str] = []
        self.angezeigt: List[List[Employee]] = []

    def render_menue(self) -> None:
        self.ausgaben.append("<menu>")

    def render_employees(self, employees) -> None:
        self.angezeigt.append(list(employees))

    def prompt(self, frage: str) -> str:
        return self._eingaben.pop(0)

    def show_message(self, text: str) -> None:
        self.ausgaben.append(text)


def _controller(eingaben: List[str]):
    view = ScriptedView(eingaben)
    return PersonalController(PersonalService(), view), view


@pytest.fixture()
def container():
    return EmployeeContainer([
        Employee("AB", "111", Decimal("1000.00")),
        Employee("CD", "222", Decimal("500.00")),
    ])


def test_add_employee_with_characteristic():
    controller, view = _controller(["2", "AB", "111", "1500,50", "x", "Y", "Skill", "4.5", "7"])

    result = controller.starte_app()

    assert len(result) == 1
    employee = result.employees[0]
    assert employee.salary == Decimal("1500.50")
    assert [(c.property, c.rating) for c in employee.characteristics] == [("Skill", 4.5)]
    assert "Invalid choice. Please enter Y or N." in view.ausgaben
    assert "Employee added." in view.ausgaben


def test_add_employee_reprompts_on_bad_numbers():
    controller, view = _controller(["2", "AB", "111", "lots", "NaN", "100", "y", "Skill", "good", "inf", "3", "7"])

    result = controller.starte_app()

    assert result.employees[0].salary == Decimal("100")
    assert result.employees[0].characteristics[0].rating == 3.0
    assert view.ausgaben.count("Invalid number, please try again.") == 4


def test_invalid_menu_choice_shows_message_and_menu_again(container):
    controller, view = _controller(["9", "7"])

    result = controller.starte_app(container)

    assert result is container
    assert view.ausgaben == ["<menu>", "Invalid choice. Please try again.", "<menu>"]


def test_sort_by_salary_displays_without_reordering(container):
    controller, view = _controller(["3", "1", "7"])

    controller.starte_app(container)

    sortiert, alle = view.angezeigt
    assert [e.passport_series for e in sortiert] == ["CD", "AB"]
    assert [e.passport_series for e in alle] == ["AB", "CD"]


def test_remove_by_passport(container):
    controller, view = _controller(["5", "AB", "111", "7"])

    result = controller.starte_app(container)

    assert [e.passport_series for e in result] == ["CD"]
    assert "Employee with passport series AB and passport number 111 removed." in view.ausgaben


def test_search_not_found(container):
    controller, view = _controller(["6", "ZZ", "000", "7"])

    controller.starte_app(container)

    assert "No employees found with passport series ZZ and passport number 000" in view.ausgaben
    assert view.angezeigt == []


def test_search_found(container):
    controller, view = _controller(["6", "CD", "222", "7"])

    controller.starte_app(container)

    assert "Employees with passport series CD and passport number 222:" in view.ausgaben
    assert [e.passport_number for e in view.angezeigt[0]] == ["222"]


def test_save_then_load_replaces_container(tmp_path, container):
    pfad = str(tmp_path / "staff")
    controller, view = _controller(["4", pfad, "5", "AB", "111", "5", "CD", "222", "4", pfad, "7"])

    result = controller.starte_app(container)

    assert f"Data saved to file '{pfad}'." in view.ausgaben
    assert f"Data loaded from file '{pfad}'." in view.ausgaben
    assert [e.passport_series for e in result] == ["AB", "CD"]


def test_failed_load_keeps_previous_container(tmp_path, container):
    pfad = tmp_path / "foreign"
    pfad.write_text("{broken", encoding="utf-8")
    controller, view = _controller(["4", str(pfad), "7"])

    result = controller.starte_app(container)

    assert result is container
    assert len(result) == 2
    assert any(msg.startswith("ERROR:") for msg in view.ausgaben)


@pytest.mark.parametrize(
    "content",
    [
        "[" * 200000,
        '{"format": "employee-container", "version": 1, "employees": ['
        '{"passport_series": "A", "passport_number": "1", "salary": "NaN", "characteristics": []}]}',
    ],
)
def test_bad_file_returns_to_menu_and_sort_still_works(tmp_path, container, content):
    pfad = tmp_path / "bad"
    pfad.write_text(content, encoding="utf-8")
    controller, view = _controller(["4", str(pfad), "3", "7"])

    result = controller.starte_app(container)

    assert result is container
    assert any(msg.startswith(f"ERROR: '{pfad}' is not a valid employee file") for msg in view.ausgaben)
    assert [e.passport_series for e in view.angezeigt[0]] == ["CD", "AB"]


def test_unwritable_path_reports_error(tmp_path, container):
    pfad = str(tmp_path / "missing" / "staff")
    controller, view = _controller(["4", pfad, "7"])

    result = controller.starte_app(container)

    assert result is container
    assert any(msg.startswith(f"ERROR: could not access '{pfad}'") for msg in view.ausgaben)


def test_console_view_prints_employees(capsys):
    employee = Employee("XYZ", "98765", Decimal("60000.00"))
    employee.add_characteristic("Experience", 5.5)

    ConsoleView().render_employees([employee])

    assert capsys.readouterr().out.splitlines() == [
        "Passport: XYZ-98765, Salary: 60000.00",
        "Characteristic: Experience, Rating: 5.5",
    ]
