import pytest

from netsales.client.forms import build_employee_payload, build_sale_payload, preview_total
from netsales.errors import InvalidArgument


USER = {"id": "7", "username": "ahmed"}


class TestSaleForm:

    def test_new_entry_belongs_to_current_user(self):
        payload = build_sale_payload(
            {"date": "2024-01-01", "networkNumber": "101", "mastercardAmount": "150.50",
             "madaAmount": "", "visaAmount": "x"},
            USER,
        )
        assert payload == {
            "date": "2024-01-01",
            "networkNumber": 101,
            "mastercardAmount": 150.5,
            "madaAmount": 0.0,
            "visaAmount": 0.0,
            "gccAmount": 0.0,
            "employeeId": "7",
        }

    def test_edit_keeps_id_and_owner(self):
        editing = {"id": "55", "employeeId": "3"}
        payload = build_sale_payload({"date": "2024-01-02", "networkNumber": 9}, USER, editing=editing)
        assert payload["id"] == "55"
        assert payload["employeeId"] == "3"

    def test_network_number_required(self):
        with pytest.raises(InvalidArgument):
            build_sale_payload({"date": "2024-01-01", "networkNumber": ""}, USER)

    def test_current_user_required(self):
        with pytest.raises(InvalidArgument):
            build_sale_payload({"networkNumber": "1"}, None)

    def test_blank_date_defaults_to_today(self):
        payload = build_sale_payload({"networkNumber": "1"}, USER)
        assert len(payload["date"]) == 10

    def test_preview_total(self):
        assert preview_total({"mastercardAmount": "1.25", "madaAmount": "2", "gccAmount": "bad"}) == 3.25


class TestEmployeeForm:

    def test_add_requires_password(self):
        with pytest.raises(InvalidArgument):
            build_employee_payload({"name": "A", "username": "a", "password": ""})

    def test_add_defaults_branch(self):
        payload = build_employee_payload({"name": "A", "username": "a", "password": "1"})
        assert payload == {"name": "A", "username": "a", "branch": "فرع طويق", "password_hash": "1"}

    def test_password_not_trimmed(self):
        payload = build_employee_payload({"name": "A", "username": "a", "password": "123 "})
        assert payload["password_hash"] == "123 "

    def test_edit_blank_password_keeps_current(self):
        existing = {"id": "3", "name": "A", "username": "a", "password_hash": "old", "branch": "فرع عكاظ"}
        payload = build_employee_payload({"name": "B", "username": "a", "password": ""}, existing)
        assert payload["id"] == "3"
        assert payload["password_hash"] == "old"
        assert payload["branch"] == "فرع عكاظ"
