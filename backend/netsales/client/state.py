"""
Client-side state containers for the roster and the sales ledger.

States are immutable; each reducer returns a new state (or the same one when
nothing applies). Reducers never talk to the API: the sessions in
`netsales.client.sessions` dispatch only after a successful call.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Optional

SET_ALL = "SET_ALL"
ADD = "ADD"
UPDATE = "UPDATE"
DELETE = "DELETE"
LOGIN = "LOGIN"
LOGOUT = "LOGOUT"


@dataclass(frozen=True)
class Action:
    type: str
    payload: Any = None


@dataclass(frozen=True)
class EmployeesState:
    employees: tuple = ()
    current_user: Optional[dict] = None


@dataclass(frozen=True)
class SalesState:
    sales: tuple = ()


def _replace_by_id(items: tuple, record: dict) -> tuple:
    return tuple(record if item["id"] == record["id"] else item for item in items)


def _remove_by_id(items: tuple, record_id: str) -> tuple:
    return tuple(item for item in items if item["id"] != record_id)


def employees_reducer(state: EmployeesState, action: Action) -> EmployeesState:
    if action.type == SET_ALL:
        return replace(state, employees=tuple(action.payload or ()))
    if action.type == LOGIN:
        return replace(state, current_user=action.payload)
    if action.type == LOGOUT:
        return replace(state, current_user=None)
    if action.type == ADD:
        return replace(state, employees=state.employees + (action.payload,))
    if action.type == UPDATE:
        return replace(state, employees=_replace_by_id(state.employees, action.payload))
    if action.type == DELETE:
        return replace(state, employees=_remove_by_id(state.employees, action.payload))
    return state


def sales_reducer(state: SalesState, action: Action) -> SalesState:
    if action.type == SET_ALL:
        return replace(state, sales=tuple(action.payload or ()))
    if action.type == ADD:
        return replace(state, sales=state.sales + (action.payload,))
    if action.type == UPDATE:
        return replace(state, sales=_replace_by_id(state.sales, action.payload))
    if action.type == DELETE:
        return replace(state, sales=_remove_by_id(state.sales, action.payload))
    return state
