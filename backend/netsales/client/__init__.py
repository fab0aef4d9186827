from .api import ApiClient
from .sessions import AdminGate, EmployeeDirectory, PosSession, SalesLedger
from .state import Action, EmployeesState, SalesState, employees_reducer, sales_reducer

__all__ = [
    'ApiClient',
    'AdminGate', 'EmployeeDirectory', 'PosSession', 'SalesLedger',
    'Action', 'EmployeesState', 'SalesState', 'employees_reducer', 'sales_reducer',
]
