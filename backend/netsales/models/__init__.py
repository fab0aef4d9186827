from .employees import Employee
from .sales import SaleEntry

__all__ = [
    'Employee',
    'SaleEntry',
]
