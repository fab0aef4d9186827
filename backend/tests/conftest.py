"""
Pytest fixtures for the netsales backend tests.

Provides the application on an in-memory database, per-test table wipes,
the Flask test client, and an httpx-based ApiClient wired to the app.
"""

import httpx
import pytest

from netsales import create_app
from netsales.client import ApiClient, PosSession
from netsales.extensions import db
from netsales.services import employee_service, sales_service


@pytest.fixture(scope='session')
def app():
    """Create application for testing."""
    app = create_app({
        'TESTING': True,
        'SQLALCHEMY_DATABASE_URI': 'sqlite:///:memory:',
        'ADMIN_PASSWORD': '2525',
    })

    with app.app_context():
        db.create_all()
        yield app
        db.drop_all()


@pytest.fixture(scope='function')
def db_session(app):
    """Empty every table before the test."""
    meta = db.metadata
    for table in reversed(meta.sorted_tables):
        db.session.execute(table.delete())
    db.session.commit()

    yield db.session

    db.session.rollback()


@pytest.fixture(scope='function')
def client(app, db_session):
    """Create test client."""
    return app.test_client()


@pytest.fixture(scope='function')
def api_client(app, db_session):
    """ApiClient talking to the app in-process."""
    api = ApiClient("http://testserver", transport=httpx.WSGITransport(app=app))
    yield api
    api.close()


@pytest.fixture(scope='function')
def pos_session(app, api_client):
    return PosSession(api_client, admin_secret=app.config['ADMIN_PASSWORD'])


@pytest.fixture(scope='function')
def ahmed(db_session):
    """Employee 'ahmed' with password '123'."""
    return employee_service.create_employee({
        "name": "أحمد محمود",
        "username": "ahmed",
        "password_hash": "123",
        "branch": "فرع طويق",
    })


@pytest.fixture(scope='function')
def fatima(db_session):
    return employee_service.create_employee({
        "name": "فاطمة علي",
        "username": "fatima",
        "password_hash": "456",
        "branch": "فرع الحزم",
    })


def _insert_sale(employee_id: str, *, date: str = "2024-01-01", network: int = 101, **amounts) -> dict:
    """Insert a sale through the repository and return its wire form."""
    data = {
        "date": date,
        "networkNumber": network,
        "mastercardAmount": amounts.get("mastercard", 0),
        "madaAmount": amounts.get("mada", 0),
        "visaAmount": amounts.get("visa", 0),
        "gccAmount": amounts.get("gcc", 0),
        "employeeId": employee_id,
    }
    return sales_service.create_sale(data)


@pytest.fixture(scope='function')
def make_sale(db_session):
    """Factory fixture: make_sale(employee_id, date=..., network=..., mastercard=..., ...)."""
    return _insert_sale
