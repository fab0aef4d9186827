# backend/wsgi.py
from netsales import create_app

app = create_app()
