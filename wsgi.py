# wsgi.py
from console import create_super_admin_app

application = create_super_admin_app()
