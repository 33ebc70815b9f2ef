"""WSGI entry point: ``gunicorn wsgi:app``."""
import sys
import os

# Make ``config`` and ``inventory_dashboard`` importable from the project root
sys.path.insert(0, os.path.dirname(__file__))

from inventory_dashboard import create_app

# Configuration comes from ``config.Config`` and the environment / .env
app = create_app()

if __name__ == "__main__":
    app.run()
