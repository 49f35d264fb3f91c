"""Run the development server with ``python -m savings_compare``."""

from savings_compare.app import create_app
from savings_compare.config import settings

if __name__ == "__main__":
    app = create_app(settings)
    app.run(host=settings.API_HOST, port=settings.API_PORT, debug=settings.DEBUG)
