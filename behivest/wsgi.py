#setup: pip install -e ".[test]"
#setup: flask --app behivest.wsgi run --port 5000 --debug

from behivest.app import create_app
from behivest.config import get_settings

app = create_app()


if __name__ == "__main__":
    settings = get_settings()
    app.run(host=settings.host, port=settings.port, debug=True)
