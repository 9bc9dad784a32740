#setup: pip install -e ".[test]"
#setup: flask --app backend.wsgi run --port 5000 --debug

import logging

from backend.app import create_app

app = create_app()


if __name__ == "__main__":
    settings = app.config["SETTINGS"]
    logging.basicConfig(level=settings.log_level)
    app.run(port=settings.port, debug=True)
