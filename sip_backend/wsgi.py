#setup: pip install -e ".[test]"
#setup: flask --app sip_backend.wsgi run --port 5000 --debug

import logging

from sip_backend.app import create_app

app = create_app()


if __name__ == "__main__":
    logging.basicConfig(level=app.config["LOG_LEVEL"])
    app.run(port=app.config["PORT"], debug=True)
