from dotenv import load_dotenv

# Config reads the environment at import time
load_dotenv()

from service import create_app  # noqa: E402

app = create_app()


if __name__ == "__main__":
    app.run(host=app.config["SERVER_HOST"], port=app.config["SERVER_PORT"])
