# tasktrack/main.py  (uvicorn entrypoint: uvicorn tasktrack.main:app)
from dotenv import load_dotenv

# load .env before Settings() reads the environment
load_dotenv()

from tasktrack.app import create_app  # noqa: E402

app = create_app()
