import sys, pathlib
sys.path.append(str(pathlib.Path(__file__).resolve().parents[1] / "backend"))

from slotfinder.config import settings
from slotfinder.database import init_db


def main():
    url = settings.resolved_database_url
    if url.startswith("sqlite:///"):
        # SQLite does not create missing parent directories
        pathlib.Path(url.replace("sqlite:///", "", 1)).parent.mkdir(parents=True, exist_ok=True)

    print(f"Using DB: {url}")
    init_db()
    print("Tables created.")


if __name__ == "__main__":
    main()
