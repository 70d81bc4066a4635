import os
from dotenv import load_dotenv

load_dotenv()

database_url = os.getenv("DATABASE_URL")
user = os.getenv("DB_USER")
password = os.getenv("DB_PASSWORD")
host = os.getenv("DB_HOST")
port = os.getenv("DB_PORT")
db_name = os.getenv("DB_NAME")

if database_url is None and host is not None:
    database_url = f"postgresql+asyncpg://{user}:{password}@{host}:{port}/{db_name}"

# file | memory | database
storage_backend = os.getenv("STORAGE_BACKEND") or ("database" if database_url else "file")
scores_file = os.getenv("SCORES_FILE", os.path.join(os.getcwd(), "scores-data.json"))
sqlite_file = os.getenv("SQLITE_FILE", os.path.join(os.getcwd(), "wealth_quest.sqlite3"))

MAX_LEADERBOARD_LIMIT = 50


def clamp_leaderboard_limit(limit: int) -> int:
    """Keep the leaderboard size within 1..MAX_LEADERBOARD_LIMIT."""
    return max(1, min(limit, MAX_LEADERBOARD_LIMIT))


leaderboard_limit = clamp_leaderboard_limit(int(os.getenv("LEADERBOARD_LIMIT", "50")))
seed_demo_scores = os.getenv("SEED_DEMO_SCORES", "true").lower() in ("1", "true", "yes")
log_level = os.getenv("LOG_LEVEL", "INFO").upper()

if __name__ == "__main__":
    print(storage_backend, scores_file, host, port, db_name, leaderboard_limit)
