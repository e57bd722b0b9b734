from sqlalchemy import create_engine
import os

INPUT_TABLE = "max_average_input"
RESULT_TABLE = "max_average_result"
AUDIT_TABLE = "max_average_audit"


def get_db_connection():
    # MAX_AVERAGE_DB_URL wins; otherwise a DB file inside the working directory
    db_url = os.environ.get("MAX_AVERAGE_DB_URL")
    if not db_url:
        db_path = os.path.join(os.getcwd(), "max_average.db")
        db_url = f"sqlite:///{db_path}"
    engine = create_engine(db_url, echo=False)
    return engine
