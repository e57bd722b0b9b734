from sqlalchemy import text
from .db_config import get_db_connection, INPUT_TABLE


def create_schema(eng=None):
    eng = eng or get_db_connection()
    with eng.begin() as con:
        con.execute(text(
            f'CREATE TABLE IF NOT EXISTS {INPUT_TABLE}('
            'case_id INTEGER PRIMARY KEY, k INTEGER, sequence TEXT)'
        ))
    print('Schema ready.')


if __name__ == '__main__':
    create_schema()
