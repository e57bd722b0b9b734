import os
import pandas as pd
from sqlalchemy import text
from .create_schema import create_schema
from .db_config import get_db_connection, INPUT_TABLE
from .finder import to_int


def load_cases(path):
    """
    Read cases from .xlsx/.xls or .csv into a (case_id, k, sequence) frame.

    Every cell is read as text so pandas never coerces a value: a bad k or
    sequence is carried through unchanged for the batch run to reject.
    Blank case_id cells get the next free ids.
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f'{path} not found.')

    ext = os.path.splitext(path)[1].lower()
    if ext in ('.xlsx', '.xls'):
        df = pd.read_excel(path, dtype=str, keep_default_na=False)
    elif ext == '.csv':
        df = pd.read_csv(path, dtype=str, keep_default_na=False)
    else:
        raise ValueError(f'Unsupported input file type: {ext or path}')

    # Normalize column names
    df.columns = df.columns.str.strip().str.lower()

    for col in ('k', 'sequence'):
        if col not in df.columns:
            raise ValueError(f'{os.path.basename(path)} is missing a "{col}" column.')

    if 'case_id' not in df.columns:
        df['case_id'] = ''

    df = df[['case_id', 'k', 'sequence']].fillna('')
    for col in df.columns:
        df[col] = df[col].astype(str).str.strip()

    # case_id is the table key, so a bad one fails the upload
    given = [to_int(v, 'case_id') for v in df['case_id'] if v]
    if len(set(given)) != len(given):
        raise ValueError(f'{os.path.basename(path)} has duplicate case_id values.')
    next_id = max(given, default=0) + 1
    ids = []
    for v in df['case_id']:
        if v:
            ids.append(int(v))
        else:
            ids.append(next_id)
            next_id += 1
    df['case_id'] = ids
    return df.reset_index(drop=True)


def upload(path, eng=None):
    df = load_cases(path)

    eng = eng or get_db_connection()
    create_schema(eng)
    with eng.begin() as con:
        con.execute(text(f'DELETE FROM {INPUT_TABLE}'))

        insert_sql = text(f"""
            INSERT INTO {INPUT_TABLE}(case_id, k, sequence)
            VALUES(:case_id, :k, :sequence)
        """)
        # k goes in as text; SQLite stores "2" as an integer, "1.5" as a real and "two" as text
        records = [
            {
                'case_id': int(r['case_id']),
                'k': r['k'] or None,
                'sequence': r['sequence'],
            }
            for _, r in df.iterrows()
        ]
        if records:
            con.execute(insert_sql, records)

    print(f'Loaded {len(df)} rows into {INPUT_TABLE}')
    return len(df)


if __name__ == '__main__':
    import argparse

    ap = argparse.ArgumentParser()
    ap.add_argument('path', help='Excel or CSV file with k and sequence columns')
    args = ap.parse_args()
    upload(args.path)
