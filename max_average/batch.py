import os
import numbers
import datetime
import pandas as pd
from .db_config import get_db_connection, INPUT_TABLE, RESULT_TABLE, AUDIT_TABLE
from .finder import (
    MaxAverageError,
    MalformedInput,
    best_window,
    format_average,
    parse_sequence,
    to_int,
)

"""
Batch runner.

Reads (case_id, k, sequence) rows from the input table, evaluates each one
with the same finder as the stdin path, and writes results to Excel and
back to the database. A bad case is recorded as REJECTED and does not stop
the run.
"""

RESULT_COLUMNS = [
    "case_id", "n", "k", "max_average", "output",
    "window_start", "window_length", "status", "reason",
]


def _as_int(x, what):
    if x is None or (isinstance(x, float) and pd.isna(x)):
        raise MalformedInput(f"{what} is missing")
    if isinstance(x, float):
        if not x.is_integer():
            raise MalformedInput(f"{what}: expected an integer, got {x!r}")
        return int(x)
    if isinstance(x, numbers.Integral):
        return int(x)
    return to_int(str(x).strip(), what)


def evaluate_case(case_id, k, sequence):
    row = dict.fromkeys(RESULT_COLUMNS)
    row["case_id"] = case_id
    try:
        k = _as_int(k, "k")
        row["k"] = k
        nums = parse_sequence(sequence)
        row["n"] = len(nums)
        avg, start, length = best_window(nums, k)
    except MaxAverageError as e:
        row["status"] = "REJECTED"
        row["reason"] = f"{type(e).__name__}: {e}"
        return row

    row.update(
        max_average=avg,
        output=format_average(avg),
        window_start=start,
        window_length=length,
        status="OK",
    )
    return row


def run_cases(inputs: pd.DataFrame, batch_size=200):
    """
    Evaluate every row of `inputs` (columns k, sequence and optionally
    case_id). Returns (result_df, audit_df).
    """
    inputs = inputs.copy()
    if "case_id" not in inputs.columns:
        inputs["case_id"] = range(1, len(inputs) + 1)

    batch_size = max(int(batch_size), 1)
    total = len(inputs)
    rows = []
    for start in range(0, total, batch_size):
        chunk = inputs.iloc[start : start + batch_size]
        for _, r in chunk.iterrows():
            rows.append(evaluate_case(r["case_id"], r["k"], r["sequence"]))
        print(f"Processed {min(start + batch_size, total)}/{total} cases")

    result_df = pd.DataFrame(rows, columns=RESULT_COLUMNS)
    audit_df = (
        result_df["status"]
        .value_counts()
        .rename_axis("status")
        .reset_index(name="count")
        if not result_df.empty
        else pd.DataFrame(columns=["status", "count"])
    )
    return result_df, audit_df


def main(limit=1000, excel=None, batch_size=200):
    eng = get_db_connection()

    with eng.begin() as con:
        inputs = pd.read_sql(
            "SELECT case_id, k, sequence FROM {} ORDER BY case_id LIMIT {}".format(
                INPUT_TABLE, int(limit)
            ),
            con,
        )

    result_df, audit_df = run_cases(inputs, batch_size=batch_size)

    # Excel output
    if excel:
        xls_path = excel
    else:
        out_dir = os.path.join(os.getcwd(), "outputs")
        os.makedirs(out_dir, exist_ok=True)
        timestamp = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")
        xls_path = os.path.join(out_dir, f"max_average_results_{timestamp}.xlsx")

    try:
        with pd.ExcelWriter(xls_path) as xl:
            result_df.to_excel(xl, index=False, sheet_name="results")
            audit_df.to_excel(xl, index=False, sheet_name="audit")
    except PermissionError:
        print(
            f"ERROR: Could not write to Excel file. Is '{xls_path}' open in another program?"
        )

    # Persist full result to DB
    with eng.begin() as con:
        result_df.to_sql(RESULT_TABLE, con, if_exists="replace", index=False)
        audit_df.to_sql(AUDIT_TABLE, con, if_exists="replace", index=False)

    print("Batch done: {} cases. Excel → {}".format(len(result_df), xls_path))
    return result_df
