import json
import os
from typing import Any, Dict, List, Optional

import pandas as pd

PUZZLE_FIELDS = ("puzzle", "quizzes", "grid", "board", "question", "input")


def load_puzzles(file_path: str) -> List[Dict[str, Any]]:
    """
    Reads puzzles from a file. Handles .txt, .json, .jsonl, .csv and .parquet.
    Returns a list of {"id": ..., "puzzle": ...} records where "puzzle" is
    either an 81-character line or a 9-line grid block.
    """
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"File not found: {file_path}")

    stem = os.path.splitext(os.path.basename(file_path))[0]

    def _is_nonempty_str(value: Any) -> bool:
        return isinstance(value, str) and value.strip() != ""

    def _coerce_nested(value: Any) -> Any:
        # Parquet list columns come back as (nested) numpy arrays.
        if hasattr(value, "tolist"):
            value = value.tolist()
        if isinstance(value, (list, tuple)):
            return [_coerce_nested(v) for v in value]
        return value

    def _extract_puzzle_text(record: Dict[str, Any]) -> Optional[str]:
        for key in PUZZLE_FIELDS:
            value = _coerce_nested(record.get(key))
            if _is_nonempty_str(value):
                return value.strip("\r\n")
            # 9x9 nested lists in JSON or Parquet payloads.
            if isinstance(value, list) and len(value) == 9:
                return "\n".join(
                    "".join(str(v) if v else "." for v in row) for row in value
                )
        return None

    def _normalize(records: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        result = []
        for index, record in enumerate(records, start=1):
            puzzle_text = _extract_puzzle_text(record)
            if puzzle_text is None:
                continue
            pid = record.get("id")
            result.append({
                "id": str(pid) if pid is not None and str(pid) != "" else f"{stem}-{index}",
                "puzzle": puzzle_text,
            })
        return result

    # Case 1: Parquet / CSV (tabular, one puzzle per row)
    if file_path.endswith(".parquet") or file_path.endswith(".csv"):
        if file_path.endswith(".parquet"):
            df = pd.read_parquet(file_path)
        else:
            # Keep leading zeros and "." placeholders intact.
            df = pd.read_csv(file_path, dtype=str, keep_default_na=False)
        return _normalize(df.to_dict(orient="records"))

    # Case 2: JSON File (array or object)
    if file_path.endswith(".json"):
        with open(file_path, "r", encoding="utf-8") as f:
            payload = json.load(f)
        if isinstance(payload, list):
            return _normalize([p for p in payload if isinstance(p, dict)])
        if isinstance(payload, dict):
            return _normalize([payload])
        return []

    # Case 3: JSONL File
    if file_path.endswith(".jsonl"):
        data = []
        with open(file_path, "r", encoding="utf-8") as f:
            for line in f:
                if not line.strip():
                    continue
                obj = json.loads(line)
                if isinstance(obj, dict):
                    data.append(obj)
        return _normalize(data)

    # Case 4: plain text, one 81-char puzzle per line or 9-line blocks
    # separated by blank lines.
    with open(file_path, "r", encoding="utf-8") as f:
        content = f.read()

    blocks: List[str] = []
    current: List[str] = []
    for line in content.splitlines():
        if not line.strip():
            if current:
                blocks.append("\n".join(current))
                current = []
            continue
        if len(line.strip()) == 81 and not current:
            blocks.append(line.strip())
            continue
        current.append(line)
    if current:
        blocks.append("\n".join(current))

    return _normalize([{"puzzle": block} for block in blocks])
