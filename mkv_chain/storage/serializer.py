# mkv_chain/storage/serializer.py
# Lossless JSON encoding of Vector, SquareMatrix and MarkovChain.
#
# SER-01: Every float is written with float.hex() (lossless IEEE 754).
# SER-02: +0.0, -0.0, +inf, -inf and NaN each encode to a distinct string.
# SER-03: Field-for-field encoding. A matrix is written as its list of stored
#         columns (column-major), exactly as held in memory.
# SER-04: Every document carries "format_version" and "kind". Loading a
#         document with another format_version or an unexpected kind is a
#         hard failure (SerializationError).

import json
import math
from pathlib import Path
from typing import Any, Dict, List, Union

from mkv_chain.core.markov_chain import MarkovChain
from mkv_chain.linalg import LinalgError, SquareMatrix, Vector
from mkv_chain.utils.constants import STORAGE_FORMAT_VERSION


KIND_VECTOR: str = "vector"
KIND_MATRIX: str = "matrix"
KIND_CHAIN:  str = "chain"

Serializable = Union[Vector, SquareMatrix, MarkovChain]


class SerializationError(ValueError):
    """Raised on malformed, corrupt or version-mismatched payloads."""


# ---------------------------------------------------------------------------
# Floats
# ---------------------------------------------------------------------------

def _serialize_float(value: float) -> str:
    """SER-01 / SER-02."""
    if math.isnan(value):
        return "nan"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    return value.hex()


def _deserialize_float(value: Any) -> float:
    if not isinstance(value, str):
        raise SerializationError(
            f"DATA_CORRUPTION: expected hex float string, got {type(value).__name__}"
        )
    if value == "nan":
        return float("nan")
    if value == "inf":
        return float("inf")
    if value == "-inf":
        return float("-inf")
    try:
        return float.fromhex(value)
    except ValueError:
        raise SerializationError(
            f"DATA_CORRUPTION: '{value}' is not a hex float literal"
        ) from None


def _float_list(values: Any, field: str) -> List[float]:
    if not isinstance(values, list):
        raise SerializationError(
            f"DATA_CORRUPTION: field '{field}' must be a list"
        )
    return [_deserialize_float(v) for v in values]


# ---------------------------------------------------------------------------
# Dict encoders / decoders
# ---------------------------------------------------------------------------

def vector_to_dict(vector: Vector) -> Dict[str, Any]:
    return {"data": [_serialize_float(x) for x in vector]}


def vector_from_dict(payload: Dict[str, Any]) -> Vector:
    if not isinstance(payload, dict) or "data" not in payload:
        raise SerializationError("DATA_CORRUPTION: vector payload missing 'data'")
    return Vector(_float_list(payload["data"], "data"))


def matrix_to_dict(matrix: SquareMatrix) -> Dict[str, Any]:
    return {"columns": [vector_to_dict(col)["data"] for col in matrix]}


def matrix_from_dict(payload: Dict[str, Any]) -> SquareMatrix:
    if not isinstance(payload, dict) or "columns" not in payload:
        raise SerializationError("DATA_CORRUPTION: matrix payload missing 'columns'")
    columns = payload["columns"]
    if not isinstance(columns, list):
        raise SerializationError("DATA_CORRUPTION: field 'columns' must be a list")
    decoded = [
        _float_list(col, "columns[" + str(i) + "]") for i, col in enumerate(columns)
    ]
    try:
        return SquareMatrix.from_columns(decoded)
    except LinalgError as exc:
        raise SerializationError("DATA_CORRUPTION: " + exc.message) from exc


def chain_to_dict(chain: MarkovChain) -> Dict[str, Any]:
    return {
        "trans": matrix_to_dict(chain.trans),
        "init":  vector_to_dict(chain.init),
    }


def chain_from_dict(payload: Dict[str, Any]) -> MarkovChain:
    if not isinstance(payload, dict) or "trans" not in payload or "init" not in payload:
        raise SerializationError(
            "DATA_CORRUPTION: chain payload requires 'trans' and 'init'"
        )
    trans = matrix_from_dict(payload["trans"])
    init = vector_from_dict(payload["init"])
    try:
        return MarkovChain(trans, init)
    except LinalgError as exc:
        raise SerializationError("DATA_CORRUPTION: " + exc.message) from exc


_ENCODERS = {
    Vector:       (KIND_VECTOR, vector_to_dict),
    SquareMatrix: (KIND_MATRIX, matrix_to_dict),
    MarkovChain:  (KIND_CHAIN, chain_to_dict),
}

_DECODERS = {
    KIND_VECTOR: vector_from_dict,
    KIND_MATRIX: matrix_from_dict,
    KIND_CHAIN:  chain_from_dict,
}


# ---------------------------------------------------------------------------
# Documents
# ---------------------------------------------------------------------------

def to_document(obj: Serializable) -> Dict[str, Any]:
    """Wrap obj in the versioned envelope (SER-04)."""
    entry = _ENCODERS.get(type(obj))
    if entry is None:
        raise SerializationError(
            f"Cannot serialize object of type {type(obj).__name__}"
        )
    kind, encode = entry
    return {
        "format_version": STORAGE_FORMAT_VERSION,
        "kind":           kind,
        "payload":        encode(obj),
    }


def from_document(document: Dict[str, Any], expect_kind: str = "") -> Serializable:
    """
    Validate the envelope and decode its payload.

    If expect_kind is given, a document of another kind is rejected.
    """
    if not isinstance(document, dict):
        raise SerializationError("DATA_CORRUPTION: document must be a JSON object")
    version = document.get("format_version")
    if version != STORAGE_FORMAT_VERSION:
        raise SerializationError(
            f"FORMAT_MISMATCH: format_version '{version}' != '{STORAGE_FORMAT_VERSION}'"
        )
    kind = document.get("kind")
    decode = _DECODERS.get(kind) if isinstance(kind, str) else None
    if decode is None:
        raise SerializationError(f"DATA_CORRUPTION: unknown kind '{kind}'")
    if expect_kind and kind != expect_kind:
        raise SerializationError(
            f"KIND_MISMATCH: expected '{expect_kind}', found '{kind}'"
        )
    return decode(document.get("payload"))


def dumps(obj: Serializable, indent: int = 2) -> str:
    return json.dumps(to_document(obj), indent=indent)


def loads(text: str, expect_kind: str = "") -> Serializable:
    try:
        document = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SerializationError(f"DATA_CORRUPTION: invalid JSON ({exc.msg})") from exc
    return from_document(document, expect_kind=expect_kind)


def save(obj: Serializable, path: Path) -> Path:
    """Write obj to path as a JSON document. Parent directories are created."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(dumps(obj))
    return path


def load(path: Path, expect_kind: str = "") -> Serializable:
    with open(Path(path), "r", encoding="utf-8") as f:
        return loads(f.read(), expect_kind=expect_kind)
