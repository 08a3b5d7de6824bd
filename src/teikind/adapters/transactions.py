"""JSON transaction documents → `ChainTransaction`.

Expected document::

    {
      "id": "<tx hash hex>",
      "outputs": [
        {"id": 42, "assets": {"<unit>": 1},
         "datum": "<cbor hex>", "script_hash": "<hex>"}
      ],
      "mint": {"<unit>": -1}
    }
"""

import json
from pathlib import Path

from pydantic import BaseModel, ValidationError

from teikind.core.errors import TransactionFormatError
from teikind.core.models import ChainOutput, ChainTransaction


class OutputDoc(BaseModel):
    id: int
    assets: dict[str, int] | None = None
    datum: str | None = None
    script_hash: str | None = None


class TransactionDoc(BaseModel):
    id: str
    outputs: list[OutputDoc] = []
    mint: dict[str, int] = {}


def _units(assets: dict[str, int] | None) -> dict[str, int] | None:
    if assets is None:
        return None
    return {unit.lower(): qty for unit, qty in assets.items()}


def transaction_from_doc(doc: TransactionDoc) -> ChainTransaction:
    try:
        outputs = tuple(
            ChainOutput(
                id=o.id,
                tx_id=doc.id,
                index=index,
                assets=_units(o.assets),
                datum=bytes.fromhex(o.datum) if o.datum is not None else None,
                script_hash=o.script_hash.lower() if o.script_hash is not None else None,
            )
            for index, o in enumerate(doc.outputs)
        )
    except ValueError as e:
        raise TransactionFormatError(f"invalid datum hex in tx {doc.id}: {e}") from e
    return ChainTransaction(id=doc.id, outputs=outputs, mint=_units(doc.mint) or {})


def load_transaction(path: str | Path) -> ChainTransaction:
    """Read and validate a JSON transaction document."""
    try:
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
        doc = TransactionDoc.model_validate(raw)
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        raise TransactionFormatError(f"invalid transaction file {path}: {e}") from e
    return transaction_from_doc(doc)
