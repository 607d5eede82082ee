from __future__ import annotations

from pathlib import Path
from typing import TypeVar

import orjson
from pydantic import BaseModel

ModelT = TypeVar("ModelT", bound=BaseModel)


def _snapshot_paths(filename_base: str | Path) -> tuple[Path, Path]:
    base = Path(filename_base)
    return base.with_name(f"{base.name}.txt"), base.with_name(f"{base.name}.bin")


def save_snapshot(message: BaseModel, filename_base: str | Path) -> tuple[Path, Path]:
    """Write ``message`` next to itself as ``<base>.txt`` (readable) and ``<base>.bin`` (compact)."""
    txt_path, bin_path = _snapshot_paths(filename_base)
    txt_path.parent.mkdir(parents=True, exist_ok=True)

    payload = message.model_dump(mode="json")
    txt_path.write_text(message.model_dump_json(indent=2) + "\n", encoding="utf-8")
    bin_path.write_bytes(orjson.dumps(payload))
    return txt_path, bin_path


def load_snapshot(model_cls: type[ModelT], filename_base: str | Path) -> ModelT:
    _, bin_path = _snapshot_paths(filename_base)
    return model_cls.model_validate(orjson.loads(bin_path.read_bytes()))
