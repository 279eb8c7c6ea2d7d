"""Command line inspector for chunk identifiers.

Give any one representation and get all of them back:

    $ chunkaddr --value 12345
    $ chunkaddr --form base10x10 --value 01.23.45
    $ chunkaddr --form base57 --value dr
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import Literal

import tyro  # type: ignore

from .base10x10 import format_pairs, parse_pairs
from .ids import ChunkID

logger = logging.getLogger(__name__)

Form = Literal["base10", "base10x10", "base57"]


@dataclass
class Config:
    value: str
    """Identifier in the chosen representation (dotted pairs for base10x10)."""
    form: Form = "base10"
    verbose: tyro.conf.FlagConversionOff[bool] = False


def parse_chunk(value: str, form: Form) -> ChunkID:
    if form == "base10":
        if not value.isdecimal():
            raise ValueError(f"Not a non-negative decimal integer: {value!r}")
        return ChunkID.from_base10(int(value))
    if form == "base10x10":
        return ChunkID.from_base10x10(parse_pairs(value))
    return ChunkID.from_base57(value)


def describe(chunk: ChunkID) -> list[tuple[str, str]]:
    return [
        ("base10", str(chunk.global_id_base10)),
        ("base10x10", format_pairs(chunk.global_id_base10x10)),
        ("base57", chunk.global_id_base57),
        ("scale_level", str(chunk.scale_level)),
        ("local_id", str(chunk.local_id)),
        ("cluster.base10", str(chunk.cluster_id.global_id_base10)),
        ("cluster.base57", chunk.cluster_id.global_id_base57),
    ]


def main(cfg: Config) -> int:  # noqa: D401 – CLI entry
    logging.basicConfig(
        level=logging.DEBUG if cfg.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        chunk = parse_chunk(cfg.value, cfg.form)
    except ValueError as exc:  # CodecError included
        logger.error("Cannot decode %s identifier %r: %s", cfg.form, cfg.value, exc)
        return 1

    rows = describe(chunk)
    name_w = max(len(name) for name, _ in rows)
    for name, text in rows:
        print(name.ljust(name_w), "|", text)
    return 0


def entrypoint() -> None:
    sys.exit(main(tyro.cli(Config)))


if __name__ == "__main__":
    entrypoint()
