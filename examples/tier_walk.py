"""Walk across tier boundaries and print every representation.

Shows how the pair count (scale level) grows exactly when the canonical
integer crosses ``100 + 100² + … + 100ᵏ``, and how the cluster of a chunk is
its integer with the last digit pair dropped.

    $ python examples/tier_walk.py --tiers 4
"""

from __future__ import annotations

from dataclasses import dataclass

import tyro  # type: ignore

from chunkaddr import ChunkID, base10x10_codec, format_pairs


@dataclass
class Config:
    tiers: int = 3
    """Number of tier boundaries to visit."""


def main(cfg: Config) -> None:
    codec = base10x10_codec()
    header = f"{'base10':>12} | {'scale':>5} | {'base10x10':<14} | {'local':>5} | cluster"
    print(header)
    print("-" * len(header))
    for boundary in codec.power_sums[: cfg.tiers]:
        for n in (boundary - 1, boundary):
            chunk = ChunkID.from_base10(n)
            print(
                f"{n:>12} | {chunk.scale_level:>5} | {format_pairs(chunk.global_id_base10x10):<14} | "
                f"{chunk.local_id:>5} | {chunk.cluster_id.global_id_base10}"
            )


if __name__ == "__main__":
    main(tyro.cli(Config))
