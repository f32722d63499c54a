"""Shard-parallel counting helpers built on the single-pass engine."""

from .sharding import analyze_sharded, count_shard, merge_partials, split_shards

__all__ = [
    "analyze_sharded",
    "count_shard",
    "merge_partials",
    "split_shards",
]
