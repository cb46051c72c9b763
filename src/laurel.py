"""Public SDK surface for Laurel.

This module provides a stable import path for scripts and notebooks.
It re-exports the client, the typed models, and the core pipeline steps.
"""

from __future__ import annotations

from core.config import LaurelConfig
from core.errors import LaurelError, LaurelNoDataError
from core.types import AdvisorRecord, CompactSnapshot, PreviousSnapshot, RunOptions, RunReport
from ingest.merge_controller import acquire_publication
from ingest.pipeline import RankingsPipelineRunner, update_rankings
from store.rankings_sdk import LaurelClient
from transforms.columnar_encoding import decode_records, encode_records
from transforms.year_over_year import build_previous_snapshot, flag_new_entrants

__all__ = [
    "AdvisorRecord",
    "CompactSnapshot",
    "LaurelClient",
    "LaurelConfig",
    "LaurelError",
    "LaurelNoDataError",
    "PreviousSnapshot",
    "RankingsPipelineRunner",
    "RunOptions",
    "RunReport",
    "acquire_publication",
    "build_previous_snapshot",
    "decode_records",
    "encode_records",
    "flag_new_entrants",
    "update_rankings",
]
