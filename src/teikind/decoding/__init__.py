"""Datum decoding for project outputs.

This package provides:
- On-chain datum shapes (ProjectDatum, ProjectDetailDatum, ProjectScriptDatum)
- Record decoders that translate one output into a keyed record
- Address reconstruction helpers
"""

from teikind.decoding.datums import ProjectDatum, ProjectDetailDatum, ProjectScriptDatum
from teikind.decoding.decoder import (
    decode_project,
    decode_project_detail,
    decode_project_script,
    status_of,
)
from teikind.decoding.utils import deconstruct_address

__all__ = [
    "ProjectDatum",
    "ProjectDetailDatum",
    "ProjectScriptDatum",
    "decode_project",
    "decode_project_detail",
    "decode_project_script",
    "status_of",
    "deconstruct_address",
]
