"""Runtime configuration from the environment and an optional .env file."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

DEFAULT_DATA_FILE = "weekly_planner.json"
DEFAULT_EXPORT_FILE = "weekly_planner.csv"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class PlannerConfig:
    data_file: str = DEFAULT_DATA_FILE
    export_file: str = DEFAULT_EXPORT_FILE
    log_level: str = DEFAULT_LOG_LEVEL


def load_config(environ: Optional[Mapping[str, str]] = None) -> PlannerConfig:
    """Build the configuration from ``environ`` (default: process env plus .env)."""

    if environ is None:
        load_dotenv(override=False)
        environ = os.environ

    return PlannerConfig(
        data_file=environ.get("WEEKLY_PLANNER_DATA_FILE") or DEFAULT_DATA_FILE,
        export_file=environ.get("WEEKLY_PLANNER_EXPORT_FILE") or DEFAULT_EXPORT_FILE,
        log_level=(environ.get("WEEKLY_PLANNER_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
    )
