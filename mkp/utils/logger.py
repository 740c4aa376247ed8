# -*- coding: utf-8 -*-
"""
Logging setup for entry points.

Library modules only call logging.getLogger(__name__); handlers are attached
once, here, by whichever script runs the solver.
"""

from __future__ import annotations
import logging
import os
import sys
from datetime import datetime
from typing import Optional


def setup_logger(run_name: str, log_dir: Optional[str] = None, level: int = logging.INFO) -> None:
    """
    Configure the root logger for the whole application.
    Call once at the entry point; later calls are no-ops.

    - console handler: `level` and above, short format
    - file handler (only if `log_dir` is given): DEBUG and above, one
      timestamped file per run
    """
    logger = logging.getLogger()
    if logger.hasHandlers():
        return

    logger.setLevel(logging.DEBUG if log_dir else level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(
        "%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    logger.addHandler(console_handler)

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_filepath = os.path.join(log_dir, f"{run_name}_{timestamp}.log")

        file_handler = logging.FileHandler(log_filepath, mode="w", encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s"
        ))
        logger.addHandler(file_handler)
        logger.info("Logger initialized. All subsequent logs will be saved to: %s", log_filepath)
