"""
config.py

Settings for batch runs, read from config.yaml with environment overrides from .env
"""
import os
from dataclasses import dataclass
from typing import Optional

import yaml
from dotenv import load_dotenv

from .matchup_store import MAX_PER_CATEGORY

DEFAULT_CONFIG_PATH = 'config.yaml'


@dataclass
class Settings:
    runs: int = 1
    seed: Optional[int] = None
    output_dir: str = 'output'
    matchups_file: str = 'matchups.json'
    manifest_file: str = 'hand-categories.ts'
    max_per_category: int = MAX_PER_CATEGORY
    log_level: str = 'INFO'
    log_dir: str = 'logs'

    @property
    def matchups_path(self) -> str:
        return os.path.join(self.output_dir, self.matchups_file)

    @property
    def manifest_path(self) -> str:
        return os.path.join(self.output_dir, self.manifest_file)

    def validate(self):
        if self.max_per_category < 1:
            raise ValueError("max_per_category must be positive")
        if self.runs < 1:
            raise ValueError("runs must be positive")


def load_settings(path: Optional[str] = None) -> Settings:
    """
    Load settings from YAML. A missing file yields the defaults.
    MATCHUP_CONFIG picks the file, MATCHUP_OUTPUT_DIR overrides the output directory.
    """
    load_dotenv()
    path = path or os.getenv('MATCHUP_CONFIG', DEFAULT_CONFIG_PATH)

    config = {}
    if os.path.exists(path):
        with open(path, 'r', encoding='utf-8') as f:
            config = yaml.safe_load(f) or {}

    simulation = config.get('simulation', {}) or {}
    store = config.get('store', {}) or {}
    logging_cfg = config.get('logging', {}) or {}
    defaults = Settings()

    settings = Settings(
        runs=int(simulation.get('runs', defaults.runs)),
        seed=simulation.get('seed', defaults.seed),
        output_dir=os.getenv('MATCHUP_OUTPUT_DIR') or store.get('output_dir', defaults.output_dir),
        matchups_file=store.get('matchups_file', defaults.matchups_file),
        manifest_file=store.get('manifest_file', defaults.manifest_file),
        max_per_category=int(store.get('max_per_category', defaults.max_per_category)),
        log_level=str(logging_cfg.get('level', defaults.log_level)),
        log_dir=logging_cfg.get('log_dir', defaults.log_dir),
    )
    settings.validate()
    return settings
