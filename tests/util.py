# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations

from pathlib import Path

FIXTURES_DIR = Path(__file__).parent / "fixtures"
DISTRIBUTION_JSON = FIXTURES_DIR / "distribution.json"
DISTRIBUTION_YAML = FIXTURES_DIR / "distribution.yml"
CONFIG_YAML = FIXTURES_DIR / "config.yml"
