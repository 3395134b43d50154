from __future__ import annotations

import math
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


@dataclass(frozen=True)
class ReportConfig:
    output_dir: Path = Path(os.getenv("TAKEAWAY_OUTPUT_DIR", "outputs"))
    score_log_base: float = float(os.getenv("TAKEAWAY_SCORE_LOG_BASE", str(math.e)))
    dead_zone_max_restaurants: int = 3
    kapsalon_min_price: float = 1.0
    chart_top_n: int = 15
    map_center: tuple[float, float] = (52.2, 5.3)  # Netherlands
    map_zoom: float = 6.5

    @property
    def figures_dir(self) -> Path:
        return self.output_dir / "figures"

    @property
    def tables_dir(self) -> Path:
        return self.output_dir / "tables"


DEFAULT_REPORT_CONFIG = ReportConfig()
