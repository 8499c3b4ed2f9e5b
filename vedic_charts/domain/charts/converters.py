from typing import Any, Dict

from vedic_charts.domain.charts.schemas import VedicCharts


# ─────────────────────────────────────────────
# Domain → JSON
# ─────────────────────────────────────────────

def vedic_charts_to_payload(charts: VedicCharts) -> Dict[str, Any]:
    """
    Convert VedicCharts into the JSON shape consumed by chat/UI layers:
    {"meta": {...}, "D1": {...}, "D9": {...}} with camelCase fields.
    """
    return charts.model_dump(mode="json", by_alias=True)


# ─────────────────────────────────────────────
# JSON → Domain
# ─────────────────────────────────────────────

def vedic_charts_from_payload(payload: Dict[str, Any]) -> VedicCharts:
    """
    Rebuild VedicCharts from a previously exported payload.
    """
    return VedicCharts.model_validate(payload)
