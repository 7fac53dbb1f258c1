# ABOUTME: UV index severity helpers for the dashboard UV badge.
# ABOUTME: Keeps the colour buckets and the text label table as two separate threshold sets.

from enum import Enum


class UVSeverity(str, Enum):
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    VERY_HIGH = "very-high"
    EXTREME = "extreme"

    @property
    def css_class(self) -> str:
        return f"uv-{self.value}"


def get_uv_index_color(index: float) -> UVSeverity:
    """Bucket a UV index into a severity colour. Upper bounds are inclusive."""
    if index <= 2:
        return UVSeverity.LOW
    if index <= 5:
        return UVSeverity.MODERATE
    if index <= 7:
        return UVSeverity.HIGH
    if index <= 10:
        return UVSeverity.VERY_HIGH
    return UVSeverity.EXTREME


def get_uv_index_label(index: float) -> str:
    """Text label shown next to the UV value. Upper bounds are exclusive and there is no extreme label."""
    if index < 2:
        return "Low"
    if index < 5:
        return "Moderate"
    if index < 7:
        return "High"
    return "Very High"
