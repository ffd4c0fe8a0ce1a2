from schemas import ProgressStatus
from compute.rounding import ratio_percent

WARNING_THRESHOLD = 70
DANGER_THRESHOLD = 100


def calculate_progress(spent: int, target: int) -> int:
    """
    Percentage of target spent so far.

    Returns 0 when target <= 0. The result is not capped, so overspending
    shows up as values above 100.
    """
    if target <= 0:
        return 0
    return ratio_percent(spent, target)


def progress_status(percentage: int) -> ProgressStatus:
    """Classify a progress percentage into safe / warning / danger."""
    if percentage < WARNING_THRESHOLD:
        return ProgressStatus.SAFE
    if percentage < DANGER_THRESHOLD:
        return ProgressStatus.WARNING
    return ProgressStatus.DANGER


def progress_bar_width(percentage: int) -> int:
    """Progress clamped to 0..100 for drawing a bar."""
    return max(0, min(percentage, 100))
