"""Cut list invariant checks."""

from collections.abc import Mapping, Sequence
from typing import Any

from autocam.models.cuts import Cut, ValidationReport

FIELDS = ("start_time", "end_time", "camera")


def _describe_cameras(cameras: Sequence[int]) -> str:
    names = [str(c) for c in cameras]
    if len(names) <= 2:
        return " or ".join(names)
    return f"{', '.join(names[:-1])}, or {names[-1]}"


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class CutValidator:
    """Reports every broken invariant of a cut list instead of stopping at the first."""

    def __init__(self, camera_count: int = 3):
        self.valid_cameras = list(range(1, camera_count + 1))

    def validate(self, cuts: Any) -> ValidationReport:
        if isinstance(cuts, (str, bytes)) or not isinstance(cuts, Sequence):
            return ValidationReport(valid=False, errors=["Cuts must be a list"])

        errors: list[str] = []
        prev_end: float | None = None

        for i, cut in enumerate(cuts):
            values = self._fields(cut)
            for name in FIELDS:
                if values[name] is None:
                    errors.append(f"Cut {i}: missing {name}")
                elif not _is_number(values[name]):
                    errors.append(f"Cut {i}: {name} must be a number")

            start = values["start_time"] if _is_number(values["start_time"]) else None
            end = values["end_time"] if _is_number(values["end_time"]) else None
            camera = values["camera"]

            if start is not None and start < 0:
                errors.append(f"Cut {i}: start_time cannot be negative")
            if start is not None and end is not None and end < start:
                errors.append(f"Cut {i}: end_time must be >= start_time")
            if camera not in self.valid_cameras or not _is_number(camera):
                errors.append(
                    f"Cut {i}: camera must be {_describe_cameras(self.valid_cameras)}"
                )
            if i > 0 and start is not None and prev_end is not None and start < prev_end:
                errors.append(f"Cut {i}: overlaps with previous cut")

            prev_end = end

        return ValidationReport(valid=not errors, errors=errors)

    @staticmethod
    def _fields(cut: Any) -> dict[str, Any]:
        if isinstance(cut, Cut):
            return cut.model_dump()
        if isinstance(cut, Mapping):
            return {name: cut.get(name) for name in FIELDS}
        return {name: getattr(cut, name, None) for name in FIELDS}
