"""Skip reason color map."""

from helmfile_deps.models import SkipReason

SKIP_REASON_COLORS: dict[SkipReason, str] = {
    SkipReason.LOCAL_CHART: "dim",
    SkipReason.UNSUPPORTED_CHART_TYPE: "yellow",
    SkipReason.UNKNOWN_REPOSITORY: "red",
    SkipReason.INVALID_NAME: "red bold",
    SkipReason.INVALID_VERSION: "yellow",
}


def styled_skip_reason(reason: SkipReason | None) -> str:
    if reason is None:
        return "[green]tracked[/green]"
    color = SKIP_REASON_COLORS.get(reason, "white")
    return f"[{color}]{reason.value}[/{color}]"
