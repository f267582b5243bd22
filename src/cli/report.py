"""Plain-text rendering of link reports and device listings."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

from domain.devices.value_objects import DeviceDefinition
from domain.link.value_objects import EndpointSummary, LinkReport, SignalEntry

INDENT = "    "

_PREFIXES = ("", "k", "M", "G", "T", "P", "E", "Z", "Y")


def format_metric(value: float) -> str:
    """Format a non-negative quantity with an SI prefix, e.g. 35.355M."""
    if value == 0 or not math.isfinite(value):
        return f"{value:g}"
    exp = int(math.floor(math.log10(abs(value)) / 3)) if abs(value) >= 1 else 0
    exp = min(exp, len(_PREFIXES) - 1)
    scaled = round(value / 1000**exp, 3)
    # Rounding can carry into the next prefix (999.9996k -> 1M)
    if abs(scaled) >= 1000 and exp < len(_PREFIXES) - 1:
        exp += 1
        scaled = round(value / 1000**exp, 3)
    text = f"{scaled:.3f}".rstrip("0").rstrip(".")
    return f"{text}{_PREFIXES[exp]}"


def format_strength(strength: float | None) -> str:
    if strength is None:
        return "NA"
    return f"{100.0 * strength:.1f} %"


def render_endpoint(endpoint: EndpointSummary) -> list[str]:
    lines = [
        f" {endpoint.endpoint_type}:",
        f" {INDENT}Power: {format_metric(endpoint.combined_power)}",
        f" {INDENT}Antennae:",
    ]
    for device in endpoint.devices:
        if device.count == 1:
            lines.append(f" {INDENT}{INDENT}{device.name}")
        else:
            lines.append(f" {INDENT}{INDENT}{device.count}x {device.name}")
    return lines


def render_table(title: str, entries: Sequence[SignalEntry]) -> list[str]:
    lines = [
        f" | {title:^25} |   @Min   |   @Max   |",
        " |:--------------------------|---------:|---------:|",
    ]
    for entry in entries:
        lines.append(
            f" | {entry.label:<25} "
            f"| {format_strength(entry.strength_at_near):>8} "
            f"| {format_strength(entry.strength_at_far):>8} |"
        )
    return lines


def render_report(report: LinkReport) -> str:
    lines = ["", " From:"]
    lines += render_endpoint(report.from_endpoint)
    lines.append(" To:")
    lines += render_endpoint(report.to_endpoint)
    lines += ["", f" Max distance: {format_metric(report.max_distance)}m"]
    if not report.range.has_link:
        lines.append(" No link: an endpoint has zero power")
    lines.append("")
    lines += render_table("Section", report.signal_table)
    if report.landmarks:
        lines.append("")
        lines += render_table("Landmark", report.landmarks)
    lines.append("")
    return "\n".join(lines)


def render_devices(devices: Iterable[DeviceDefinition]) -> str:
    lines = ["Available antennas:"]
    for device in devices:
        line = f"{INDENT}{device.name}"
        if device.aliases:
            line += f" ({', '.join(device.aliases)})"
        lines.append(line)
    return "\n".join(lines)
