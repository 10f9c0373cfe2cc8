"""Plain-text rendering of a decoded bundle for the command-line host."""

from __future__ import annotations

from typing import List

from .config import DEFAULT_PCODE_PREVIEW
from .model import HrbBody


def _hex_preview(data: memoryview | bytes, limit: int) -> str:
    head = bytes(data[:limit])
    text = head.hex(" ")
    if len(data) > limit:
        text += " ..."
    return text


def describe(body: HrbBody, pcode_preview: int = DEFAULT_PCODE_PREVIEW) -> str:
    lines: List[str] = [f"HRB version {body.version:#06x}"]

    lines.append(f"Symbols ({len(body.symbols)}):")
    for idx, symbol in enumerate(body.symbols):
        flags = ",".join(symbol.scope.flag_names()) or "-"
        marker = "  <startup>" if idx == body.startup_symbol else ""
        lines.append(
            f"  [{idx}] {symbol.name_text():<24} {symbol.symbol_type.name:<9} "
            f"scope={symbol.scope.to_byte():#04x} ({flags}){marker}"
        )

    lines.append(f"Functions ({len(body.functions)}):")
    for idx, function in enumerate(body.functions):
        line = f"  [{idx}] {function.name_text():<24} {len(function.pcode)} bytes"
        if pcode_preview and len(function.pcode):
            line += f"  {_hex_preview(function.pcode, pcode_preview)}"
        lines.append(line)

    if body.startup_symbol is None:
        lines.append("No startup symbol")
    return "\n".join(lines)


__all__ = ["describe"]
