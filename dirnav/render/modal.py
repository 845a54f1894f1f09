"""Centered framed box drawn over the listing for help and detail overlays."""

from __future__ import annotations

from ..ansi import clip_ansi, display_width, sanitize_line, truncate_with_ellipsis
from ..ui_theme import UITheme


def build_modal(
    title: str,
    body: list[str],
    width: int,
    height: int,
    theme: UITheme,
    footer_hint: str = "Press any key to continue",
) -> str:
    """Return a full-screen frame holding ``body`` inside a rounded box.

    Body lines may carry ANSI styling; they are clipped to the box interior.
    """
    modal_w = max(20, min(92, width - 4))
    modal_w = min(modal_w, max(4, width))
    modal_h = max(6, min(len(body) + 4, height - 2))
    modal_h = min(modal_h, max(3, height))
    x = max(0, (width - modal_w) // 2)
    y = max(0, (height - modal_h) // 2)
    inner_w = max(1, modal_w - 2)
    text_w = max(1, inner_w - 2)
    reset = theme.reset
    border = theme.modal_border

    out: list[str] = ["\033[2J\033[H"]
    out.append(f"\033[{y + 1};{x + 1}H{border}╭{'─' * inner_w}╮{reset}")
    for row in range(modal_h - 2):
        out.append(f"\033[{y + 2 + row};{x + 1}H{border}│{reset}{' ' * inner_w}{border}│{reset}")
    out.append(f"\033[{y + modal_h};{x + 1}H{border}╰{'─' * inner_w}╯{reset}")

    title_text = truncate_with_ellipsis(f" {sanitize_line(title)} ", max(1, inner_w - 2))
    title_x = x + 1 + max(1, (inner_w - display_width(title_text)) // 2)
    out.append(f"\033[{y + 1};{title_x + 1}H{theme.modal_title}{title_text}{reset}")

    # Last interior row is reserved for the continue hint.
    body_rows = max(0, modal_h - 3)
    for idx, line in enumerate(body[:body_rows]):
        out.append(f"\033[{y + 2 + idx};{x + 3}H{clip_ansi(line, text_w)}{reset}")

    hint = truncate_with_ellipsis(footer_hint, text_w)
    out.append(f"\033[{y + modal_h - 1};{x + 3}H{theme.help_dim}{hint}{reset}")
    return "".join(out)
