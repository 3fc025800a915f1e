"""Terminal UI utilities for topic selection."""

from __future__ import annotations

import questionary

from topiccat.cli.common.tui_style import QUESTIONARY_STYLE_SELECT

_MAX_TOPIC_NAME_WIDTH = 96


def _truncate(text: str, max_len: int) -> str:
    """Return text capped at max_len characters using an ASCII ellipsis."""
    if max_len <= 3 or len(text) <= max_len:
        return text[:max_len]
    return f"{text[: max_len - 3]}..."


def _topic_choice_title(topic: str, *, index: int, name_width: int) -> str:
    """Format one topic choice as `<name>  (#<index>)` with aligned index column."""
    short_name = _truncate(topic, _MAX_TOPIC_NAME_WIDTH)
    return f"{short_name.ljust(name_width)}  (#{index})"


def select_topics(topics: list[str]) -> list[str]:
    """Display a checkbox prompt to select topics from a list.

    Args:
        topics: Topic names to choose from.

    Returns:
        The selected topic names, or an empty list if none selected.
    """
    shown_names = [_truncate(topic, _MAX_TOPIC_NAME_WIDTH) for topic in topics]
    name_width = max((len(name) for name in shown_names), default=0)

    choices = [
        questionary.Choice(
            title=_topic_choice_title(topic, index=idx, name_width=name_width),
            value=topic,
        )
        for idx, topic in enumerate(topics, start=1)
    ]

    return (
        questionary.checkbox(
            "Select topics:",
            choices=choices,
            style=QUESTIONARY_STYLE_SELECT,
        ).ask()
        or []
    )
