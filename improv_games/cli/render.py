"""
Plain-text rendering of game cards and the game details view.
"""

from typing import List

from ..formatting import (
    extract_youtube_id,
    format_difficulty,
    format_duration,
    format_player_count,
    format_tag_name,
    youtube_embed_url,
)
from ..models import Game, RoleTips

RULE = "=" * 60
NO_DESCRIPTION = "No description available."


def _section(title: str) -> List[str]:
    return ["", title, "-" * len(title)]


def render_card(game: Game) -> str:
    """Render the short card shown in result lists."""
    lines = [
        f"{game.name}  [{game.id}]",
        f"  {game.category or 'Uncategorized'} • {format_difficulty(game.difficulty)} • "
        f"{format_player_count(game.player_count)}",
    ]
    if game.tags:
        lines.append("  Tags: " + ", ".join(format_tag_name(tag) for tag in game.tags))
    lines.append(f"  {game.description or NO_DESCRIPTION}")
    return "\n".join(lines)


def render_no_results() -> str:
    return "No games found\nTry adjusting your search or filters"


def render_details(game: Game) -> str:
    """Render every populated section of a game's details page."""
    lines = [
        RULE,
        game.name,
        f"{game.category or 'Uncategorized'} • {format_difficulty(game.difficulty)} • "
        f"{format_player_count(game.player_count)}",
        RULE,
    ]

    lines += _section("Game Information")
    lines.append(f"Duration: {format_duration(game.duration)}")
    lines.append(f"Difficulty: {format_difficulty(game.difficulty)}")
    lines.append(f"Audience Participation: {'Yes' if game.audience_participation else 'No'}")
    if game.audience_count:
        lines.append(f"Audience Count: {game.audience_count}")
    lines.append(f"Players: {format_player_count(game.player_count)}")
    lines.append(f"Category: {game.category or 'Uncategorized'}")
    lines.append(f"Game ID: {game.id}")
    if game.aliases:
        lines.append(f"Also Known As: {', '.join(game.aliases)}")
    if game.tags:
        lines.append("Tags: " + ", ".join(format_tag_name(tag) for tag in game.tags))

    if game.description:
        lines += _section("How to Set Up")
        lines.append(game.description)

    if game.rules:
        lines += _section("Rules")
        lines += [f"- {rule}" for rule in game.rules]

    if game.tips:
        lines += _section("Tips")
        for tip in game.tips:
            if isinstance(tip, RoleTips):
                if tip.role and tip.tips:
                    lines.append(f"{tip.role}:")
                    lines += [f"  - {text}" for text in tip.tips]
            else:
                lines.append(f"- {tip}")

    if game.examples:
        lines += _section("Examples")
        lines += [f"- {example}" for example in game.examples]

    if game.video_links:
        lines += _section("Video Examples")
        for link in game.video_links:
            video_id = extract_youtube_id(link)
            if video_id:
                lines.append(f"- {link} (embed: {youtube_embed_url(video_id)})")
            else:
                lines.append(f"- {link}")

    if game.notes:
        lines += _section("Additional Notes")
        lines += [f"- {note}" for note in game.notes]

    return "\n".join(lines)
