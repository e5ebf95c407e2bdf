"""Text rendering for the console game.

Every function here is pure: it turns cards and scores into the lines the
console prints, and never touches the match state.
"""

from indigo.models.card import Card, format_cards
from indigo.models.enums import Participant
from indigo.models.score import ScoreBoard

BANNER = "Indigo Card Game"
GAME_OVER = "Game Over"
PLAY_FIRST_PROMPT = "Play first?"


def render_initial_table(cards: list[Card]) -> str:
    """Render the cards dealt to the table at match start."""
    return f"Initial cards on the table: {format_cards(cards)}"


def render_table(cards: list[Card]) -> str:
    """Render the table summary shown before every turn."""
    if not cards:
        return "No cards on the table"
    return f"{len(cards)} cards on the table, and the top card is {cards[-1]}"


def render_hand(cards: list[Card]) -> str:
    """Render the human's hand with 1-based indexes."""
    numbered = " ".join(f"{i}){card}" for i, card in enumerate(cards, start=1))
    return f"Cards in hand: {numbered}"


def render_card_prompt(hand_size: int) -> str:
    """Render the prompt asking the human for a card."""
    return f"Choose a card to play (1-{hand_size}):"


def render_computer_turn(cards: list[Card], played: Card, computer_name: str) -> str:
    """Render the computer's hand and the card it chose."""
    return f"{format_cards(cards)}\n{computer_name} plays {played}"


def render_capture(name: str) -> str:
    """Render the announcement of a capture."""
    return f"{name} wins cards"


def render_scores(board: ScoreBoard, names: dict[Participant, str]) -> str:
    """Render the score and captured-card lines."""
    human = names[Participant.HUMAN]
    computer = names[Participant.COMPUTER]
    return (
        f"Score: {human} {board.points[Participant.HUMAN]} - "
        f"{computer} {board.points[Participant.COMPUTER]}\n"
        f"Cards: {human} {board.cards[Participant.HUMAN]} - "
        f"{computer} {board.cards[Participant.COMPUTER]}"
    )
