"""Game constants for Indigo."""

# Deck
DECK_SIZE = 52

# Dealing
STARTING_TABLE = 4
STARTING_HAND = 6

# Scoring
MOST_CARDS_BONUS = 3

# Heuristic: below this many suit matches the bot also considers rank matches
MIN_SUIT_CANDIDATES = 2
