# Caller-misuse errors raised by the match controller.
# None of them leave the match partially updated.


class LudoError(Exception):
    """Base exception for rejected intents."""

    pass


class InvalidPlayerCount(LudoError):
    """Raised when a match is created with a player count outside 2-4."""

    def __init__(self, num_players):
        super().__init__(f"A match needs 2-4 players, got {num_players}")
        self.num_players = num_players


class NotAwaitingRoll(LudoError):
    """Raised when the dice are rolled outside the roll phase."""

    pass


class NotAwaitingMove(LudoError):
    """Raised when a token is selected outside the move phase."""

    pass


class IllegalSelection(LudoError):
    """Raised when the selected token cannot play the pending roll."""

    def __init__(self, token_id, legal_token_ids):
        super().__init__(
            f"Token {token_id} cannot move; legal tokens: {list(legal_token_ids)}"
        )
        self.token_id = token_id
        self.legal_token_ids = tuple(legal_token_ids)
