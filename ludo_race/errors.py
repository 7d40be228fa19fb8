# Exception types raised by the rules engine and its collaborators.
class LudoError(Exception):
    """Base exception for rules engine errors."""

    pass


class MatchSetupError(LudoError):
    """Raised when a match is constructed from inconsistent inputs."""

    pass


class IllegalMoveError(LudoError):
    """Raised when a strategy picks a move that was not offered."""

    pass


class StrategyBindingError(LudoError):
    """Raised when a player-bound strategy decides for another player."""

    pass


class PlyInProgressError(LudoError):
    """Raised when a ply is started while another one is awaiting a decision."""

    pass


class MatchFinishedError(LudoError):
    """Raised when a ply is requested after a player has already won."""

    pass


class DieExhaustedError(LudoError):
    """Raised when a scripted die has no rolls left."""

    pass


class UnknownCompartmentError(LudoError):
    """Raised when a position outside reserve/path/home reaches a translation boundary."""

    pass


class UnknownStrategyError(LudoError, KeyError):
    """Raised when the registry is asked for a strategy name it does not know."""

    pass
