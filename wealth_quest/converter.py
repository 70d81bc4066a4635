from wealth_quest.domain.game_state import GameState
from wealth_quest.models.dc_models import ScoreInputModel


class DataConverter:
    """This class is used to convert data between different formats."""

    def convert_gamestate_to_scoreinput(self, state: GameState, player_name: str) -> ScoreInputModel:
        """Convert a finished GameState to the payload stored on the leaderboard

        Args:
            state (GameState): The state of the finished game
            player_name (str): Name entered on the win screen

        Returns:
            ScoreInputModel: The score submission for the leaderboard store
        """
        return ScoreInputModel(
            player_name=player_name,
            score=state.score,
            tier=state.tier.value,
            passive_income=state.passive_income,
            streak=state.streak,
            best_streak=state.best_streak,
            coins=state.coins,
            xp=state.xp,
        )
