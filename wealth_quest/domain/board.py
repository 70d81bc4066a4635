"""Board tiles of the Wealth Quest ring."""

from dataclasses import dataclass
from enum import Enum


class Tier(str, Enum):
    kids = "kids"
    teens = "teens"
    adults = "adults"


class TileType(str, Enum):
    start = "start"
    trivia = "trivia"
    decision = "decision"
    invest = "invest"
    risk = "risk"


@dataclass(frozen=True)
class Tile:
    id: int
    label: str
    type: TileType


TILES = (
    Tile(1, "Start: Payday", TileType.start),
    Tile(2, "Budget Basics", TileType.trivia),
    Tile(3, "Start a Business", TileType.decision),
    Tile(4, "High-Yield Savings", TileType.trivia),
    Tile(5, "Real Estate Deal", TileType.invest),
    Tile(6, "Bank Loan / Line of Credit", TileType.decision),
    Tile(7, "Stocks / ETFs", TileType.invest),
    Tile(8, "Crypto Volatility", TileType.risk),
    Tile(9, "Foreclosure / Refinance / HELOC", TileType.risk),
    Tile(10, "Estate Planning / Trust", TileType.trivia),
    Tile(11, "Tax Liens / Tax Deeds", TileType.trivia),
    Tile(12, "Goal Setting & Review", TileType.decision),
)

BOARD_SIZE = len(TILES)

_TILES_BY_ID = {tile.id: tile for tile in TILES}


def get_tile(tile_id: int) -> Tile:
    """Return the tile with the given id.

    Raises:
        KeyError: The id is not on the board.
    """
    try:
        return _TILES_BY_ID[tile_id]
    except KeyError:
        raise KeyError(f"Unknown tile id: {tile_id}") from None
