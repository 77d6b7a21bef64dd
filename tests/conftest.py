"""Shared record builders for the test suite."""


def game_result(
    player1_id, player2_id, score1=400, score2=350, round_number=1, **extra
):
    """Build a result record as the data store returns it."""
    data = {
        "round": round_number,
        "player1_id": player1_id,
        "player2_id": player2_id,
        "score1": score1,
        "score2": score2,
    }
    data.update(extra)
    return data


def pairing_record(player1_id, player2_id, **extra):
    """Build a pairing in the nested schedule shape (no round key)."""
    data = {
        "player1": {"player_id": player1_id},
        "player2": {"player_id": player2_id},
    }
    data.update(extra)
    return data
