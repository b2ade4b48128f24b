from scorecard.course import course_config
from scorecard.models import Game


def build_leaderboard(game: Game) -> list:
    """Rank players by score relative to par, then by total strokes.

    Par is summed over the holes a player actually has scores for, so a
    player who skipped ahead is compared against the right holes.
    """
    pars = course_config(game.course_type)['pars']
    by_player = {p.id: [] for p in game.players}
    for s in game.scores:
        if s.player_id in by_player:
            by_player[s.player_id].append(s)

    rows = []
    for player in game.players:
        player_scores = by_player[player.id]
        total_strokes = sum(s.strokes for s in player_scores)
        total_par = sum(pars[s.hole - 1] for s in player_scores)
        rows.append({
            'player': player.to_dict(),
            'totalStrokes': total_strokes,
            'holesCompleted': len(player_scores),
            'relativeToPar': total_strokes - total_par,
        })

    rows.sort(key=lambda r: (r['relativeToPar'], r['totalStrokes']))
    return rows
