"""Expired-game sweep.

Games that never reach ``completed`` are deleted (with their players,
scores and photos) once they are older than ``GAME_EXPIRY_HOURS``. The
sweep is idempotent, so running it from several places at once only
wastes work. In a multi-instance deployment set
``ENABLE_CLEANUP_SCHEDULER=false`` and call ``flask cleanup-games`` from
an external scheduler instead.
"""

from datetime import datetime, timedelta
from typing import Optional

from scorecard import db, socketio
from scorecard.models import Game, utcnow


_scheduler_state = {'running': False, 'stop': False}


def delete_expired_games(max_age_hours: float = 5, now: Optional[datetime] = None) -> int:
    cutoff = (now or utcnow()) - timedelta(hours=max_age_hours)
    expired = Game.query.filter(Game.status != 'completed', Game.created_at < cutoff).all()
    if not expired:
        return 0
    for game in expired:
        db.session.delete(game)
    db.session.commit()
    return len(expired)


def run_cleanup(app) -> int:
    """One sweep with logging; failures are logged and reported as zero deletions."""
    with app.app_context():
        try:
            hours = float(app.config.get('GAME_EXPIRY_HOURS', 5))
            deleted = delete_expired_games(max_age_hours=hours)
        except Exception as exc:
            db.session.rollback()
            app.logger.error(f"[cleanup-error] {exc}")
            return 0
        if deleted:
            app.logger.info(f"[cleanup] deleted {deleted} expired games (older than {hours:g} hours)")
        else:
            app.logger.info("[cleanup] no expired games found")
        return deleted


def start_cleanup_scheduler(app) -> bool:
    """Start the hourly sweep as a background task. Returns False if not started.

    - No-ops in TESTING mode or when ENABLE_CLEANUP_SCHEDULER is off
    - At most one loop per process
    - Sweeps once immediately, then every CLEANUP_INTERVAL_SEC
    """
    if app.config.get('TESTING') or not app.config.get('ENABLE_CLEANUP_SCHEDULER', True):
        return False
    if _scheduler_state['running']:
        return False

    interval = int(app.config.get('CLEANUP_INTERVAL_SEC', 3600))
    _scheduler_state['running'] = True
    _scheduler_state['stop'] = False
    app.logger.info(f"[cleanup-start] interval={interval}s")

    def _worker():
        try:
            while not _scheduler_state['stop']:
                run_cleanup(app)
                socketio.sleep(interval)
        finally:
            _scheduler_state['running'] = False

    socketio.start_background_task(_worker)
    return True


def stop_cleanup_scheduler() -> None:
    """Ask the loop to exit after its current sleep."""
    _scheduler_state['stop'] = True
