"""Seeding helpers for bootstrap user accounts.

``seed_users`` ensures every configured account exists. Existing accounts
are left untouched (their password is not reset) so this can be safely
re-run on every deployment. Credentials come from ``Settings.seed_users``;
passwords are hashed before storage and never logged.
"""

from __future__ import annotations
import logging
from pathlib import Path
from typing import Iterable, List, Optional

from cashdesk.core.config import Settings, get_settings
from cashdesk.core.logging import init_logging, new_trace_id, trace_id_ctx
from cashdesk.models.user import SeedOutcome, SeedUser
from cashdesk.services.passwords import DEFAULT_ROUNDS, hash_password

from .dal import Database
from .schema import init_db

logger = logging.getLogger("cashdesk.seed")


def seed_users(
    db_path: Path, users: Iterable[SeedUser], rounds: int = DEFAULT_ROUNDS
) -> List[SeedOutcome]:
    init_db(db_path)  # ensure tables exist
    outcomes: List[SeedOutcome] = []
    with Database(db_path) as db:
        for user in users:
            if db.find_user(user.username):
                logger.info(
                    "user %s already exists, skipping",
                    user.username,
                    extra={"event": "seed_user", "username": user.username, "role": user.role, "seed_status": "skipped"},
                )
                outcomes.append(SeedOutcome(username=user.username, role=user.role, created=False))
                continue
            password_hash = hash_password(user.password.get_secret_value(), rounds=rounds)
            db.create_user(user.username, password_hash, user.role)
            logger.info(
                "user %s created (role=%s)",
                user.username,
                user.role,
                extra={"event": "seed_user", "username": user.username, "role": user.role, "seed_status": "created"},
            )
            outcomes.append(SeedOutcome(username=user.username, role=user.role, created=True))
    return outcomes


def run_seed(settings: Optional[Settings] = None) -> int:
    """Entry point used by scripts/seed_users.py; returns the process exit code."""
    token = trace_id_ctx.set(new_trace_id())
    try:
        if settings is None:
            # a malformed SEED_USERS fails here and still needs to be logged
            init_logging()
            settings = get_settings()
        init_logging(debug=settings.debug)
        if not settings.seed_users:
            logger.warning("no seed users configured (set SEED_USERS); nothing to do")
            return 0
        outcomes = seed_users(
            settings.db_path,  # type: ignore[arg-type]
            settings.seed_users,
            rounds=settings.password_hash_rounds,
        )
        created = sum(1 for o in outcomes if o.created)
        present = len(outcomes) - created
        logger.info(
            "seeding finished: %d created, %d already present",
            created,
            present,
            extra={"event": "seed_run", "created_count": created, "present_count": present},
        )
        return 0
    except Exception:
        logger.exception("seeding failed")
        return 1
    finally:
        trace_id_ctx.reset(token)
