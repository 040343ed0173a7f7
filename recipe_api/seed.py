import logging

from sqlalchemy.orm import Session

from . import models
from .db import Base, init_db
from .recipes import DEFAULT_SEED_FILE, load_seed_data

logger = logging.getLogger(__name__)


def seed_database(bind, db: Session, path=DEFAULT_SEED_FILE):
    """Drop and recreate all tables, then insert the seed rows.

    Ids restart from 1 each time, so callers get the same state on every run.
    Returns ``(category_count, recipe_count)``.
    """
    data = load_seed_data(path)

    Base.metadata.drop_all(bind=bind)
    init_db(bind)

    for name in data["categories"]:
        db.add(models.Category(category_name=name))
    db.flush()

    categories = set(data["categories"])
    added = 0
    for r in data["recipes"]:
        title = r.get("title")
        if not title:
            continue
        if r.get("category") not in categories:
            logger.warning(
                "Skipping seed recipe %r: unknown category %r",
                title,
                r.get("category"),
            )
            continue
        db.add(
            models.Recipe(
                title=title,
                category=r["category"],
                instructions=r.get("instructions", ""),
                image=r.get("image", ""),
                youtube=r.get("youtube", ""),
                ingredients=[
                    models.Ingredient(
                        ingredient=i["ingredient"],
                        measurement=i.get("measurement", ""),
                    )
                    for i in r.get("ingredients", [])
                ],
            )
        )
        added += 1
    db.commit()
    logger.info(
        "Seeded %d categories and %d recipes", len(data["categories"]), added
    )
    return len(data["categories"]), added
