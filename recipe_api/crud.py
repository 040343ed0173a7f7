import logging

from sqlalchemy import func
from sqlalchemy.orm import Session, selectinload

from . import models, schemas
from .exceptions import ValidationError

logger = logging.getLogger(__name__)


def get_categories(db: Session):
    return db.query(models.Category).order_by(models.Category.id).all()


def get_category_by_name(db: Session, name: str):
    return (
        db.query(models.Category)
        .filter(models.Category.category_name == name)
        .first()
    )


def get_recipes_by_category(db: Session, category: str):
    return (
        db.query(models.Recipe)
        .options(selectinload(models.Recipe.ingredients))
        .filter(models.Recipe.category == category)
        .order_by(models.Recipe.id)
        .all()
    )


def get_random_recipe(db: Session):
    """Return one recipe picked uniformly at random, or None if empty."""
    return (
        db.query(models.Recipe)
        .options(selectinload(models.Recipe.ingredients))
        .order_by(func.random())
        .first()
    )


def create_recipe(db: Session, recipe: schemas.RecipeCreate):
    """Insert a recipe and its ingredients as a single transaction."""
    if get_category_by_name(db, recipe.category) is None:
        logger.info("Rejected recipe with unknown category %r", recipe.category)
        raise ValidationError(f"Unknown category: {recipe.category}")

    db_recipe = models.Recipe(
        title=recipe.title,
        category=recipe.category,
        instructions=recipe.instructions,
        image=recipe.image,
        youtube=recipe.youtube,
        ingredients=[
            models.Ingredient(
                ingredient=i.ingredient, measurement=i.measurement
            )
            for i in recipe.ingredients
        ],
    )
    try:
        db.add(db_recipe)
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(db_recipe)
    logger.info(
        "Created recipe %s (%s) with %d ingredient(s)",
        db_recipe.id,
        db_recipe.title,
        len(db_recipe.ingredients),
    )
    return db_recipe
