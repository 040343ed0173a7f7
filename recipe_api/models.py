from sqlalchemy import Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from .db import Base


class Category(Base):
    __tablename__ = "categories"
    id = Column(Integer, primary_key=True, index=True)
    category_name = Column(String(100), unique=True, nullable=False)

    recipes = relationship("Recipe", back_populates="category_ref")


class Recipe(Base):
    __tablename__ = "recipes"
    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(200), nullable=False)
    category = Column(
        String(100),
        ForeignKey("categories.category_name"),
        index=True,
        nullable=False,
    )
    instructions = Column(Text, nullable=False)
    image = Column(String(500), nullable=False, default="")
    youtube = Column(String(500), nullable=False, default="")

    category_ref = relationship("Category", back_populates="recipes")
    ingredients = relationship(
        "Ingredient",
        back_populates="recipe",
        order_by="Ingredient.id",
        cascade="all, delete-orphan",
    )


class Ingredient(Base):
    __tablename__ = "ingredients"
    id = Column(Integer, primary_key=True)
    ingredient = Column(String(200), nullable=False)
    measurement = Column(String(200), nullable=False, default="")
    recipe_id = Column(
        Integer, ForeignKey("recipes.id"), index=True, nullable=False
    )

    recipe = relationship("Recipe", back_populates="ingredients")
